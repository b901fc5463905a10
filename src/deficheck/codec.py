"""Base58 and base64 codecs for Solana account identifiers and data."""

from __future__ import annotations

import base64
import binascii
from typing import Any

import base58

from .errors import DecodeError

BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_ALPHABET_SET = frozenset(BASE58_ALPHABET)


def b58encode(data: bytes) -> str:
    """Encode bytes as base58; each leading zero byte becomes a '1'."""
    return base58.b58encode(bytes(data)).decode("ascii")


def b58decode(text: str) -> bytes:
    """Decode a base58 string; each leading '1' becomes a zero byte.

    Raises:
        DecodeError: If ``text`` contains a character outside the alphabet.
    """
    invalid = sorted({ch for ch in text if ch not in _ALPHABET_SET})
    if invalid:
        raise DecodeError(
            f"Invalid base58 character(s) {''.join(invalid)!r} in {text!r}"
        )
    return base58.b58decode(text)


def b64decode_account_data(payload: Any) -> bytes:
    """Decode the ``[data, "base64"]`` pair carried by an RPC account.

    Raises:
        DecodeError: If the pair is malformed or not valid base64.
    """
    if not isinstance(payload, list) or len(payload) < 2:
        raise DecodeError(f"Invalid account data format: {payload!r}")

    encoded, encoding = payload[0], payload[1]
    if not isinstance(encoded, str) or encoding != "base64":
        raise DecodeError(f"Invalid account data encoding: {encoding!r}")

    try:
        return base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Failed to decode account data: {e}") from e
