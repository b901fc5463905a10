"""Zero-padding for whole-number digit runs inside free text."""

from __future__ import annotations

import re

_DIGIT_RUN = re.compile(r"[0-9]+")


def pad_numbers(text: str, width: int) -> str:
    """Left-pad every whole-number digit run in ``text`` to ``width`` characters.

    A run directly preceded by a ``.`` is treated as a fractional part and
    copied verbatim. Other runs are re-emitted as their integer value,
    zero-padded to at least ``width`` characters and never truncated.
    Everything else, including non-ASCII text, passes through unchanged.

    Args:
        text: Input string.
        width: Minimum width of each whole number; ``<= 0`` disables padding.

    Returns:
        The padded string.

    Examples:
        >>> pad_numbers("James Bond 7", 3)
        'James Bond 007'
        >>> pad_numbers("PI=3.14", 2)
        'PI=03.14'
    """

    def _pad(match: re.Match[str]) -> str:
        run = match.group()
        start = match.start()
        if start > 0 and text[start - 1] == ".":
            return run
        # int(run) without the big-int digit limit
        value = run.lstrip("0") or "0"
        return value.zfill(width)

    return _DIGIT_RUN.sub(_pad, text)
