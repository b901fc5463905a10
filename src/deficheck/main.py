"""CLI entrypoint for the Raydium quote tool."""

from __future__ import annotations

import json
import logging
import os
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from .constants import PROTOCOL_NAME
from .domain import QuoteRequest, Side
from .errors import InvalidInputError, QuoteError
from .logger import setup_logging
from .report.formatter import render_quote
from .settings import QuoteSettings
from .state import AppState

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    add_help_option=True,
    pretty_exceptions_enable=True,
    pretty_exceptions_short=True,
    pretty_exceptions_show_locals=False,
    rich_markup_mode="rich",
    help="Get a price quote from Raydium DEX on Solana. All pairs denominated in SOL/wSOL.",
)

USAGE_EXAMPLE = (
    "Example: deficheck-quote -token EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v "
    "-qty 100 -side buy"
)


def _build_logger() -> logging.Logger:
    """Build a logger instance."""
    return logging.getLogger("deficheck")


def _fail(message: str) -> typer.Exit:
    typer.echo(f"Error: {message}", err=True)
    return typer.Exit(code=1)


def _parse_quantity(raw: str) -> Decimal:
    try:
        quantity = Decimal(raw.strip())
    except InvalidOperation:
        raise InvalidInputError(f"Invalid quantity: {raw}") from None
    if not quantity.is_finite() or quantity <= 0:
        raise InvalidInputError(f"Invalid quantity: {raw}")
    return quantity


@app.callback(invoke_without_command=True)
def quote(
    token: Annotated[
        str | None,
        typer.Option("--token", "-token", help="Token mint address."),
    ] = None,
    qty: Annotated[
        str | None,
        typer.Option("--qty", "-qty", help="Quantity of SOL to trade (decimal)."),
    ] = None,
    side: Annotated[
        str | None,
        typer.Option("--side", "-side", help="Trade side: buy or sell."),
    ] = None,
    rpc: Annotated[
        str | None,
        typer.Option("--rpc", "-rpc", help="Solana RPC URL; overrides config."),
    ] = None,
    mock: Annotated[
        bool,
        typer.Option("--mock", "-mock", help="Use mock data instead of real blockchain data."),
    ] = False,
    use_api: Annotated[
        bool,
        typer.Option("--api", "-api", help="Use Raydium API to find pools dynamically."),
    ] = False,
    use_onchain: Annotated[
        bool,
        typer.Option(
            "--onchain",
            "-onchain",
            help="Fetch pool reserves directly from the pool's vault accounts.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to a TOML config file (can include [deficheck] table).",
        ),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            help="Override logging verbosity (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL).",
        ),
    ] = None,
    show_config: Annotated[
        bool,
        typer.Option(
            "--show-config",
            help="Print effective config and exit.",
        ),
    ] = False,
):
    """Quote a buy or sell of SOL against a token's Raydium pool.

    Loads configuration, picks the pool source from the mock/api/onchain
    flags, and prints the slippage-adjusted price.
    """
    if config_path:
        os.environ["DEFICHECK_CONFIG"] = str(config_path)

    init_kwargs: dict[str, bool | str] = {}
    if rpc is not None:
        init_kwargs["rpc_url"] = rpc
    if mock:
        init_kwargs["mock"] = True
    if use_api:
        init_kwargs["use_api"] = True
    if use_onchain:
        init_kwargs["use_onchain"] = True
    if log_level is not None:
        init_kwargs["log_level"] = log_level

    try:
        settings = QuoteSettings(**init_kwargs)
    except ValidationError as e:
        raise _fail(f"invalid configuration: {e}")

    setup_logging(settings.log_level)
    state = AppState(settings=settings, logger=_build_logger())

    if show_config:
        typer.echo(json.dumps(settings.as_safe_dict(), indent=2))
        raise typer.Exit(code=0)

    if not token or not qty or not side:
        typer.echo(
            "Usage: deficheck-quote -token <address> -qty <amount> -side <buy|sell>",
            err=True,
        )
        typer.echo(USAGE_EXAMPLE, err=True)
        raise typer.Exit(code=1)

    try:
        request = QuoteRequest(
            token_address=token,
            quantity=_parse_quantity(qty),
            side=Side.parse(side),
        )
    except InvalidInputError as e:
        raise _fail(str(e))

    state.log_pool_source()
    service = state.service

    typer.echo(f"Fetching quote from {PROTOCOL_NAME}...")
    try:
        response = service.get_quote(request)
    except QuoteError as e:
        state.logger.debug("Quote failed", exc_info=True)
        raise _fail(f"Failed to get quote: {e}")

    render_quote(response, request)


def run() -> None:
    """Entrypoint used by the console script."""
    app()


if __name__ == "__main__":
    run()
