"""CLI entrypoint for the number padder."""

from __future__ import annotations

import re
from typing import Annotated

import typer

from .padding import pad_numbers

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    help="Left-pad whole numbers in a string with zeros.",
)

USAGE = 'Usage: deficheck-pad "<input string>" <width>'
EXAMPLE = 'Example: deficheck-pad "James Bond 7" 3'

# Optional sign and ASCII digits only
_WIDTH = re.compile(r"[+-]?[0-9]+")
_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True}
)
def pad(
    ctx: typer.Context,
    text: Annotated[str | None, typer.Argument(help="Input string.")] = None,
    width: Annotated[
        str | None, typer.Argument(help="Minimum width of each whole number.")
    ] = None,
):
    """Pad every whole number in TEXT to WIDTH characters."""
    if text is None or width is None or ctx.args:
        typer.echo(USAGE)
        typer.echo(EXAMPLE)
        raise typer.Exit(code=1)

    width_value = int(width) if _WIDTH.fullmatch(width) else None
    if width_value is None or not _INT64_MIN <= width_value <= _INT64_MAX:
        typer.echo(f"Error: Invalid width parameter: {width}")
        raise typer.Exit(code=1)

    typer.echo(f"Input:  {text}")
    typer.echo(f"Width:  {width_value}")
    typer.echo(f"Output: {pad_numbers(text, width_value)}")


def run() -> None:
    """Entrypoint used by the console script."""
    app()


if __name__ == "__main__":
    run()
