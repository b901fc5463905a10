import pytest
from typer.testing import CliRunner

from deficheck.padder_cli import app

runner = CliRunner()


def test_pads_numbers():
    result = runner.invoke(app, ["James Bond 7", "3"])

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "Input:  James Bond 7",
        "Width:  3",
        "Output: James Bond 007",
    ]


def test_decimal_fraction_is_preserved():
    result = runner.invoke(app, ["Price is 10.99 dollars", "3"])

    assert result.exit_code == 0
    assert "Output: Price is 010.99 dollars" in result.output


def test_negative_width_leaves_text_unchanged():
    result = runner.invoke(app, ["--", "Test 123", "-1"])

    assert result.exit_code == 0
    assert "Width:  -1" in result.output
    assert "Output: Test 123" in result.output


@pytest.mark.parametrize("args", [[], ["only text"], ["a", "1", "extra"]])
def test_wrong_argument_count_prints_usage(args):
    result = runner.invoke(app, args)

    assert result.exit_code == 1
    assert 'Usage: deficheck-pad "<input string>" <width>' in result.output
    assert 'Example: deficheck-pad "James Bond 7" 3' in result.output


@pytest.mark.parametrize("width", ["abc", "1.5", ""])
def test_invalid_width(width):
    result = runner.invoke(app, ["Test 123", width])

    assert result.exit_code == 1
    assert f"Error: Invalid width parameter: {width}" in result.output


@pytest.mark.parametrize("width", ["1_000", " 3", "3 ", "٣", "+", "9223372036854775808"])
def test_width_must_be_plain_ascii_integer(width):
    result = runner.invoke(app, ["Test 123", width])

    assert result.exit_code == 1
    assert "Error: Invalid width parameter:" in result.output
    assert "Output:" not in result.output


@pytest.mark.parametrize(("width", "expected"), [("+4", "0123"), ("04", "0123")])
def test_signed_and_zero_prefixed_widths(width, expected):
    result = runner.invoke(app, ["Test 123", width])

    assert result.exit_code == 0
    assert f"Output: Test {expected}" in result.output
