"""Tests for theater.__main__ CLI entrypoint behavior."""

from typer.testing import CliRunner

from theater import __main__ as main_module


runner = CliRunner()


def test_main_shows_help_when_no_subcommand():
    """Running without a subcommand should print the CLI help."""
    result = runner.invoke(main_module.app, [])
    assert "Theater Statement CLI" in result.output
    assert "statement" in result.output
