"""Test suite for the theater statement CLI."""

import json

from typer.testing import CliRunner

from theater.cli import app

runner = CliRunner()


def test_cli_statement_text(invoice_files):
    invoice_file, plays_file = invoice_files
    result = runner.invoke(app, ["statement", str(invoice_file), str(plays_file)])
    assert result.exit_code == 0
    assert "Statement for BigCo" in result.output
    assert "  Hamlet: $650.00 (55 seats)" in result.output
    assert "Amount owed is $1,730.00" in result.output
    assert "You earned 47 credits" in result.output


def test_cli_statement_json(invoice_files):
    invoice_file, plays_file = invoice_files
    result = runner.invoke(
        app, ["statement", str(invoice_file), str(plays_file), "--format", "json"]
    )
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["customer"] == "BigCo"
    assert data["total_amount"] == 173000
    assert data["total_volume_credits"] == 47
    assert [line["play_name"] for line in data["lines"]] == [
        "Hamlet",
        "As You Like It",
        "Othello",
    ]


def test_cli_statement_with_output(invoice_files, tmp_path):
    invoice_file, plays_file = invoice_files
    output_file = tmp_path / "out" / "statement.txt"
    result = runner.invoke(
        app,
        ["statement", str(invoice_file), str(plays_file), "--output", str(output_file)],
    )
    assert result.exit_code == 0
    assert output_file.exists()
    assert "You earned 47 credits" in output_file.read_text()


def test_cli_statement_unknown_play_type(invoice_files):
    invoice_file, plays_file = invoice_files
    plays_file.write_text(json.dumps({"hamlet": {"name": "Hamlet", "type": "history"}}))
    result = runner.invoke(app, ["statement", str(invoice_file), str(plays_file)])
    assert result.exit_code == 1
    assert "unknown type: history" in result.output
    assert "Statement for" not in result.output


def test_cli_statement_invalid_file(tmp_path):
    result = runner.invoke(
        app, ["statement", str(tmp_path / "missing.json"), str(tmp_path / "plays.json")]
    )
    assert result.exit_code != 0
    assert "Statement for" not in result.stdout


def test_cli_statement_verbose(invoice_files):
    invoice_file, plays_file = invoice_files
    result = runner.invoke(
        app, ["statement", str(invoice_file), str(plays_file), "--verbose"]
    )
    assert result.exit_code == 0
    assert "Fee schedule:" in result.output
    assert "tragedy_base_amount: 40000" in result.output


def test_cli_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "theater version 0.1.0" in result.output
