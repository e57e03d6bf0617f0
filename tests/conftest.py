"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from theater.config import FeeSchedule
from theater.models import Invoice, Performance, Play


@pytest.fixture
def plays() -> dict[str, Play]:
    """Classic three-play catalog."""
    return {
        "hamlet": Play(name="Hamlet", type="tragedy"),
        "as-like": Play(name="As You Like It", type="comedy"),
        "othello": Play(name="Othello", type="tragedy"),
    }


@pytest.fixture
def invoice() -> Invoice:
    """BigCo invoice with mixed tragedy and comedy performances."""
    return Invoice(
        customer="BigCo",
        performances=[
            Performance(play_id="hamlet", audience=55),
            Performance(play_id="as-like", audience=35),
            Performance(play_id="othello", audience=40),
        ],
    )


@pytest.fixture
def fees() -> FeeSchedule:
    """Default fee schedule."""
    return FeeSchedule()


@pytest.fixture
def invoice_files(tmp_path: Path) -> tuple[Path, Path]:
    """Write the classic invoice and play catalog as JSON documents."""
    invoice_file = tmp_path / "invoice.json"
    plays_file = tmp_path / "plays.json"
    invoice_file.write_text(
        json.dumps(
            {
                "customer": "BigCo",
                "performances": [
                    {"playID": "hamlet", "audience": 55},
                    {"playID": "as-like", "audience": 35},
                    {"playID": "othello", "audience": 40},
                ],
            }
        )
    )
    plays_file.write_text(
        json.dumps(
            {
                "hamlet": {"name": "Hamlet", "type": "tragedy"},
                "as-like": {"name": "As You Like It", "type": "comedy"},
                "othello": {"name": "Othello", "type": "tragedy"},
            }
        )
    )
    return invoice_file, plays_file
