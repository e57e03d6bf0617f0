"""Theater billing statements."""

from theater.models import Invoice, Performance, Play, PlayType
from theater.statement import StatementPrinter, statement

__all__ = [
    "Invoice",
    "Performance",
    "Play",
    "PlayType",
    "StatementPrinter",
    "statement",
]

__version__ = "0.1.0"
