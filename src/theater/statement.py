"""Statement generation for customer invoices."""

import logging
import os
from typing import Optional

from theater.config import FeeSchedule
from theater.exceptions import UnknownPlayError
from theater.models import (
    Invoice,
    Performance,
    Play,
    PlayCatalog,
    StatementData,
    StatementLine,
)
from theater.pricing import price_performance, usd

logger = logging.getLogger(__name__)


def _play_for(performance: Performance, plays: PlayCatalog) -> Play:
    try:
        return plays[performance.play_id]
    except KeyError:
        raise UnknownPlayError(performance.play_id) from None


def create_statement_data(
    invoice: Invoice, plays: PlayCatalog, fees: FeeSchedule
) -> StatementData:
    """Price every performance on the invoice and aggregate the totals."""
    lines = []
    for performance in invoice.performances:
        play = _play_for(performance, plays)
        charge = price_performance(performance, play, fees)
        lines.append(
            StatementLine(
                play_name=play.name,
                audience=performance.audience,
                amount=charge.amount,
                volume_credits=charge.volume_credits,
            )
        )

    data = StatementData(
        customer=invoice.customer,
        lines=tuple(lines),
        total_amount=sum(line.amount for line in lines),
        total_volume_credits=sum(line.volume_credits for line in lines),
    )
    logger.debug(
        "Statement for %s: %d lines, %d cents, %d credits",
        data.customer,
        len(data.lines),
        data.total_amount,
        data.total_volume_credits,
    )
    return data


def render_plain_text(data: StatementData, fees: FeeSchedule) -> str:
    """Render statement data as text, one line per performance."""
    result = [f"Statement for {data.customer}"]
    for line in data.lines:
        result.append(
            f"  {line.play_name}: {usd(line.amount, fees.percent_factor)} "
            f"({line.audience} seats)"
        )
    result.append(f"Amount owed is {usd(data.total_amount, fees.percent_factor)}")
    result.append(f"You earned {data.total_volume_credits} credits")
    return "".join(text + os.linesep for text in result)


class StatementPrinter:
    """Generate a statement for one invoice against a play catalog."""

    def __init__(
        self,
        invoice: Invoice,
        plays: PlayCatalog,
        fee_schedule: Optional[FeeSchedule] = None,
    ):
        self._invoice = invoice
        self._plays = plays
        self._fee_schedule = fee_schedule if fee_schedule is not None else FeeSchedule()

    @property
    def invoice(self) -> Invoice:
        return self._invoice

    @property
    def plays(self) -> PlayCatalog:
        return self._plays

    @property
    def fee_schedule(self) -> FeeSchedule:
        return self._fee_schedule

    def statement_data(self) -> StatementData:
        """
        Price the invoice without rendering it.

        Raises:
            UnknownPlayError: if a performance references a missing play.
            UnknownPlayTypeError: if a play type has no pricing rule.
        """
        return create_statement_data(self._invoice, self._plays, self._fee_schedule)

    def statement(self) -> str:
        """Return the formatted statement text."""
        return render_plain_text(self.statement_data(), self._fee_schedule)


def statement(
    invoice: Invoice,
    plays: PlayCatalog,
    fee_schedule: Optional[FeeSchedule] = None,
) -> str:
    """Return the formatted statement for an invoice."""
    return StatementPrinter(invoice, plays, fee_schedule).statement()
