"""Per-performance charges and volume credits."""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Dict

from theater.config import FeeSchedule
from theater.models import Performance, Play, PlayType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PerformanceCharge:
    """Computed charge for a single performance."""

    amount: int
    volume_credits: int


def _tragedy_amount(audience: int, fees: FeeSchedule) -> int:
    result = fees.tragedy_base_amount
    if audience > fees.tragedy_audience_threshold:
        # Overflow counts heads above the credit threshold, not the tragedy one
        result += fees.tragedy_over_base_capacity_per_person * (
            audience - fees.base_volume_credit_threshold
        )
    return result


def _comedy_amount(audience: int, fees: FeeSchedule) -> int:
    result = fees.comedy_base_amount
    if audience > fees.comedy_audience_threshold:
        result += fees.comedy_over_base_capacity_amount + (
            fees.comedy_over_base_capacity_per_person
            * (audience - fees.comedy_audience_threshold)
        )
    result += fees.comedy_amount_per_audience * audience
    return result


_AMOUNT_RULES: Dict[PlayType, Callable[[int, FeeSchedule], int]] = {
    PlayType.TRAGEDY: _tragedy_amount,
    PlayType.COMEDY: _comedy_amount,
}


def _volume_credits(audience: int, play_type: PlayType, fees: FeeSchedule) -> int:
    result = max(audience - fees.base_volume_credit_threshold, 0)
    if play_type is PlayType.COMEDY:
        result += audience // fees.comedy_extra_volume_factor
    return result


def amount_for(performance: Performance, play: Play, fees: FeeSchedule) -> int:
    """Return the charge for a performance in cents.

    Raises:
        UnknownPlayTypeError: if the play's type has no pricing rule.
    """
    play_type = PlayType.parse(play.type)
    return _AMOUNT_RULES[play_type](performance.audience, fees)


def volume_credits_for(performance: Performance, play: Play, fees: FeeSchedule) -> int:
    """Return the volume credits a performance earns."""
    play_type = PlayType.parse(play.type)
    return _volume_credits(performance.audience, play_type, fees)


def price_performance(
    performance: Performance, play: Play, fees: FeeSchedule
) -> PerformanceCharge:
    """Compute charge and volume credits for one performance."""
    play_type = PlayType.parse(play.type)
    charge = PerformanceCharge(
        amount=_AMOUNT_RULES[play_type](performance.audience, fees),
        volume_credits=_volume_credits(performance.audience, play_type, fees),
    )
    logger.debug(
        "Priced %s (%s, %d seats): %d cents, %d credits",
        play.name,
        play.type,
        performance.audience,
        charge.amount,
        charge.volume_credits,
    )
    return charge


def usd(amount_cents: int, percent_factor: int) -> str:
    """Format an amount in cents as US dollars, e.g. ``$1,730.00``."""
    dollars = Decimal(amount_cents) / Decimal(percent_factor)
    return f"${dollars:,.2f}"
