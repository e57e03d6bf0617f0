"""Pydantic data models for plays, invoices and statements."""

from enum import Enum
from typing import Mapping, Tuple

from pydantic import BaseModel, Field, model_validator

from theater.exceptions import UnknownPlayTypeError


class PlayType(str, Enum):
    """Play types that have a pricing rule."""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"

    @classmethod
    def parse(cls, value: str) -> "PlayType":
        """Resolve a play type string, rejecting anything without a rule."""
        try:
            return cls(value)
        except ValueError:
            raise UnknownPlayTypeError(value) from None


class Play(BaseModel):
    """Catalog entry for a play. The identifier is the catalog key."""

    model_config = {"frozen": True}

    name: str = Field(..., description="Display name")
    type: str = Field(..., description="Play type, e.g. tragedy or comedy")


class Performance(BaseModel):
    """Single performance on an invoice."""

    model_config = {"frozen": True, "populate_by_name": True}

    play_id: str = Field(..., alias="playID", description="Catalog key of the play")
    audience: int = Field(..., ge=0, description="Number of seats sold")


class Invoice(BaseModel):
    """Customer invoice; performance order is the statement line order."""

    model_config = {"frozen": True}

    customer: str = Field(..., description="Customer display name")
    performances: Tuple[Performance, ...] = Field(
        default=(), description="Performances in billing order"
    )


PlayCatalog = Mapping[str, Play]


class StatementLine(BaseModel):
    """Priced line item for one performance."""

    model_config = {"frozen": True}

    play_name: str
    audience: int = Field(..., ge=0)
    amount: int = Field(..., ge=0, description="Charge in cents")
    volume_credits: int = Field(..., ge=0)


class StatementData(BaseModel):
    """Everything a renderer needs to print a statement."""

    model_config = {"frozen": True}

    customer: str
    lines: Tuple[StatementLine, ...] = ()
    total_amount: int = Field(..., ge=0, description="Total charge in cents")
    total_volume_credits: int = Field(..., ge=0)

    @model_validator(mode="after")
    def validate_totals(self) -> "StatementData":
        """Totals must be the sums of the line items."""
        if self.total_amount != sum(line.amount for line in self.lines):
            raise ValueError("total_amount must equal the sum of line amounts")
        if self.total_volume_credits != sum(line.volume_credits for line in self.lines):
            raise ValueError(
                "total_volume_credits must equal the sum of line volume credits"
            )
        return self
