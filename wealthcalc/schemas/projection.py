"""Data contracts for wealth projections."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

# Keeps every compounded figure finite at the rate and horizon caps below.
MAX_AMOUNT = 1e12


class Mode(str, Enum):
    SIP = "SIP"
    LUMPSUM = "Lumpsum"


class Frequency(str, Enum):
    DAILY = "Daily"
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"
    QUARTERLY = "Quarterly"


class InvestmentInput(BaseModel):
    """Parameters of one projection.

    Frozen: a changed parameter means a new instance (``model_copy(update=...)``).
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        allow_inf_nan=False,
    )

    amount: float = Field(
        5000.0,
        gt=0,
        le=MAX_AMOUNT,
        alias="investmentAmount",
        description="Periodic contribution for SIP, one-time principal for Lumpsum.",
    )
    annual_return_rate: float = Field(
        12.0,
        ge=0,
        le=100,
        alias="expectedReturn",
        description="Annual return as a percentage (12 means 12% p.a.).",
    )
    horizon_years: int = Field(
        10,
        ge=0,
        le=100,
        alias="periodYears",
        description="Number of years to project.",
    )
    mode: Mode = Mode.SIP
    frequency: Frequency = Field(
        Frequency.MONTHLY,
        description="Contribution cadence; ignored for Lumpsum.",
    )

    @field_validator("frequency", mode="before")
    @classmethod
    def fallback_to_monthly(cls, value: Any) -> Any:
        if isinstance(value, Frequency):
            return value
        try:
            return Frequency(value)
        except ValueError:
            logger.warning("unrecognised frequency %r, treating as Monthly", value)
            return Frequency.MONTHLY


class YearlyPoint(BaseModel):
    """Single row of a projection series."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    year: int = Field(..., ge=1)
    invested: int
    total_value: int = Field(..., alias="totalValue")


class ProjectionResult(BaseModel):
    """Summary totals plus the year-by-year series."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total_invested: int = Field(..., alias="totalInvested")
    estimated_returns: int = Field(..., alias="estimatedReturns")
    total_value: int = Field(..., alias="totalValue")
    yearly_series: List[YearlyPoint] = Field(default_factory=list, alias="yearlyData")
