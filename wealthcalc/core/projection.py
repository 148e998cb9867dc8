"""Wealth projection engine for SIP and lump-sum investments."""

from __future__ import annotations

import logging
import math
from typing import Dict, List

from wealthcalc.schemas.projection import (
    Frequency,
    InvestmentInput,
    Mode,
    ProjectionResult,
    YearlyPoint,
)

logger = logging.getLogger(__name__)

PERIODS_PER_YEAR: Dict[Frequency, int] = {
    Frequency.DAILY: 365,
    Frequency.WEEKLY: 52,
    Frequency.MONTHLY: 12,
    Frequency.QUARTERLY: 4,
}

DEFAULT_PERIODS_PER_YEAR = PERIODS_PER_YEAR[Frequency.MONTHLY]


def periods_per_year(frequency: object) -> int:
    """Contribution periods per year; anything unrecognised counts as Monthly."""
    try:
        return PERIODS_PER_YEAR[Frequency(frequency)]
    except ValueError:
        return DEFAULT_PERIODS_PER_YEAR


def round_currency(value: float) -> int:
    """Round to a whole currency unit, halves going up."""
    whole = math.floor(value)
    return int(whole + 1 if value - whole >= 0.5 else whole)


def annuity_due_value(amount: float, periodic_rate: float, periods: int) -> float:
    """
    Future value of ``periods`` equal payments made at the START of each period:

        FV = P * ((1 + r)^n - 1) / r * (1 + r)

    With r == 0 nothing compounds and FV is just P * n.
    """
    if periodic_rate == 0:
        return amount * periods
    growth = (1 + periodic_rate) ** periods
    return amount * (growth - 1) / periodic_rate * (1 + periodic_rate)


def project_sip_series(inputs: InvestmentInput) -> List[YearlyPoint]:
    factor = periods_per_year(inputs.frequency)
    periodic_rate = inputs.annual_return_rate / factor / 100

    series: List[YearlyPoint] = []
    for year in range(1, inputs.horizon_years + 1):
        total_periods = year * factor
        invested = inputs.amount * total_periods
        value = annuity_due_value(inputs.amount, periodic_rate, total_periods)
        series.append(
            YearlyPoint(
                year=year,
                invested=round_currency(invested),
                total_value=round_currency(value),
            )
        )
    return series


def project_lumpsum_series(inputs: InvestmentInput) -> List[YearlyPoint]:
    annual_rate = inputs.annual_return_rate / 100
    invested = round_currency(inputs.amount)

    series: List[YearlyPoint] = []
    for year in range(1, inputs.horizon_years + 1):
        value = inputs.amount * (1 + annual_rate) ** year
        series.append(
            YearlyPoint(year=year, invested=invested, total_value=round_currency(value))
        )
    return series


def project(inputs: InvestmentInput) -> ProjectionResult:
    """
    Build the growth curve and summary totals for one set of inputs.

    Summary rules:
      - totalValue is the last year's value (0 when the horizon is empty).
      - totalInvested is recomputed from the inputs, not summed from the series:
        amount * years * periods for SIP, the principal for Lumpsum.
      - estimatedReturns = totalValue - totalInvested on the rounded figures.
    """
    logger.debug(
        "projecting %s over %d years (frequency=%s)",
        inputs.mode.value,
        inputs.horizon_years,
        inputs.frequency.value,
    )

    if inputs.mode == Mode.SIP:
        series = project_sip_series(inputs)
        total_periods = inputs.horizon_years * periods_per_year(inputs.frequency)
        total_invested = round_currency(inputs.amount * total_periods)
    else:
        series = project_lumpsum_series(inputs)
        total_invested = round_currency(inputs.amount)

    total_value = series[-1].total_value if series else 0

    return ProjectionResult(
        total_invested=total_invested,
        estimated_returns=total_value - total_invested,
        total_value=total_value,
        yearly_series=series,
    )


__all__ = [
    "PERIODS_PER_YEAR",
    "periods_per_year",
    "round_currency",
    "annuity_due_value",
    "project_sip_series",
    "project_lumpsum_series",
    "project",
]
