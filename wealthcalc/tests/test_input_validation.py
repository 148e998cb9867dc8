from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from wealthcalc.core.projection import periods_per_year, project
from wealthcalc.schemas.projection import MAX_AMOUNT, Frequency, InvestmentInput, Mode


def test_defaults_match_calculator_start_state():
    inputs = InvestmentInput()

    assert inputs.amount == 5000
    assert inputs.annual_return_rate == 12
    assert inputs.horizon_years == 10
    assert inputs.mode is Mode.SIP
    assert inputs.frequency is Frequency.MONTHLY


def test_accepts_camel_case_json_names():
    inputs = InvestmentInput.model_validate(
        {
            "investmentAmount": 2500,
            "expectedReturn": 10.5,
            "periodYears": 7,
            "mode": "Lumpsum",
            "frequency": "Weekly",
        }
    )

    assert inputs.amount == 2500
    assert inputs.annual_return_rate == 10.5
    assert inputs.horizon_years == 7
    assert inputs.mode is Mode.LUMPSUM
    assert inputs.frequency is Frequency.WEEKLY


@pytest.mark.parametrize("tag", ["Fortnightly", "monthly", "", None, 7])
def test_unrecognised_frequency_falls_back_to_monthly(tag):
    inputs = InvestmentInput.model_validate({"frequency": tag})
    assert inputs.frequency is Frequency.MONTHLY

    monthly = InvestmentInput(frequency=Frequency.MONTHLY)
    assert project(inputs) == project(monthly)


def test_periods_per_year_fallback():
    assert periods_per_year("Daily") == 365
    assert periods_per_year(Frequency.WEEKLY) == 52
    assert periods_per_year("Yearly") == 12


@pytest.mark.parametrize(
    "payload",
    [
        {"investmentAmount": -1},
        {"expectedReturn": -0.5},
        {"expectedReturn": 101},
        {"periodYears": -3},
        {"periodYears": 101},
        {"investmentAmount": math.nan},
        {"expectedReturn": math.inf},
        {"mode": "Recurring"},
        {"bonus": 1},
    ],
)
def test_out_of_domain_inputs_are_rejected(payload):
    with pytest.raises(ValidationError):
        InvestmentInput.model_validate(payload)


def test_inputs_are_immutable():
    inputs = InvestmentInput()
    with pytest.raises(ValidationError):
        inputs.amount = 10

    changed = inputs.model_copy(update={"amount": 10})
    assert changed.amount == 10
    assert inputs.amount == 5000


@pytest.mark.parametrize("amount", [0, 1e12 + 1, 1e300])
def test_amount_must_be_positive_and_bounded(amount):
    with pytest.raises(ValidationError):
        InvestmentInput.model_validate({"investmentAmount": amount})


@pytest.mark.parametrize("mode", list(Mode))
@pytest.mark.parametrize("frequency", list(Frequency))
def test_largest_accepted_inputs_project_to_finite_totals(mode, frequency):
    inputs = InvestmentInput.model_validate(
        {
            "investmentAmount": MAX_AMOUNT,
            "expectedReturn": 100,
            "periodYears": 100,
            "mode": mode.value,
            "frequency": frequency.value,
        }
    )
    result = project(inputs)

    assert len(result.yearly_series) == 100
    assert result.total_value > result.total_invested > 0
