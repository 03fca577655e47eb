from __future__ import annotations

from decimal import Decimal

import pytest

from supercalc.core import superannuation
from supercalc.core.errors import (
    CurrentAgeOutOfRange,
    InvalidAgeOrdering,
    NegativeBalance,
    NonPositiveSalary,
    ProjectionValidationError,
    RetirementAgeOutOfRange,
)
from supercalc.core.superannuation import project, validate_request


@pytest.mark.parametrize("current_age, retirement_age", [(67, 67), (70, 65), (100, 100)])
def test_retirement_age_must_exceed_current_age(current_age, retirement_age, make_request):
    with pytest.raises(InvalidAgeOrdering) as exc_info:
        project(make_request(current_age=current_age, retirement_age=retirement_age))
    assert str(exc_info.value) == "Retirement age must be greater than current age"


@pytest.mark.parametrize("current_age", [17, 0, -5])
def test_current_age_below_range(current_age, make_request):
    with pytest.raises(CurrentAgeOutOfRange) as exc_info:
        project(make_request(current_age=current_age, retirement_age=67))
    assert exc_info.value.message == "Current age must be between 18 and 100"


def test_current_age_above_range(make_request):
    # 101 -> 102 passes the ordering rule, so the range rule is the one that fails
    with pytest.raises(CurrentAgeOutOfRange):
        project(make_request(current_age=101, retirement_age=102))


@pytest.mark.parametrize("retirement_age", [54, 101])
def test_retirement_age_out_of_range(retirement_age, make_request):
    with pytest.raises(RetirementAgeOutOfRange) as exc_info:
        project(make_request(current_age=30, retirement_age=retirement_age))
    assert exc_info.value.message == "Retirement age must be between 55 and 100"


@pytest.mark.parametrize("balance", ["-1000", "-50000", "-0.01"])
def test_negative_balance_rejected(balance, make_request):
    with pytest.raises(NegativeBalance) as exc_info:
        project(make_request(current_balance=Decimal(balance)))
    assert exc_info.value.message == "Current balance cannot be negative"


@pytest.mark.parametrize("salary", ["0", "-50000"])
def test_non_positive_salary_rejected(salary, make_request):
    with pytest.raises(NonPositiveSalary) as exc_info:
        project(make_request(annual_salary=Decimal(salary)))
    assert exc_info.value.message == "Annual salary must be greater than zero"


def test_ordering_rule_is_checked_first(make_request):
    """Both the ordering and the range rule are broken; ordering wins."""
    with pytest.raises(InvalidAgeOrdering):
        validate_request(make_request(current_age=101, retirement_age=30))


def test_first_failing_rule_wins(make_request):
    request = make_request(
        current_age=30,
        retirement_age=54,
        current_balance=Decimal(-1),
        annual_salary=Decimal(0),
    )
    with pytest.raises(RetirementAgeOutOfRange):
        validate_request(request)


def test_all_errors_share_a_base_class():
    for error in (
        InvalidAgeOrdering,
        CurrentAgeOutOfRange,
        RetirementAgeOutOfRange,
        NegativeBalance,
        NonPositiveSalary,
    ):
        assert issubclass(error, ProjectionValidationError)
        assert issubclass(error, ValueError)
        assert error().code == error.__name__


def test_boundary_values_are_valid(make_request):
    request = make_request(
        current_age=18,
        retirement_age=55,
        current_balance=Decimal(0),
        annual_salary=Decimal(1),
    )
    validate_request(request)
    assert len(project(request).yearly_breakdown) == 37


def test_validation_failure_skips_simulation(monkeypatch, make_request):
    calls = []
    monkeypatch.setattr(superannuation, "simulate", lambda request: calls.append(request))

    with pytest.raises(InvalidAgeOrdering):
        project(make_request(current_age=67, retirement_age=67))
    assert calls == []
