"""Year-by-year superannuation projection."""

from __future__ import annotations

from decimal import Decimal, localcontext, ROUND_HALF_EVEN
from typing import List

from supercalc.core.errors import (
    CurrentAgeOutOfRange,
    InvalidAgeOrdering,
    NegativeBalance,
    NonPositiveSalary,
    RetirementAgeOutOfRange,
)
from supercalc.models import ProjectionRequest, ProjectionResult, YearlyProjection

# fixed jurisdictional rules, not configurable
CONCESSIONAL_CAP = Decimal("27500")
CONTRIBUTION_TAX = Decimal("0.15")

MIN_CURRENT_AGE, MAX_CURRENT_AGE = 18, 100
MIN_RETIREMENT_AGE, MAX_RETIREMENT_AGE = 55, 100

DECIMAL_PRECISION = 28
HUNDRED = Decimal(100)


def validate_request(request: ProjectionRequest) -> None:
    """Raise the first failing rule, checked in a fixed order."""
    if request.retirement_age <= request.current_age:
        raise InvalidAgeOrdering()
    if not MIN_CURRENT_AGE <= request.current_age <= MAX_CURRENT_AGE:
        raise CurrentAgeOutOfRange()
    if not MIN_RETIREMENT_AGE <= request.retirement_age <= MAX_RETIREMENT_AGE:
        raise RetirementAgeOutOfRange()
    if request.current_balance < 0:
        raise NegativeBalance()
    if request.annual_salary <= 0:
        raise NonPositiveSalary()


def simulate(request: ProjectionRequest) -> ProjectionResult:
    """
    Run the projection without validating the request.

    Per year (salary and balance carried over from the previous year):
      1) employer contribution = salary * employer rate, capped at CONCESSIONAL_CAP
      2) net contribution = employer contribution less CONTRIBUTION_TAX
      3) earnings on the opening balance plus half the net contribution
         (mid-year convention)
      4) closing = opening + net contribution + earnings
      5) salary grows by salary_growth_rate for the next year

    The final balance is then discounted by (1 + inflation)^years. All figures
    stay in Decimal at full precision; (1 + r)^n uses Decimal integer
    exponentiation. Rounding to cents is left to the caller.

    A zero-year horizon returns an empty ledger with the final balance equal to
    the current balance.
    """
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        ctx.rounding = ROUND_HALF_EVEN

        years = max(0, request.years_to_retirement)
        contribution_rate = request.employer_contribution_rate / HUNDRED
        return_rate = request.expected_return_rate / HUNDRED
        salary_growth = 1 + request.salary_growth_rate / HUNDRED
        net_of_tax = 1 - CONTRIBUTION_TAX

        balance = request.current_balance
        salary = request.annual_salary
        total_contributions = Decimal(0)
        rows: List[YearlyProjection] = []

        for year in range(1, years + 1):
            employer_contribution = min(salary * contribution_rate, CONCESSIONAL_CAP)
            net_contribution = employer_contribution * net_of_tax
            earnings = (balance + net_contribution / 2) * return_rate
            closing_balance = balance + net_contribution + earnings

            rows.append(
                YearlyProjection(
                    year=year,
                    age=request.current_age + year,
                    opening_balance=balance,
                    contributions=net_contribution,
                    earnings=earnings,
                    closing_balance=closing_balance,
                )
            )

            total_contributions += net_contribution
            balance = closing_balance
            salary *= salary_growth

        final_balance = balance
        deflator = (1 + request.inflation_rate / HUNDRED) ** years

        return ProjectionResult(
            final_balance=final_balance,
            total_contributions=total_contributions,
            total_earnings=final_balance - request.current_balance - total_contributions,
            inflation_adjusted_balance=final_balance / deflator,
            yearly_breakdown=tuple(rows),
        )


def project(request: ProjectionRequest) -> ProjectionResult:
    """Validate the request, then run the projection.

    Raises a ProjectionValidationError subclass before any simulation work
    when the request breaks one of the rules in validate_request.
    """
    validate_request(request)
    return simulate(request)


__all__ = [
    "CONCESSIONAL_CAP",
    "CONTRIBUTION_TAX",
    "validate_request",
    "simulate",
    "project",
]
