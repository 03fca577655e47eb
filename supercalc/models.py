from __future__ import annotations

from decimal import Decimal
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class FrozenModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ProjectionRequest(FrozenModel):
    """Inputs for one superannuation projection.

    Only types are checked here; the age/balance/salary rules are applied in
    order by supercalc.core.superannuation.validate_request so the first
    failing rule is the one reported.
    """

    current_age: int
    retirement_age: int
    current_balance: Decimal
    annual_salary: Decimal

    # percentages, e.g. 11.5 means 11.5%
    employer_contribution_rate: Decimal = Decimal("11.5")
    salary_growth_rate: Decimal = Decimal("3.0")
    expected_return_rate: Decimal = Decimal("7.5")
    inflation_rate: Decimal = Decimal("2.5")

    @property
    def years_to_retirement(self) -> int:
        return self.retirement_age - self.current_age


class YearlyProjection(FrozenModel):
    year: int
    age: int
    opening_balance: Decimal
    contributions: Decimal
    earnings: Decimal
    closing_balance: Decimal


class ProjectionResult(FrozenModel):
    final_balance: Decimal
    total_contributions: Decimal
    total_earnings: Decimal
    inflation_adjusted_balance: Decimal
    yearly_breakdown: Tuple[YearlyProjection, ...] = Field(default_factory=tuple)


class InvestmentScenario(FrozenModel):
    name: str
    return_rate: Decimal
    description: str
    illustrative_balance: Decimal
