"""Data contracts for the projection endpoints."""

from datetime import datetime
from decimal import Decimal, ROUND_HALF_EVEN, localcontext
from typing import Any, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from supercalc.models import ProjectionResult

CENT = Decimal("0.01")
MIN_PRECISION = 28


def cents_precision(values: Iterable[Decimal]) -> int:
    """Digits needed to hold every finite value to the cent without rounding."""
    digits = [value.adjusted() for value in values if value.is_finite()]
    return max([MIN_PRECISION] + [d + 5 for d in digits])


def to_cents(value: Decimal) -> Decimal:
    """Round half-even to two places; non-finite values pass through."""
    if not value.is_finite():
        return value
    with localcontext() as ctx:
        ctx.prec = cents_precision([value])
        return value.quantize(CENT, rounding=ROUND_HALF_EVEN)


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class YearlyProjectionOut(ApiModel):
    """Single row of the yearly breakdown."""

    year: int = Field(..., ge=1)
    age: int
    opening_balance: float
    contributions: float
    earnings: float
    closing_balance: float


class ProjectionResultOut(ApiModel):
    """Summary figures plus the full yearly breakdown."""

    final_balance: float
    total_contributions: float
    total_earnings: float
    inflation_adjusted_balance: float
    yearly_breakdown: List[YearlyProjectionOut]

    @classmethod
    def from_result(cls, result: ProjectionResult, current_balance: Decimal) -> "ProjectionResultOut":
        """
        Round a projection to cents without breaking its reconciliation.

        Balances and contributions are rounded; earnings are then derived from
        the rounded figures, so on the published numbers
          closing == opening + contributions + earnings          (every row)
          total earnings == final - current - total contributions
        still hold exactly. Total contributions is the sum of the rounded
        yearly contributions.
        """
        figures = [
            current_balance,
            result.final_balance,
            result.total_contributions,
            result.inflation_adjusted_balance,
        ]
        for row in result.yearly_breakdown:
            figures.extend((row.opening_balance, row.contributions, row.closing_balance))

        with localcontext() as ctx:
            # wide enough that sums of rounded figures stay exact
            ctx.prec = cents_precision(figures) + 2

            rows: List[YearlyProjectionOut] = []
            total_contributions = Decimal(0)
            for row in result.yearly_breakdown:
                opening = to_cents(row.opening_balance)
                contributions = to_cents(row.contributions)
                closing = to_cents(row.closing_balance)
                total_contributions += contributions
                rows.append(
                    YearlyProjectionOut(
                        year=row.year,
                        age=row.age,
                        opening_balance=float(opening),
                        contributions=float(contributions),
                        earnings=float(closing - opening - contributions),
                        closing_balance=float(closing),
                    )
                )

            start = to_cents(current_balance)
            final = to_cents(result.final_balance)
            return cls(
                final_balance=float(final),
                total_contributions=float(total_contributions),
                total_earnings=float(final - start - total_contributions),
                inflation_adjusted_balance=float(to_cents(result.inflation_adjusted_balance)),
                yearly_breakdown=rows,
            )


class ProjectionResponse(ApiModel):
    """Success/failure envelope returned by the calculate endpoint."""

    is_success: bool
    value: Optional[ProjectionResultOut] = None
    error: Optional[str] = None


class ScenarioQuery(BaseModel):
    """Query string of the scenarios endpoint."""

    age: int = Field(30, ge=0)
    balance: Decimal = Field(Decimal("50000"), ge=0)


class ScenarioOut(ApiModel):
    name: str
    return_rate: float
    description: str
    illustrative_balance: float

    @field_validator("return_rate", "illustrative_balance", mode="before")
    @classmethod
    def round_currency(cls, value: Any) -> Any:
        if isinstance(value, Decimal):
            return float(to_cents(value))
        return value


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
