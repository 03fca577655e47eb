"""Future value of a principal plus level annual contributions."""

from __future__ import annotations

from decimal import Decimal, localcontext
from typing import Union

Number = Union[Decimal, int, float, str]

HUNDRED = Decimal(100)


def to_decimal(value: Number) -> Decimal:
    """Convert to Decimal, going through str() so 7.5 becomes Decimal("7.5")."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def grow(
    principal: Number,
    annual_rate_percent: Number,
    years: int,
    annual_contribution: Number = 0,
) -> Decimal:
    """
    Compound a principal and an annual contribution stream over `years`.

      principal part:     principal * (1 + r)^years
      contribution part:  contribution * ((1 + r)^years - 1) / r
                          contribution * years            (r == 0)

    r is annual_rate_percent / 100. Negative principal or contribution is
    accepted (e.g. a debt being paid down) and simply flows through the
    formula. years == 0 returns the principal unchanged.
    """
    principal = to_decimal(principal)
    contribution = to_decimal(annual_contribution)

    with localcontext() as ctx:
        ctx.prec = 28
        rate = to_decimal(annual_rate_percent) / HUNDRED
        factor = (1 + rate) ** years

        future_principal = principal * factor
        if rate != 0:
            future_contributions = contribution * ((factor - 1) / rate)
        else:
            # limit of the annuity formula as r -> 0
            future_contributions = contribution * years

        return future_principal + future_contributions
