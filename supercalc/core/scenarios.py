"""Investment option presets offered alongside the calculator."""

from __future__ import annotations

from decimal import Decimal
from typing import List, Tuple

from supercalc.core.compound_interest import Number, grow, to_decimal
from supercalc.models import InvestmentScenario

# (name, annual return %, description)
PRESETS: Tuple[Tuple[str, str, str], ...] = (
    ("Conservative", "5.5", "Low risk, steady growth"),
    ("Balanced", "7.5", "Moderate risk, balanced approach"),
    ("Growth", "9.5", "Higher risk, aggressive growth"),
)


def list_scenarios(age: int, balance: Number, retirement_age: int) -> List[InvestmentScenario]:
    """
    Return each preset with the balance it would reach by retirement_age.

    The illustration compounds today's balance only (no contributions), so it
    shows the effect of the return rate in isolation.
    """
    years = max(0, retirement_age - age)
    start = to_decimal(balance)

    return [
        InvestmentScenario(
            name=name,
            return_rate=Decimal(rate),
            description=description,
            illustrative_balance=grow(start, rate, years),
        )
        for name, rate, description in PRESETS
    ]
