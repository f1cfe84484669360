"""Benefits cost projection.

Pricing for the single benefits package:
- $1000/year for the employee (type 'self')
- $500/year for every other covered person (spouse, child, unknown)
- 10% off for anyone whose first name starts with 'A'

The annual total is spread over 26 paychecks. The per-paycheck figure is
rounded up to the cent, so it is an upper bound: 26 deductions of that
amount cover the annual cost, and the last one may be slightly less in
practice.

All functions here are pure; scoping is done by the caller.
"""

from decimal import Decimal, ROUND_CEILING
from typing import Iterable

from .schemas import BenefitsCostBreakdown, DependentCost, DependentInfo, DependentType

PAY_PERIODS_PER_YEAR = 26

EMPLOYEE_ANNUAL_COST = Decimal("1000.0")
DEPENDENT_ANNUAL_COST = Decimal("500.0")

# ASCII 'A' only; accented variants (Á, Â, Ä, Ã) do not qualify.
DISCOUNT_INITIAL = "A"
DISCOUNT_FACTOR = Decimal("0.9")

_CENT = Decimal("0.01")


def is_discounted(dependent: DependentInfo) -> bool:
    """True if the name discount applies (first name starts with 'A')."""
    return dependent.legal_name.first.startswith(DISCOUNT_INITIAL)


def _annual_cost(dependent: DependentInfo) -> Decimal:
    base = EMPLOYEE_ANNUAL_COST if dependent.type == DependentType.SELF else DEPENDENT_ANNUAL_COST
    if is_discounted(dependent):
        return base * DISCOUNT_FACTOR
    return base


def _total(dependents: Iterable[DependentInfo]) -> Decimal:
    return sum((_annual_cost(d) for d in dependents), Decimal(0))


def _per_paycheck(total: Decimal) -> Decimal:
    return (total / PAY_PERIODS_PER_YEAR).quantize(_CENT, rounding=ROUND_CEILING)


def dependent_annual_cost(dependent: DependentInfo) -> float:
    """Annual cost for one covered person, after discount."""
    return float(_annual_cost(dependent))


def total_annual_cost(dependents: Iterable[DependentInfo]) -> float:
    """Annual cost for a whole dependent list."""
    return float(_total(dependents))


def calculate_benefits_cost(dependents: Iterable[DependentInfo]) -> float:
    """Per-paycheck benefits cost for a dependent list.

    Order of dependents does not matter.

    Returns:
        Cost per paycheck, rounded up to the cent
    """
    return float(_per_paycheck(_total(dependents)))


def cost_breakdown(dependents: Iterable[DependentInfo]) -> BenefitsCostBreakdown:
    """Per-person and total cost projection for a dependent list."""
    dependents = list(dependents)
    entries = [
        DependentCost(
            dependent_id=d.dependent_id,
            type=d.type,
            discounted=is_discounted(d),
            annual_cost=float(_annual_cost(d)),
        )
        for d in dependents
    ]
    total = _total(dependents)
    return BenefitsCostBreakdown(
        entries=entries,
        total_annual_cost=float(total),
        pay_periods=PAY_PERIODS_PER_YEAR,
        per_paycheck_cost=float(_per_paycheck(total)),
    )
