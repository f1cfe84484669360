"""Tests for benefits cost projection.

Pure functions - no config or storage involved.
"""

import pytest
from pydantic import ValidationError

from benefitscalc.sdk.cost import (
    PAY_PERIODS_PER_YEAR,
    calculate_benefits_cost,
    cost_breakdown,
    dependent_annual_cost,
    is_discounted,
    total_annual_cost,
)
from benefitscalc.sdk.schemas import DependentInfo, DependentType, NameInfo


def make_dependent(first: str, dep_type: DependentType, dependent_id: str = None, last: str = "Simpson"):
    """Create a dependent for testing."""
    return DependentInfo(
        dependent_id=dependent_id or first.lower(),
        legal_name=NameInfo(first=first, last=last),
        type=dep_type,
    )


class TestPerPaycheckCost:
    """Per-paycheck cost for known dependent lists."""

    def test_single_employee(self):
        """1000/26 = 38.4615... is charged as 38.47 per paycheck."""
        assert calculate_benefits_cost([make_dependent("Homer", DependentType.SELF)]) == 38.47

    def test_single_employee_with_discount(self):
        """Names starting with 'A' get 10% off: 900/26 = 34.615... -> 34.62."""
        assert calculate_benefits_cost([make_dependent("Andrea", DependentType.SELF)]) == 34.62

    def test_employee_and_child(self):
        """(900 + 500)/26 = 53.846... -> 53.85."""
        dependents = [
            make_dependent("Andrea", DependentType.SELF),
            make_dependent("Bart", DependentType.CHILD),
        ]
        assert calculate_benefits_cost(dependents) == 53.85

    def test_whole_family(self):
        """(1000 + 4 * 500)/26 = 115.384... -> 115.39."""
        dependents = [
            make_dependent("Homer", DependentType.SELF),
            make_dependent("Marge", DependentType.SPOUSE),
            make_dependent("Bart", DependentType.CHILD),
            make_dependent("Lisa", DependentType.CHILD),
            make_dependent("Maggie", DependentType.CHILD),
        ]
        assert calculate_benefits_cost(dependents) == 115.39

    def test_exact_division_is_not_rounded_up(self):
        """(1000 + 500 + 450)/26 = 75 exactly stays 75.00."""
        dependents = [
            make_dependent("Homer", DependentType.SELF),
            make_dependent("Bart", DependentType.CHILD),
            make_dependent("Abe", DependentType.CHILD),
        ]
        assert calculate_benefits_cost(dependents) == 75.0

    def test_empty_list_costs_nothing(self):
        assert calculate_benefits_cost([]) == 0.0

    def test_order_does_not_matter(self):
        dependents = [
            make_dependent("Homer", DependentType.SELF),
            make_dependent("Abe", DependentType.UNKNOWN),
            make_dependent("Marge", DependentType.SPOUSE),
        ]
        assert calculate_benefits_cost(dependents) == calculate_benefits_cost(list(reversed(dependents)))

    def test_result_is_at_least_annual_share(self):
        """Rounding is upward: 26 paychecks always cover the annual total."""
        dependents = [
            make_dependent("Homer", DependentType.SELF),
            make_dependent("Marge", DependentType.SPOUSE),
        ]
        per_paycheck = calculate_benefits_cost(dependents)
        assert per_paycheck * PAY_PERIODS_PER_YEAR >= total_annual_cost(dependents)
        assert (per_paycheck - 0.01) * PAY_PERIODS_PER_YEAR < total_annual_cost(dependents)


class TestAnnualCost:
    """Per-person annual pricing."""

    @pytest.mark.parametrize("dep_type", [DependentType.SPOUSE, DependentType.CHILD, DependentType.UNKNOWN])
    def test_non_self_types_are_charged_dependent_rate(self, dep_type):
        assert dependent_annual_cost(make_dependent("Homer", dep_type)) == 500.0

    def test_self_is_charged_employee_rate(self):
        assert dependent_annual_cost(make_dependent("Homer", DependentType.SELF)) == 1000.0

    def test_dependent_without_type_is_rejected(self):
        """An untyped dependent cannot be priced, so it never validates."""
        with pytest.raises(ValidationError) as exc_info:
            DependentInfo.model_validate({"dependentId": "1", "legalName": {"first": "Homer", "last": "Simpson"}})

        assert exc_info.value.errors()[0]["loc"] == ("type",)

    def test_discount_applies_to_dependents(self):
        assert dependent_annual_cost(make_dependent("Abe", DependentType.CHILD)) == 450.0

    def test_discount_is_case_sensitive(self):
        """Lowercase 'a' does not qualify."""
        dependent = make_dependent("andrea", DependentType.SELF)
        assert not is_discounted(dependent)
        assert dependent_annual_cost(dependent) == 1000.0

    def test_accented_a_does_not_qualify(self):
        """Only ASCII 'A' qualifies; 'Á' is charged full price."""
        dependent = make_dependent("Ádám", DependentType.SELF)
        assert not is_discounted(dependent)
        assert calculate_benefits_cost([dependent]) == 38.47

    def test_last_name_is_ignored(self):
        dependent = make_dependent("Homer", DependentType.SELF, last="Adams")
        assert not is_discounted(dependent)


class TestCostBreakdown:
    """Breakdown used by the CLI and MCP tools."""

    def test_breakdown_matches_totals(self):
        dependents = [
            make_dependent("Andrea", DependentType.SELF, dependent_id="d1"),
            make_dependent("Bart", DependentType.CHILD, dependent_id="d2"),
        ]

        breakdown = cost_breakdown(dependents)

        assert breakdown.pay_periods == 26
        assert breakdown.total_annual_cost == 1400.0
        assert breakdown.per_paycheck_cost == 53.85
        assert [(e.dependent_id, e.discounted, e.annual_cost) for e in breakdown.entries] == [
            ("d1", True, 900.0),
            ("d2", False, 500.0),
        ]

    def test_breakdown_serializes_with_camel_case(self):
        record = cost_breakdown([make_dependent("Homer", DependentType.SELF)]).to_record()

        assert record["perPaycheckCost"] == 38.47
        assert record["totalAnnualCost"] == 1000.0
        assert record["entries"][0]["type"] == "self"
