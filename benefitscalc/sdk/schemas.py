"""Pydantic schemas for benefits-calc records.

All schemas use extra='forbid' to reject unknown fields. Attributes are
snake_case in Python; the persisted JSON uses camelCase aliases
(employeeId, legalName, ...). Either form is accepted on input.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Record(BaseModel):
    """Base for persisted records."""

    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_record(self) -> Dict[str, Any]:
        """Serialize to the JSON-ready dict stored by the record store.

        Optional fields that are None are omitted.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# =============================================================================
# Names and people
# =============================================================================


class NameInfo(_Record):
    """Legal name. Only first and last are required."""

    prefix: Optional[str] = Field(default=None, description="Honorific, e.g. 'Dr.'")
    first: str = Field(..., description="First (given) name")
    middle: Optional[str] = Field(default=None, description="Middle name")
    last: str = Field(..., description="Last (family) name")
    suffix: Optional[str] = Field(default=None, description="Suffix, e.g. 'Jr.'")


class EmployeeInfo(_Record):
    """An employee of the company. Identity is employee_id."""

    employee_id: str = Field(..., description="Opaque caller-supplied id, stable for the employee's lifetime")
    legal_name: NameInfo


class DependentType(str, Enum):
    """Kind of covered person.

    SELF is the employee's own election, not a literal dependent.
    """

    SELF = "self"
    SPOUSE = "spouse"
    CHILD = "child"
    UNKNOWN = "unknown"


class DependentInfo(_Record):
    """A covered person on one employee's benefits. Identity is dependent_id."""

    dependent_id: str = Field(..., description="Unique within one employee's dependent list")
    legal_name: NameInfo
    type: DependentType = Field(..., description="Relationship to the employee; selects the base price")


# =============================================================================
# Per-employee records
# =============================================================================


class BenefitsInfo(_Record):
    """Benefits election for one employee.

    Dependent order is display order only. At most one SELF and one
    SPOUSE is expected but not enforced.
    """

    dependents: List[DependentInfo] = Field(default_factory=list)
    package_id: str = Field(..., description="Benefits package id")


class PayrollInfo(_Record):
    """Payroll snapshot for one employee (placeholder figures)."""

    gross_paycheck: float = Field(..., description="Gross pay per paycheck")


# =============================================================================
# Cost projection
# =============================================================================


class DependentCost(_Record):
    """Annual cost for a single covered person."""

    dependent_id: str
    type: DependentType
    discounted: bool = Field(..., description="True if the name discount applied")
    annual_cost: float


class BenefitsCostBreakdown(_Record):
    """Full cost projection for a dependent list."""

    entries: List[DependentCost] = Field(default_factory=list)
    total_annual_cost: float
    pay_periods: int
    per_paycheck_cost: float = Field(..., description="Upper-bound deduction per paycheck")
