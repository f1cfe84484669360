"""Employee API - the contract exposed to presentation collaborators.

CLI commands and MCP tools should be thin wrappers over EmployeeApi. Every
method either returns a value or raises a BenefitsError subclass:

    UnknownCompanyError    company id is not the recognized company
    UnknownPackageError    package id is not the recognized package
    EmployeeNotFoundError  removal target does not exist
    StorageError           the record store failed (cause chained)
"""

from pathlib import Path
from typing import Dict, Iterable, List, Optional

from . import cost
from .config import get_recognized_ids, get_records_dir
from .directory import EmployeeDirectory, employees_key
from .ledger import BenefitsLedger
from .schemas import (
    BenefitsCostBreakdown,
    BenefitsInfo,
    DependentInfo,
    EmployeeInfo,
    PayrollInfo,
)
from .scope import ScopeGuard
from .store import JsonFileStore, RecordStore


class EmployeeApi:
    """Facade over the directory, ledger and cost engine."""

    def __init__(self, store: RecordStore, company_id: str, package_id: str):
        self.store = store
        self.guard = ScopeGuard(company_id, package_id)
        self.directory = EmployeeDirectory(store, self.guard)
        self.ledger = BenefitsLedger(store, self.guard)

    @property
    def company_id(self) -> str:
        return self.guard.company_id

    @property
    def package_id(self) -> str:
        return self.guard.package_id

    # Employees

    def list_employees(self, company_id: str) -> List[EmployeeInfo]:
        return self.directory.list_employees(company_id)

    def get_employee(self, company_id: str, employee_id: str) -> EmployeeInfo:
        return self.directory.get_employee(company_id, employee_id)

    def upsert_employee(self, company_id: str, info: EmployeeInfo) -> None:
        self.directory.upsert_employee(company_id, info)

    def remove_employee(self, company_id: str, info: EmployeeInfo) -> None:
        self.directory.remove_employee(company_id, info)

    # Benefits and payroll

    def get_benefits_info(self, company_id: str, employee_id: str) -> BenefitsInfo:
        return self.ledger.get_benefits_info(company_id, employee_id)

    def update_benefits_info(self, company_id: str, employee_id: str, info: BenefitsInfo) -> None:
        self.ledger.update_benefits_info(company_id, employee_id, info)

    def get_payroll_info(self, company_id: str, employee_id: str) -> PayrollInfo:
        return self.ledger.get_payroll_info(company_id, employee_id)

    # Cost

    def calculate_benefits_cost(
        self, company_id: str, package_id: str, dependents: Iterable[DependentInfo]
    ) -> float:
        """Per-paycheck cost of covering dependents under package_id."""
        self.guard.require_known_company(company_id)
        self.guard.require_known_package(package_id)
        return cost.calculate_benefits_cost(dependents)

    def benefits_cost_breakdown(
        self, company_id: str, package_id: str, dependents: Iterable[DependentInfo]
    ) -> BenefitsCostBreakdown:
        """Like calculate_benefits_cost, with per-person annual costs."""
        self.guard.require_known_company(company_id)
        self.guard.require_known_package(package_id)
        return cost.cost_breakdown(dependents)

    # Storage summary

    def record_counts(self) -> Dict[str, int]:
        """Count stored records by kind without provisioning anything.

        Returns:
            {"employees": entries in the recognized company's list,
             "benefits": benefits elections, "payroll": payroll snapshots}
        """
        employees = self.store.get(employees_key(self.company_id)) or []
        kinds = [key.rsplit(".", 1)[-1] for key in self.store.keys()]
        return {
            "employees": len(employees),
            "benefits": kinds.count("benefits"),
            "payroll": kinds.count("payroll"),
        }


def get_employee_api(records_dir: Optional[Path] = None) -> EmployeeApi:
    """Build an EmployeeApi from configuration.

    Args:
        records_dir: Override the records directory (default: <data_dir>/records)

    Returns:
        EmployeeApi backed by a JsonFileStore, scoped to the profile's ids
    """
    company_id, package_id = get_recognized_ids()
    store = JsonFileStore(records_dir or get_records_dir())
    return EmployeeApi(store, company_id, package_id)
