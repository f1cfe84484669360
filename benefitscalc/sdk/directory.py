"""Employee directory for the recognized company.

Employees are stored as one list per company under '{company_id}.employees',
in insertion order. Updates never mutate a list that was read: each write
builds a new list of copied records and replaces the stored value.
"""

import logging
from typing import List

from pydantic import ValidationError

from .errors import EmployeeNotFoundError, StorageError
from .schemas import EmployeeInfo
from .scope import ScopeGuard
from .store import RecordStore

logger = logging.getLogger(__name__)


def employees_key(company_id: str) -> str:
    return f"{company_id}.employees"


class EmployeeDirectory:
    """CRUD over the employee list of one company."""

    def __init__(self, store: RecordStore, guard: ScopeGuard):
        self.store = store
        self.guard = guard

    def list_employees(self, company_id: str) -> List[EmployeeInfo]:
        """List employees in storage order.

        The list is provisioned empty on first access.

        Raises:
            UnknownCompanyError: If company_id is not recognized
            StorageError: If the stored list cannot be read or decoded
        """
        self.guard.require_known_company(company_id)
        key = employees_key(company_id)
        raw = self.store.get_or_initialize(key, list)
        try:
            return [EmployeeInfo.model_validate(e) for e in raw]
        except (TypeError, ValidationError) as e:
            raise StorageError(key, f"malformed employee list: {e}") from e

    def get_employee(self, company_id: str, employee_id: str) -> EmployeeInfo:
        """Get a single employee by id.

        Raises:
            UnknownCompanyError: If company_id is not recognized
            EmployeeNotFoundError: If no employee has employee_id
        """
        for employee in self.list_employees(company_id):
            if employee.employee_id == employee_id:
                return employee
        raise EmployeeNotFoundError(employee_id)

    def upsert_employee(self, company_id: str, info: EmployeeInfo) -> None:
        """Add an employee, or rename an existing one.

        If info.employee_id already exists only its legal name is replaced
        (with a copy of info.legal_name); otherwise a copy of info is
        appended. Other employees are untouched.
        """
        employees = self.list_employees(company_id)

        updated = []
        found = False
        for employee in employees:
            if employee.employee_id == info.employee_id:
                employee = employee.model_copy(
                    update={"legal_name": info.legal_name.model_copy(deep=True)}
                )
                found = True
            updated.append(employee)

        if not found:
            updated.append(info.model_copy(deep=True))

        self.store.put(employees_key(company_id), [e.to_record() for e in updated])
        logger.debug(f"{'updated' if found else 'added'} employee {info.employee_id}")

    def remove_employee(self, company_id: str, info: EmployeeInfo) -> None:
        """Remove the employee matching info.employee_id.

        Benefits and payroll records for the employee are left in place.

        Raises:
            UnknownCompanyError: If company_id is not recognized
            EmployeeNotFoundError: If no employee matched; nothing is written
        """
        employees = self.list_employees(company_id)
        remaining = [e for e in employees if e.employee_id != info.employee_id]

        if len(remaining) == len(employees):
            logger.warning(f"remove: no employee with id {info.employee_id}")
            raise EmployeeNotFoundError(info.employee_id)

        self.store.put(employees_key(company_id), [e.to_record() for e in remaining])
        logger.debug(f"removed employee {info.employee_id}")
