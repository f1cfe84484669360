"""Benefits and payroll records per employee.

Records are keyed by employee id alone ('{employee_id}.benefits',
'{employee_id}.payroll'). Reads provision defaults on first access and do
not check that the employee exists in the directory.
"""

import logging
from typing import Any, Callable, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .errors import StorageError
from .schemas import BenefitsInfo, PayrollInfo
from .scope import ScopeGuard
from .store import RecordStore

logger = logging.getLogger(__name__)

DEFAULT_GROSS_PAYCHECK = 2000

ModelT = TypeVar("ModelT", bound=BaseModel)


def benefits_key(employee_id: str) -> str:
    return f"{employee_id}.benefits"


def payroll_key(employee_id: str) -> str:
    return f"{employee_id}.payroll"


class BenefitsLedger:
    """Dependents, package selection and payroll snapshot per employee.

    Only package validity is enforced. Self/spouse cardinality and
    employee existence are not checked.
    """

    def __init__(self, store: RecordStore, guard: ScopeGuard):
        self.store = store
        self.guard = guard

    def _read(self, key: str, model: Type[ModelT], default_factory: Callable[[], Any]) -> ModelT:
        raw = self.store.get_or_initialize(key, default_factory)
        try:
            return model.model_validate(raw)
        except ValidationError as e:
            raise StorageError(key, f"malformed {model.__name__}: {e}") from e

    def get_benefits_info(self, company_id: str, employee_id: str) -> BenefitsInfo:
        """Get an employee's benefits, provisioning an empty election if new.

        Raises:
            UnknownCompanyError: If company_id is not recognized
        """
        self.guard.require_known_company(company_id)
        return self._read(
            benefits_key(employee_id),
            BenefitsInfo,
            lambda: BenefitsInfo(package_id=self.guard.package_id).to_record(),
        )

    def update_benefits_info(self, company_id: str, employee_id: str, info: BenefitsInfo) -> None:
        """Replace an employee's benefits with exactly info.

        Raises:
            UnknownCompanyError: If company_id is not recognized
            UnknownPackageError: If info.package_id is not recognized
        """
        self.guard.require_known_company(company_id)
        self.guard.require_known_package(info.package_id)
        self.store.put(benefits_key(employee_id), info.to_record())
        logger.debug(f"updated benefits for {employee_id}: {len(info.dependents)} dependent(s)")

    def get_payroll_info(self, company_id: str, employee_id: str) -> PayrollInfo:
        """Get an employee's payroll snapshot, provisioning the default if new.

        Raises:
            UnknownCompanyError: If company_id is not recognized
        """
        self.guard.require_known_company(company_id)
        return self._read(
            payroll_key(employee_id),
            PayrollInfo,
            lambda: PayrollInfo(gross_paycheck=DEFAULT_GROSS_PAYCHECK).to_record(),
        )
