"""Error taxonomy for the benefits engine.

Every engine operation fails fast with one of these. None are retried
internally; callers (CLI, MCP tools) decide how to present them.
"""


class BenefitsError(Exception):
    """Base class for all benefits engine failures."""
    pass


class UnknownCompanyError(BenefitsError):
    """Raised when a company id is not the recognized company."""

    def __init__(self, company_id: str):
        self.company_id = company_id
        super().__init__(f"Unknown company id: {company_id}")


class UnknownPackageError(BenefitsError):
    """Raised when a benefits package id is not the recognized package."""

    def __init__(self, package_id: str):
        self.package_id = package_id
        super().__init__(f"Unknown benefits package id: {package_id}")


class EmployeeNotFoundError(BenefitsError):
    """Raised when an employee id does not exist in the directory."""

    def __init__(self, employee_id: str):
        self.employee_id = employee_id
        super().__init__(f"Employee not found: {employee_id}")


class StorageError(BenefitsError):
    """Raised when the record store cannot read, write, or decode a value.

    The underlying exception is always chained as __cause__.
    """

    def __init__(self, key: str, message: str):
        self.key = key
        super().__init__(f"Storage failure for '{key}': {message}")
