"""Benefits Calc SDK - Employee records and benefits cost projection."""

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    get_data_path,
    get_records_dir,
    set_data_dir,
    clear_data_dir,
    get_profile_path,
    load_profile,
    set_profile_value,
    get_recognized_ids,
    ProfileNotFoundError,
    PROFILE_KEYS,
)

from .errors import (
    BenefitsError,
    UnknownCompanyError,
    UnknownPackageError,
    EmployeeNotFoundError,
    StorageError,
)

from .schemas import (
    NameInfo,
    EmployeeInfo,
    DependentType,
    DependentInfo,
    BenefitsInfo,
    PayrollInfo,
    DependentCost,
    BenefitsCostBreakdown,
)

from .store import RecordStore, MemoryStore, JsonFileStore
from .scope import ScopeGuard
from .directory import EmployeeDirectory
from .ledger import BenefitsLedger
from .cost import (
    calculate_benefits_cost,
    cost_breakdown,
    dependent_annual_cost,
    total_annual_cost,
    PAY_PERIODS_PER_YEAR,
)
from .api import EmployeeApi, get_employee_api

__all__ = [
    # Config
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "get_data_path",
    "get_records_dir",
    "set_data_dir",
    "clear_data_dir",
    "get_profile_path",
    "load_profile",
    "set_profile_value",
    "get_recognized_ids",
    "ProfileNotFoundError",
    "PROFILE_KEYS",
    # Errors
    "BenefitsError",
    "UnknownCompanyError",
    "UnknownPackageError",
    "EmployeeNotFoundError",
    "StorageError",
    # Schemas
    "NameInfo",
    "EmployeeInfo",
    "DependentType",
    "DependentInfo",
    "BenefitsInfo",
    "PayrollInfo",
    "DependentCost",
    "BenefitsCostBreakdown",
    # Storage
    "RecordStore",
    "MemoryStore",
    "JsonFileStore",
    # Engine
    "ScopeGuard",
    "EmployeeDirectory",
    "BenefitsLedger",
    "calculate_benefits_cost",
    "cost_breakdown",
    "dependent_annual_cost",
    "total_annual_cost",
    "PAY_PERIODS_PER_YEAR",
    "EmployeeApi",
    "get_employee_api",
]
