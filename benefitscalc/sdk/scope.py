"""Company and benefits package scoping.

The engine recognizes exactly one company and one benefits package. The
ids are injected at construction (see config.get_recognized_ids) rather
than hardcoded, so tests and deployments can vary them.
"""

import logging

from .errors import UnknownCompanyError, UnknownPackageError

logger = logging.getLogger(__name__)


class ScopeGuard:
    """Precondition checks run by every operation that takes an id."""

    def __init__(self, company_id: str, package_id: str):
        self.company_id = company_id
        self.package_id = package_id

    def require_known_company(self, company_id: str) -> None:
        """Raise UnknownCompanyError unless company_id is the recognized company."""
        if company_id != self.company_id:
            logger.warning(f"rejected unknown company id: {company_id}")
            raise UnknownCompanyError(company_id)

    def require_known_package(self, package_id: str) -> None:
        """Raise UnknownPackageError unless package_id is the recognized package."""
        if package_id != self.package_id:
            logger.warning(f"rejected unknown package id: {package_id}")
            raise UnknownPackageError(package_id)
