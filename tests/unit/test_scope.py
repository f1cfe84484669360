"""Tests for company/package scoping."""

import pytest

from benefitscalc.sdk.errors import BenefitsError, UnknownCompanyError, UnknownPackageError
from benefitscalc.sdk.scope import ScopeGuard


@pytest.fixture
def guard():
    return ScopeGuard("acme", "basic")


def test_known_ids_pass(guard):
    guard.require_known_company("acme")
    guard.require_known_package("basic")


def test_unknown_company(guard):
    with pytest.raises(UnknownCompanyError) as exc_info:
        guard.require_known_company("ACME")

    assert exc_info.value.company_id == "ACME"
    assert isinstance(exc_info.value, BenefitsError)


def test_unknown_package(guard):
    with pytest.raises(UnknownPackageError) as exc_info:
        guard.require_known_package("premium")

    assert "premium" in str(exc_info.value)


def test_ids_are_not_interchangeable(guard):
    with pytest.raises(UnknownCompanyError):
        guard.require_known_company("basic")
    with pytest.raises(UnknownPackageError):
        guard.require_known_package("acme")
