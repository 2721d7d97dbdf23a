"""Shared fixtures for fieldcheck tests."""

import pytest

from fieldcheck.catalog import load_catalog
from fieldcheck.registry import RuleRegistry


@pytest.fixture
def registry() -> RuleRegistry:
    """A fresh registry, so registrations never leak between tests."""
    return RuleRegistry()


@pytest.fixture
def catalog():
    return load_catalog("en")
