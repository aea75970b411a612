"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory collection fixture, isolated adapter registry, facade
Dependencies: pytest, sparkbase
System role: Test infrastructure and fixture management
"""

import pytest

from sparkbase.application.adapters.registry import AdapterRegistry
from sparkbase.boundary.db.collection import SparkCollection
from sparkbase.configs import get_settings
from tests.fakes import Counter, InMemoryCollection


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Re-read environment variables for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def registry() -> AdapterRegistry:
    """Provide an isolated registry with Counter registered."""
    registry = AdapterRegistry()
    registry.register_model(Counter)
    return registry


@pytest.fixture
def raw_collection() -> InMemoryCollection:
    """Provide an empty in-memory collection."""
    return InMemoryCollection()


@pytest.fixture
def collection(raw_collection: InMemoryCollection, registry: AdapterRegistry) -> SparkCollection:
    """Provide a facade over the in-memory collection."""
    return SparkCollection(raw_collection, registry=registry)
