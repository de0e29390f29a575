"""
Shared pytest fixtures for cloudoptimizer tests.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

import pytest
from fastapi.testclient import TestClient

from cloudoptimizer.main import app
from cloudoptimizer.api.dependencies import get_pricing_table
from cloudoptimizer.domain.resource_models import ResourceType, SimulatedResource
from cloudoptimizer.pricing.pricing_table import PricingTable, ProviderRates


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def pricing_table():
    """Built-in pricing table."""
    return PricingTable()


@pytest.fixture
def tied_pricing_table():
    """Pricing table where every comparison provider costs the same."""
    same = ProviderRates(vm_rate=0.05, storage_rate=0.01, network_rate=0.02)
    return PricingTable(rates={"AWS": same, "Azure": same, "Google": same})


@pytest.fixture
def override_pricing():
    """Swap the app's pricing table for the duration of a test."""
    def _override(table: PricingTable):
        app.dependency_overrides[get_pricing_table] = lambda: table
    yield _override
    app.dependency_overrides.pop(get_pricing_table, None)


@pytest.fixture
def make_resource():
    """Factory for simulated resources with explicit metrics."""
    def _make(resource_type=ResourceType.VM, cpu=0.0, memory=0.0, storage=0.0, cost=100.0, resource_id="res-01"):
        return SimulatedResource(
            id=resource_id,
            resource_type=resource_type,
            cpu_usage_pct=cpu,
            memory_usage_pct=memory,
            storage_usage_pct=storage,
            cost_per_month=cost,
        )
    return _make
