"""
Cost calculator service.
Applies a provider's per-unit rates to usage magnitudes.
"""
from typing import Optional
import math

from cloudoptimizer.domain.cost_models import CostBreakdown
from cloudoptimizer.pricing.pricing_table import PricingTable


_BUILTIN_TABLE = PricingTable()


class InvalidUsageError(ValueError):
    """Raised when a usage magnitude is negative or not finite."""
    pass


def resolve_table(pricing_table: Optional[PricingTable]) -> PricingTable:
    """Return the given table, or the built-in one when None."""
    return pricing_table if pricing_table is not None else _BUILTIN_TABLE


def calculate(
    provider: str,
    vm_hours: float,
    storage_gb: float,
    network_gb: float,
    pricing_table: Optional[PricingTable] = None
) -> CostBreakdown:
    """
    Calculate the itemized monthly cost for one provider.
    
    Args:
        provider: Provider name (unknown names are priced at default rates)
        vm_hours: VM hours per month
        storage_gb: Stored GB per month
        network_gb: Transferred GB per month
        pricing_table: Rates to apply (built-in table if None)
    
    Returns:
        CostBreakdown whose total is the exact sum of its three components
    
    Raises:
        InvalidUsageError: If any usage magnitude is negative, NaN or infinite
    """
    for name, value in (("vm_hours", vm_hours), ("storage_gb", storage_gb), ("network_gb", network_gb)):
        if not math.isfinite(value) or value < 0:
            raise InvalidUsageError(f"{name} must be a finite, non-negative number (got: {value})")
    
    rates = resolve_table(pricing_table).rates(provider)
    
    vm_cost = vm_hours * rates.vm_rate
    storage_cost = storage_gb * rates.storage_rate
    network_cost = network_gb * rates.network_rate
    
    return CostBreakdown(
        provider=provider,
        vm_hours=vm_hours,
        storage_gb=storage_gb,
        network_gb=network_gb,
        vm_cost=vm_cost,
        storage_cost=storage_cost,
        network_cost=network_cost,
        total=vm_cost + storage_cost + network_cost,
    )
