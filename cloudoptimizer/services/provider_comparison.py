"""
Provider comparison service.
Prices the same usage across the comparison providers and picks the cheapest.
"""
from typing import List, Optional, Sequence

from cloudoptimizer.domain.cost_models import CostBreakdown
from cloudoptimizer.pricing.pricing_table import PricingTable
from cloudoptimizer.services.cost_calculator import calculate, resolve_table


def compare_providers(
    vm_hours: float,
    storage_gb: float,
    network_gb: float,
    pricing_table: Optional[PricingTable] = None
) -> List[CostBreakdown]:
    """Calculate a breakdown for every comparison provider, in table order."""
    table = resolve_table(pricing_table)
    return [
        calculate(provider, vm_hours, storage_gb, network_gb, table)
        for provider in table.comparison_providers
    ]


def cheapest_breakdown(breakdowns: Sequence[CostBreakdown]) -> CostBreakdown:
    """
    Pick the lowest-total breakdown.
    
    Only a strictly lower total replaces the current best, so exact ties go
    to the earliest breakdown in the sequence.
    
    Raises:
        ValueError: If breakdowns is empty
    """
    if not breakdowns:
        raise ValueError("No breakdowns to compare")
    best = breakdowns[0]
    for breakdown in breakdowns[1:]:
        if breakdown.total < best.total:
            best = breakdown
    return best


def find_best_provider(
    vm_hours: float,
    storage_gb: float,
    network_gb: float,
    pricing_table: Optional[PricingTable] = None
) -> CostBreakdown:
    """Return the cheapest comparison provider's breakdown for the given usage."""
    return cheapest_breakdown(compare_providers(vm_hours, storage_gb, network_gb, pricing_table))
