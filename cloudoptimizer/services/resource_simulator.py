"""
Resource simulation.
Synthesizes resource records with utilization figures approximated from usage
magnitudes. Nothing here reads real telemetry.
"""
from typing import List, Optional, Tuple

from cloudoptimizer.domain.cost_models import CostBreakdown
from cloudoptimizer.domain.resource_models import ResourceType, SimulatedResource
from cloudoptimizer.pricing.pricing_table import PricingTable
from cloudoptimizer.services.cost_calculator import calculate


def simulate_vm_utilization(vm_hours: float) -> Tuple[float, float]:
    """Return simulated (cpu %, memory %) for a VM running vm_hours."""
    if vm_hours > 500:
        return 85.0, 78.0
    if vm_hours > 200:
        return 45.0, 52.0
    return 15.0, 25.0


def simulate_storage_utilization(storage_gb: float) -> float:
    """Return simulated fill percentage for storage_gb of data."""
    if storage_gb > 200:
        return 85.0
    if storage_gb > 50:
        return 60.0
    return 35.0


def _resource_id(provider: str, kind: str) -> str:
    return f"{provider.lower()}-{kind}-01"


def simulate_resources_from_breakdown(breakdown: CostBreakdown) -> List[SimulatedResource]:
    """
    Build simulated resources for an already calculated breakdown.
    
    One resource per non-zero usage magnitude, ordered VM, Storage, Network.
    Each resource costs exactly its component of the breakdown.
    """
    resources = []
    
    if breakdown.vm_hours > 0:
        cpu, memory = simulate_vm_utilization(breakdown.vm_hours)
        resources.append(SimulatedResource(
            id=_resource_id(breakdown.provider, "vm"),
            resource_type=ResourceType.VM,
            cpu_usage_pct=cpu,
            memory_usage_pct=memory,
            storage_usage_pct=0.0,
            cost_per_month=breakdown.vm_cost,
        ))
    
    if breakdown.storage_gb > 0:
        resources.append(SimulatedResource(
            id=_resource_id(breakdown.provider, "storage"),
            resource_type=ResourceType.STORAGE,
            cpu_usage_pct=0.0,
            memory_usage_pct=0.0,
            storage_usage_pct=simulate_storage_utilization(breakdown.storage_gb),
            cost_per_month=breakdown.storage_cost,
        ))
    
    # Network has no utilization metric; it only carries its cost
    if breakdown.network_gb > 0:
        resources.append(SimulatedResource(
            id=_resource_id(breakdown.provider, "network"),
            resource_type=ResourceType.NETWORK,
            cpu_usage_pct=0.0,
            memory_usage_pct=0.0,
            storage_usage_pct=0.0,
            cost_per_month=breakdown.network_cost,
        ))
    
    return resources


def simulate_resources(
    provider: str,
    vm_hours: float,
    storage_gb: float,
    network_gb: float,
    pricing_table: Optional[PricingTable] = None
) -> List[SimulatedResource]:
    """Calculate costs for the inputs and synthesize resources from them."""
    breakdown = calculate(provider, vm_hours, storage_gb, network_gb, pricing_table)
    return simulate_resources_from_breakdown(breakdown)
