"""
Domain models for cost calculation.
Defines the itemized cost breakdown for a single provider.
"""
from typing import Dict, Any
from dataclasses import dataclass


@dataclass(frozen=True)
class CostBreakdown:
    """Itemized monthly cost for one provider and one set of usage inputs."""
    provider: str
    vm_hours: float
    storage_gb: float
    network_gb: float
    vm_cost: float
    storage_cost: float
    network_cost: float
    total: float  # vm_cost + storage_cost + network_cost
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "provider": self.provider,
            "vm_hours": self.vm_hours,
            "storage_gb": self.storage_gb,
            "network_gb": self.network_gb,
            "vm_cost": round(self.vm_cost, 2),
            "storage_cost": round(self.storage_cost, 2),
            "network_cost": round(self.network_cost, 2),
            "total": round(self.total, 2),
        }
