"""
Domain models for simulated resources.
A simulated resource stands in for a cloud asset; its utilization is derived
from aggregate usage, never measured.
"""
from typing import Dict, Any
from dataclasses import dataclass
from enum import Enum


class ResourceType(str, Enum):
    VM = "VM"
    STORAGE = "Storage"
    NETWORK = "Network"


@dataclass(frozen=True)
class SimulatedResource:
    """Synthetic resource record built from usage magnitudes."""
    id: str
    resource_type: str  # a ResourceType value; other strings get the manual-review rule
    cpu_usage_pct: float
    memory_usage_pct: float
    storage_usage_pct: float
    cost_per_month: float
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        resource_type = self.resource_type
        if isinstance(resource_type, ResourceType):
            resource_type = resource_type.value
        return {
            "id": self.id,
            "resource_type": resource_type,
            "cpu_usage_pct": self.cpu_usage_pct,
            "memory_usage_pct": self.memory_usage_pct,
            "storage_usage_pct": self.storage_usage_pct,
            "cost_per_month": round(self.cost_per_month, 2),
        }
