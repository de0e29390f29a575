"""
Domain models for optimization recommendations.
"""
from typing import Dict, Any, Tuple
from dataclasses import dataclass
from enum import Enum


class ConfidenceTier(str, Enum):
    """Label of the rule bucket that matched; not a statistical confidence."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


@dataclass(frozen=True)
class Recommendation:
    """Represents a single rule-based optimization suggestion for a resource."""
    resource_id: str
    text: str
    confidence_tier: ConfidenceTier
    potential_savings: float  # 0 <= potential_savings <= resource cost_per_month
    actions: Tuple[str, ...]
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "resource_id": self.resource_id,
            "text": self.text,
            "confidence": self.confidence_tier.value,
            "potential_savings": round(self.potential_savings, 2),
            "actions": list(self.actions),
        }
