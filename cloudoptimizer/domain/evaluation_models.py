"""
Domain models for a complete cost evaluation.
Bundles the breakdown, simulated resources and recommendations for one request.
"""
from typing import List, Dict, Any
from dataclasses import dataclass

from cloudoptimizer.domain.cost_models import CostBreakdown
from cloudoptimizer.domain.resource_models import SimulatedResource
from cloudoptimizer.domain.recommendation_models import Recommendation


@dataclass(frozen=True)
class Evaluation:
    """Result of evaluating one provider against one set of usage inputs."""
    breakdown: CostBreakdown
    resources: List[SimulatedResource]
    recommendations: List[Recommendation]  # one per resource, same order
    total_cost: float
    total_savings: float
    
    @property
    def savings_percent(self) -> float:
        """Share of total_cost covered by total_savings, 0 when nothing is spent."""
        if self.total_cost <= 0:
            return 0.0
        return self.total_savings / self.total_cost * 100
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "breakdown": self.breakdown.to_dict(),
            "resources": [resource.to_dict() for resource in self.resources],
            "recommendations": [rec.to_dict() for rec in self.recommendations],
            "total_cost": round(self.total_cost, 2),
            "total_savings": round(self.total_savings, 2),
            "savings_percent": round(self.savings_percent, 1),
        }
