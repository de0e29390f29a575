"""
Cost evaluation entry point.
Runs calculation, resource simulation and recommendations for one request.
"""
from typing import Optional
import logging

from cloudoptimizer.domain.evaluation_models import Evaluation
from cloudoptimizer.pricing.pricing_table import PricingTable
from cloudoptimizer.services.cost_calculator import calculate
from cloudoptimizer.services.recommendation_engine import recommend_all
from cloudoptimizer.services.resource_simulator import simulate_resources_from_breakdown


logger = logging.getLogger(__name__)


def evaluate(
    provider: str,
    vm_hours: float,
    storage_gb: float,
    network_gb: float,
    pricing_table: Optional[PricingTable] = None
) -> Evaluation:
    """
    Evaluate costs and recommendations for one provider and usage set.
    
    Args:
        provider: Provider name
        vm_hours: VM hours per month
        storage_gb: Stored GB per month
        network_gb: Transferred GB per month
        pricing_table: Rates to apply (built-in table if None)
    
    Returns:
        Evaluation with the breakdown, simulated resources, one recommendation
        per resource, and aggregate cost and savings
    
    Raises:
        InvalidUsageError: If any usage magnitude is negative, NaN or infinite
    """
    breakdown = calculate(provider, vm_hours, storage_gb, network_gb, pricing_table)
    resources = simulate_resources_from_breakdown(breakdown)
    recommendations = recommend_all(resources)
    
    evaluation = Evaluation(
        breakdown=breakdown,
        resources=resources,
        recommendations=recommendations,
        total_cost=sum(resource.cost_per_month for resource in resources),
        total_savings=sum(rec.potential_savings for rec in recommendations),
    )
    logger.debug(
        "Evaluated %s: total=%.2f savings=%.2f resources=%d",
        provider,
        evaluation.total_cost,
        evaluation.total_savings,
        len(resources),
    )
    return evaluation
