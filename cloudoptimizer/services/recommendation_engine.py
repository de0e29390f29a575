"""
Rule-based recommendation engine.
Maps a simulated resource to one recommendation through fixed threshold tables.

Rules are evaluated top to bottom and the first match wins:

    VM (cpu %)          < 10   High    70% savings
                        < 30   High    40% savings
                        < 60   Medium  15% savings
                        > 80   High    none (scale up)
                        else   Low     none
    Storage (fill %)    > 90   High    none (nearly full)
                        < 40   Medium  30% savings
                        > 70   Low     10% savings
                        else   Low     none
    Network (cost $)    > 50   Medium  25% savings
                        > 20   Low     10% savings
                        else   Low     none

Any other resource type gets the manual-review recommendation.
"""
from typing import Callable, Dict, Iterable, List, Tuple
import logging

from cloudoptimizer.domain.recommendation_models import ConfidenceTier, Recommendation
from cloudoptimizer.domain.resource_models import ResourceType, SimulatedResource


logger = logging.getLogger(__name__)


# Action lists per rule
VM_SEVERELY_UNDERUTILIZED_ACTIONS = (
    "Downsize to smaller instance",
    "Use spot instances",
    "Schedule automatic shutdown outside business hours",
)
VM_UNDERUTILIZED_ACTIONS = (
    "Downsize to smaller instance",
    "Consider burstable instance types",
)
VM_MODERATE_ACTIONS = (
    "Purchase reserved instances for steady workloads",
    "Review instance family for better price/performance",
)
VM_HIGH_UTILIZATION_ACTIONS = (
    "Scale up to a larger instance",
    "Enable auto-scaling",
    "Distribute load across instances",
)
VM_OPTIMAL_ACTIONS = (
    "Keep current configuration",
    "Monitor utilization trends",
)
STORAGE_NEARLY_FULL_ACTIONS = (
    "Increase storage capacity",
    "Archive or delete unused data",
)
STORAGE_UNDERUSED_ACTIONS = (
    "Reduce provisioned storage",
    "Move infrequently accessed data to cold storage",
)
STORAGE_TIERING_ACTIONS = (
    "Enable lifecycle policies",
    "Use intelligent tiering",
)
STORAGE_OPTIMAL_ACTIONS = (
    "Keep current configuration",
)
NETWORK_HIGH_COST_ACTIONS = (
    "Use a content delivery network",
    "Compress transferred data",
    "Keep traffic within the same region",
)
NETWORK_MODERATE_COST_ACTIONS = (
    "Review data transfer patterns",
    "Enable response caching",
)
NETWORK_OPTIMAL_ACTIONS = (
    "Keep current configuration",
)
MANUAL_REVIEW_TEXT = "Manual review recommended"
MANUAL_REVIEW_ACTIONS = (
    "Manual analysis required",
)


def _build(
    resource: SimulatedResource,
    text: str,
    confidence: ConfidenceTier,
    savings_fraction: float,
    actions: Tuple[str, ...]
) -> Recommendation:
    """Create a recommendation with savings kept within [0, cost]."""
    cost = max(resource.cost_per_month, 0.0)
    savings = min(max(cost * savings_fraction, 0.0), cost)
    return Recommendation(
        resource_id=resource.id,
        text=text,
        confidence_tier=confidence,
        potential_savings=savings,
        actions=actions,
    )


def recommend_vm(resource: SimulatedResource) -> Recommendation:
    """Apply the VM rules, keyed on CPU usage."""
    cpu = resource.cpu_usage_pct
    
    if cpu < 10:
        return _build(
            resource,
            f"VM is severely underutilized ({cpu:.0f}% CPU); downsize or switch to spot capacity",
            ConfidenceTier.HIGH, 0.7, VM_SEVERELY_UNDERUTILIZED_ACTIONS,
        )
    if cpu < 30:
        return _build(
            resource,
            f"VM is underutilized ({cpu:.0f}% CPU); a smaller instance would cover the load",
            ConfidenceTier.HIGH, 0.4, VM_UNDERUTILIZED_ACTIONS,
        )
    if cpu < 60:
        return _build(
            resource,
            f"VM is moderately utilized ({cpu:.0f}% CPU); reserved pricing may lower cost",
            ConfidenceTier.MEDIUM, 0.15, VM_MODERATE_ACTIONS,
        )
    if cpu > 80:
        return _build(
            resource,
            f"VM is highly utilized ({cpu:.0f}% CPU); scale for performance",
            ConfidenceTier.HIGH, 0.0, VM_HIGH_UTILIZATION_ACTIONS,
        )
    return _build(
        resource,
        f"VM is optimally utilized ({cpu:.0f}% CPU)",
        ConfidenceTier.LOW, 0.0, VM_OPTIMAL_ACTIONS,
    )


def recommend_storage(resource: SimulatedResource) -> Recommendation:
    """Apply the storage rules, keyed on fill percentage."""
    used = resource.storage_usage_pct
    
    if used > 90:
        return _build(
            resource,
            f"Storage is nearly full ({used:.0f}% used); expand capacity",
            ConfidenceTier.HIGH, 0.0, STORAGE_NEARLY_FULL_ACTIONS,
        )
    if used < 40:
        return _build(
            resource,
            f"Storage is underused ({used:.0f}% used); reduce provisioned capacity",
            ConfidenceTier.MEDIUM, 0.3, STORAGE_UNDERUSED_ACTIONS,
        )
    if used > 70:
        return _build(
            resource,
            f"Storage is filling up ({used:.0f}% used); tier cold data to cheaper classes",
            ConfidenceTier.LOW, 0.1, STORAGE_TIERING_ACTIONS,
        )
    return _build(
        resource,
        f"Storage usage is healthy ({used:.0f}% used)",
        ConfidenceTier.LOW, 0.0, STORAGE_OPTIMAL_ACTIONS,
    )


def recommend_network(resource: SimulatedResource) -> Recommendation:
    """Apply the network rules, keyed on monthly cost."""
    cost = resource.cost_per_month
    
    if cost > 50:
        return _build(
            resource,
            f"Network transfer costs are high (${cost:.2f}/month); optimize data transfer",
            ConfidenceTier.MEDIUM, 0.25, NETWORK_HIGH_COST_ACTIONS,
        )
    if cost > 20:
        return _build(
            resource,
            f"Network transfer costs are moderate (${cost:.2f}/month); review transfer patterns",
            ConfidenceTier.LOW, 0.1, NETWORK_MODERATE_COST_ACTIONS,
        )
    return _build(
        resource,
        f"Network transfer costs are low (${cost:.2f}/month)",
        ConfidenceTier.LOW, 0.0, NETWORK_OPTIMAL_ACTIONS,
    )


_RULES: Dict[str, Callable[[SimulatedResource], Recommendation]] = {
    ResourceType.VM.value: recommend_vm,
    ResourceType.STORAGE.value: recommend_storage,
    ResourceType.NETWORK.value: recommend_network,
}


def recommend(resource: SimulatedResource) -> Recommendation:
    """
    Produce the recommendation for one resource.
    
    Args:
        resource: Simulated resource (any resource_type is accepted)
    
    Returns:
        Recommendation from the matching rule table, or the manual-review
        recommendation for unrecognized resource types
    """
    resource_type = resource.resource_type
    if isinstance(resource_type, ResourceType):
        resource_type = resource_type.value
    
    rule = _RULES.get(resource_type)
    if rule is None:
        logger.debug("No rules for resource type %r (%s)", resource_type, resource.id)
        return _build(resource, MANUAL_REVIEW_TEXT, ConfidenceTier.LOW, 0.0, MANUAL_REVIEW_ACTIONS)
    return rule(resource)


def recommend_all(resources: Iterable[SimulatedResource]) -> List[Recommendation]:
    """Recommend for each resource, preserving order."""
    return [recommend(resource) for resource in resources]
