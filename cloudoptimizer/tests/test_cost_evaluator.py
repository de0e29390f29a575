"""
Tests for the evaluation entry point.
"""

import copy
import pytest

from cloudoptimizer.domain.recommendation_models import ConfidenceTier
from cloudoptimizer.services.cost_calculator import InvalidUsageError
from cloudoptimizer.services.cost_evaluator import evaluate


def test_aws_baseline_evaluation():
    """AWS 744h / 100GB / 50GB evaluates to $39.20 across three resources."""
    evaluation = evaluate("AWS", 744, 100, 50)
    
    assert evaluation.breakdown.vm_cost == pytest.approx(37.20)
    assert evaluation.breakdown.storage_cost == pytest.approx(1.00)
    assert evaluation.breakdown.network_cost == pytest.approx(1.00)
    assert evaluation.breakdown.total == pytest.approx(39.20)
    assert len(evaluation.resources) == 3
    assert len(evaluation.recommendations) == 3


def test_aws_baseline_recommendations():
    """Busy VM scales up, mid-filled storage is fine, cheap network is fine."""
    vm, storage, network = evaluate("AWS", 744, 100, 50).recommendations
    
    assert "highly utilized" in vm.text
    assert vm.confidence_tier == ConfidenceTier.HIGH
    assert storage.confidence_tier == ConfidenceTier.LOW
    assert network.potential_savings == 0


def test_totals_aggregate_resources_and_recommendations():
    """total_cost sums resource costs and total_savings sums savings."""
    evaluation = evaluate("Azure", 150, 30, 3000)
    
    assert evaluation.total_cost == sum(r.cost_per_month for r in evaluation.resources)
    assert evaluation.total_savings == sum(r.potential_savings for r in evaluation.recommendations)
    # 150h at 15% CPU (40%), 30GB at 35% (30%), $54 network (25%)
    assert evaluation.total_savings == pytest.approx(150 * 0.045 * 0.4 + 30 * 0.015 * 0.3 + 3000 * 0.018 * 0.25)


def test_recommendations_follow_resource_order():
    """Recommendation i belongs to resource i."""
    evaluation = evaluate("Google", 300, 300, 300)
    assert [r.id for r in evaluation.resources] == [r.resource_id for r in evaluation.recommendations]


def test_empty_usage_evaluation():
    """No usage means no resources, no cost and no savings."""
    evaluation = evaluate("AWS", 0, 0, 0)
    
    assert evaluation.resources == []
    assert evaluation.recommendations == []
    assert evaluation.total_cost == 0
    assert evaluation.total_savings == 0
    assert evaluation.savings_percent == 0


def test_evaluation_is_deterministic():
    """Repeated calls give identical results."""
    first = evaluate("Azure", 321.5, 77.7, 12.3)
    second = evaluate("Azure", 321.5, 77.7, 12.3)
    
    assert first == second
    assert first.to_dict() == second.to_dict()


def test_evaluation_does_not_mutate_shared_pricing(pricing_table):
    """Evaluating leaves the pricing table unchanged."""
    before = copy.deepcopy(pricing_table.to_dict())
    evaluate("GCP", 1000, 1000, 1000, pricing_table)
    assert pricing_table.to_dict() == before


def test_negative_usage_rejected():
    """Negative usage never reaches the rules."""
    with pytest.raises(InvalidUsageError):
        evaluate("AWS", 744, -100, 50)


def test_to_dict_shape():
    """Serialized evaluation carries all sections and rounded totals."""
    data = evaluate("AWS", 744, 100, 50).to_dict()
    
    assert set(data) == {
        "breakdown", "resources", "recommendations",
        "total_cost", "total_savings", "savings_percent",
    }
    assert data["total_cost"] == 39.2
    assert data["breakdown"]["total"] == 39.2


def test_nan_usage_rejected():
    """NaN usage cannot drop a resource while poisoning the breakdown total."""
    with pytest.raises(InvalidUsageError):
        evaluate("AWS", float("nan"), 100, 50)
