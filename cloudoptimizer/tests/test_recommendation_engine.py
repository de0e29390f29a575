"""
Tests for the rule-based recommendation engine.
"""

import pytest

from cloudoptimizer.domain.recommendation_models import ConfidenceTier
from cloudoptimizer.domain.resource_models import ResourceType
from cloudoptimizer.services.recommendation_engine import (
    MANUAL_REVIEW_ACTIONS,
    MANUAL_REVIEW_TEXT,
    VM_SEVERELY_UNDERUTILIZED_ACTIONS,
    recommend,
    recommend_all,
)
from cloudoptimizer.services.resource_simulator import simulate_resources


def test_severely_underutilized_vm(make_resource):
    """VM at 8.5% CPU costing $120 saves 70%: $84, High confidence."""
    rec = recommend(make_resource(ResourceType.VM, cpu=8.5, cost=120.0))
    
    assert rec.confidence_tier == ConfidenceTier.HIGH
    assert rec.potential_savings == pytest.approx(84.0)
    assert "severely underutilized" in rec.text
    assert rec.actions == VM_SEVERELY_UNDERUTILIZED_ACTIONS


@pytest.mark.parametrize("cpu,confidence,fraction,phrase", [
    (0, ConfidenceTier.HIGH, 0.7, "severely underutilized"),
    (9.99, ConfidenceTier.HIGH, 0.7, "severely underutilized"),
    (10, ConfidenceTier.HIGH, 0.4, "underutilized"),
    (29.9, ConfidenceTier.HIGH, 0.4, "underutilized"),
    (30, ConfidenceTier.MEDIUM, 0.15, "moderately utilized"),
    (59.9, ConfidenceTier.MEDIUM, 0.15, "moderately utilized"),
    (60, ConfidenceTier.LOW, 0.0, "optimally utilized"),
    (80, ConfidenceTier.LOW, 0.0, "optimally utilized"),
    (80.1, ConfidenceTier.HIGH, 0.0, "highly utilized"),
    (100, ConfidenceTier.HIGH, 0.0, "highly utilized"),
])
def test_vm_rules(make_resource, cpu, confidence, fraction, phrase):
    """VM rules follow the CPU thresholds in priority order."""
    rec = recommend(make_resource(ResourceType.VM, cpu=cpu, cost=200.0))
    
    assert rec.confidence_tier == confidence
    assert rec.potential_savings == pytest.approx(200.0 * fraction)
    assert phrase in rec.text


@pytest.mark.parametrize("storage,confidence,fraction", [
    (95, ConfidenceTier.HIGH, 0.0),
    (90.1, ConfidenceTier.HIGH, 0.0),
    (90, ConfidenceTier.LOW, 0.1),
    (85, ConfidenceTier.LOW, 0.1),
    (70.1, ConfidenceTier.LOW, 0.1),
    (70, ConfidenceTier.LOW, 0.0),
    (60, ConfidenceTier.LOW, 0.0),
    (40, ConfidenceTier.LOW, 0.0),
    (39.9, ConfidenceTier.MEDIUM, 0.3),
    (35, ConfidenceTier.MEDIUM, 0.3),
])
def test_storage_rules(make_resource, storage, confidence, fraction):
    """Storage rules follow the fill thresholds in priority order."""
    rec = recommend(make_resource(ResourceType.STORAGE, storage=storage, cost=50.0))
    
    assert rec.confidence_tier == confidence
    assert rec.potential_savings == pytest.approx(50.0 * fraction)


def test_nearly_full_storage_text(make_resource):
    """Storage above 90% is reported as nearly full."""
    rec = recommend(make_resource(ResourceType.STORAGE, storage=95, cost=50.0))
    assert "nearly full" in rec.text


@pytest.mark.parametrize("cost,confidence,fraction", [
    (100, ConfidenceTier.MEDIUM, 0.25),
    (50.01, ConfidenceTier.MEDIUM, 0.25),
    (50, ConfidenceTier.LOW, 0.1),
    (20.01, ConfidenceTier.LOW, 0.1),
    (20, ConfidenceTier.LOW, 0.0),
    (1, ConfidenceTier.LOW, 0.0),
])
def test_network_rules(make_resource, cost, confidence, fraction):
    """Network rules are keyed on monthly cost."""
    rec = recommend(make_resource(ResourceType.NETWORK, cost=cost))
    
    assert rec.confidence_tier == confidence
    assert rec.potential_savings == pytest.approx(cost * fraction)


@pytest.mark.parametrize("resource_type", ["Database", "vm", ""])
def test_unknown_resource_type_gets_manual_review(make_resource, resource_type):
    """Unrecognized types yield the manual-review recommendation."""
    rec = recommend(make_resource(resource_type, cpu=5, cost=300.0))
    
    assert rec.text == MANUAL_REVIEW_TEXT
    assert rec.text == "Manual review recommended"
    assert rec.confidence_tier == ConfidenceTier.LOW
    assert rec.potential_savings == 0
    assert rec.actions == MANUAL_REVIEW_ACTIONS


def test_plain_string_types_are_recognized(make_resource):
    """'VM' as a plain string uses the VM rules."""
    rec = recommend(make_resource("VM", cpu=5, cost=100.0))
    assert rec.confidence_tier == ConfidenceTier.HIGH


@pytest.mark.parametrize("usage", [
    (744, 100, 50),
    (300, 300, 3000),
    (1, 1, 1),
    (10000, 40, 1000),
])
@pytest.mark.parametrize("provider", ["AWS", "Azure", "Google"])
def test_savings_never_exceed_cost(provider, usage):
    """0 <= potential savings <= resource cost for every recommendation."""
    resources = simulate_resources(provider, *usage)
    for resource, rec in zip(resources, recommend_all(resources)):
        assert 0 <= rec.potential_savings <= resource.cost_per_month


def test_recommend_all_preserves_order(make_resource):
    """One recommendation per resource, same order."""
    resources = [
        make_resource(ResourceType.NETWORK, resource_id="c"),
        make_resource(ResourceType.VM, resource_id="a"),
        make_resource(ResourceType.STORAGE, resource_id="b"),
    ]
    assert [rec.resource_id for rec in recommend_all(resources)] == ["c", "a", "b"]


def test_to_dict_serializes_confidence(make_resource):
    """Serialized confidence is the tier label."""
    data = recommend(make_resource(ResourceType.VM, cpu=45, cost=10.0)).to_dict()
    assert data["confidence"] == "Medium"
    assert data["potential_savings"] == 1.5
    assert isinstance(data["actions"], list)
