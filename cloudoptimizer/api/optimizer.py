"""
API routes for cost evaluation.
All endpoints take provider, vm_hours, storage_gb and network_gb query
parameters and fall back to configured defaults for missing values.
"""
from typing import Dict, Any
from datetime import datetime, timezone
import logging

from fastapi import APIRouter, Depends, HTTPException

from cloudoptimizer.api.dependencies import get_pricing_table
from cloudoptimizer.api.params import UsageInputs, parse_usage_inputs
from cloudoptimizer.domain.evaluation_models import Evaluation
from cloudoptimizer.pricing.pricing_table import PricingTable
from cloudoptimizer.services.cost_calculator import InvalidUsageError
from cloudoptimizer.services.cost_evaluator import evaluate
from cloudoptimizer.services.provider_comparison import cheapest_breakdown, compare_providers, find_best_provider


logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api")


def _evaluate(inputs: UsageInputs, pricing_table: PricingTable) -> Evaluation:
    """
    Run the evaluation for parsed inputs.
    
    Raises:
        HTTPException: 400 if the engine rejects the inputs
    """
    try:
        return evaluate(
            inputs.provider,
            inputs.vm_hours,
            inputs.storage_gb,
            inputs.network_gb,
            pricing_table,
        )
    except InvalidUsageError as error:
        logger.warning("Rejected usage inputs %s: %s", inputs, error)
        raise HTTPException(status_code=400, detail=str(error)) from error


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/pricing")
async def get_pricing(
    pricing_table: PricingTable = Depends(get_pricing_table)
) -> Dict[str, Any]:
    """Return the per-provider rates in use."""
    return pricing_table.to_dict()


@router.get("/costs")
async def get_costs(
    inputs: UsageInputs = Depends(parse_usage_inputs),
    pricing_table: PricingTable = Depends(get_pricing_table)
) -> Dict[str, Any]:
    """Return the itemized cost breakdown for the requested provider."""
    evaluation = _evaluate(inputs, pricing_table)
    return evaluation.breakdown.to_dict()


@router.get("/resources")
async def get_resources(
    inputs: UsageInputs = Depends(parse_usage_inputs),
    pricing_table: PricingTable = Depends(get_pricing_table)
) -> Dict[str, Any]:
    """Return the simulated resources and their combined monthly cost."""
    evaluation = _evaluate(inputs, pricing_table)
    return {
        "provider": inputs.provider,
        "resources": [resource.to_dict() for resource in evaluation.resources],
        "total_cost": round(evaluation.total_cost, 2),
    }


@router.get("/recommendations")
async def get_recommendations(
    inputs: UsageInputs = Depends(parse_usage_inputs),
    pricing_table: PricingTable = Depends(get_pricing_table)
) -> Dict[str, Any]:
    """Return one recommendation per simulated resource."""
    evaluation = _evaluate(inputs, pricing_table)
    return {
        "provider": inputs.provider,
        "recommendations": [rec.to_dict() for rec in evaluation.recommendations],
        "total_savings": round(evaluation.total_savings, 2),
    }


@router.get("/evaluate")
async def get_evaluation(
    inputs: UsageInputs = Depends(parse_usage_inputs),
    pricing_table: PricingTable = Depends(get_pricing_table)
) -> Dict[str, Any]:
    """Return the complete evaluation for the requested provider."""
    evaluation = _evaluate(inputs, pricing_table)
    result = evaluation.to_dict()
    result["generated_at"] = _timestamp()
    return result


@router.get("/providers/compare")
async def get_provider_comparison(
    inputs: UsageInputs = Depends(parse_usage_inputs),
    pricing_table: PricingTable = Depends(get_pricing_table)
) -> Dict[str, Any]:
    """Price the requested usage at every comparison provider."""
    try:
        breakdowns = compare_providers(
            inputs.vm_hours, inputs.storage_gb, inputs.network_gb, pricing_table
        )
    except InvalidUsageError as error:
        raise HTTPException(status_code=400, detail=str(error)) from error
    
    best = cheapest_breakdown(breakdowns)
    return {
        "providers": [breakdown.to_dict() for breakdown in breakdowns],
        "cheapest_provider": best.provider,
        "generated_at": _timestamp(),
    }


@router.get("/providers/best")
async def get_best_provider(
    inputs: UsageInputs = Depends(parse_usage_inputs),
    pricing_table: PricingTable = Depends(get_pricing_table)
) -> Dict[str, Any]:
    """Return the cheapest provider's breakdown for the requested usage."""
    try:
        best = find_best_provider(
            inputs.vm_hours, inputs.storage_gb, inputs.network_gb, pricing_table
        )
    except InvalidUsageError as error:
        raise HTTPException(status_code=400, detail=str(error)) from error
    return best.to_dict()
