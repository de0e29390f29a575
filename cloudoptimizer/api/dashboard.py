"""
HTML dashboard.
Renders the evaluation and provider comparison for the query inputs as a
single server-side page.
"""
from html import escape
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse

from cloudoptimizer.api.dependencies import get_pricing_table
from cloudoptimizer.api.params import UsageInputs, parse_usage_inputs
from cloudoptimizer.core.config import config
from cloudoptimizer.domain.cost_models import CostBreakdown
from cloudoptimizer.domain.evaluation_models import Evaluation
from cloudoptimizer.pricing.pricing_table import PricingTable
from cloudoptimizer.services.cost_calculator import InvalidUsageError
from cloudoptimizer.services.cost_evaluator import evaluate
from cloudoptimizer.services.provider_comparison import cheapest_breakdown, compare_providers


router = APIRouter()


PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <title>{title}</title>
    <style>
        body {{ font-family: sans-serif; margin: 2rem; color: #222; }}
        table {{ border-collapse: collapse; margin-bottom: 1.5rem; }}
        th, td {{ border: 1px solid #ccc; padding: 0.4rem 0.8rem; text-align: left; }}
        .best {{ background: #e6f6e6; }}
        .confidence-High {{ color: #0a6b0a; }}
        .confidence-Medium {{ color: #a36a00; }}
        .confidence-Low {{ color: #666; }}
    </style>
</head>
<body>
    <h1>{title}</h1>
    <form method="get" action="/">
        <label>Provider <select name="provider">{provider_options}</select></label>
        <label>VM hours <input name="vm_hours" value="{vm_hours}"></label>
        <label>Storage GB <input name="storage_gb" value="{storage_gb}"></label>
        <label>Network GB <input name="network_gb" value="{network_gb}"></label>
        <button type="submit">Estimate</button>
    </form>
    <h2>Cost breakdown ({provider})</h2>
    <table>
        <tr><th>Compute</th><td>${vm_cost:.2f}</td></tr>
        <tr><th>Storage</th><td>${storage_cost:.2f}</td></tr>
        <tr><th>Network</th><td>${network_cost:.2f}</td></tr>
        <tr><th>Total</th><td><strong>${total:.2f}</strong></td></tr>
    </table>
    <h2>Optimization suggestions</h2>
    <table>
        <tr><th>Resource</th><th>Type</th><th>Monthly cost</th><th>Suggestion</th><th>Confidence</th><th>Potential savings</th><th>Actions</th></tr>
        {recommendation_rows}
    </table>
    <p>Potential savings: <strong>${total_savings:.2f}</strong> of ${total_cost:.2f} ({savings_percent:.1f}%)</p>
    <h2>Provider comparison</h2>
    <table>
        <tr><th>Provider</th><th>Compute</th><th>Storage</th><th>Network</th><th>Total</th></tr>
        {comparison_rows}
    </table>
    <p><small>Utilization figures are simulated from usage inputs, not measured.</small></p>
</body>
</html>
"""


def _provider_options(pricing_table: PricingTable, selected: str) -> str:
    options = []
    for name in pricing_table.comparison_providers:
        marker = " selected" if name == selected else ""
        options.append(f'<option value="{escape(name)}"{marker}>{escape(name)}</option>')
    return "".join(options)


def _recommendation_rows(evaluation: Evaluation) -> str:
    if not evaluation.resources:
        return '<tr><td colspan="7">No usage entered.</td></tr>'
    
    rows = []
    for resource, rec in zip(evaluation.resources, evaluation.recommendations):
        resource_type = resource.to_dict()["resource_type"]
        actions = "<br>".join(escape(action) for action in rec.actions)
        confidence = rec.confidence_tier.value
        rows.append(
            f"<tr><td>{escape(resource.id)}</td><td>{escape(resource_type)}</td>"
            f"<td>${resource.cost_per_month:.2f}</td><td>{escape(rec.text)}</td>"
            f'<td class="confidence-{confidence}">{confidence}</td>'
            f"<td>${rec.potential_savings:.2f}</td><td>{actions}</td></tr>"
        )
    return "\n        ".join(rows)


def _comparison_rows(breakdowns: List[CostBreakdown], best: CostBreakdown) -> str:
    rows = []
    for breakdown in breakdowns:
        css = ' class="best"' if breakdown.provider == best.provider else ""
        rows.append(
            f"<tr{css}><td>{escape(breakdown.provider)}</td>"
            f"<td>${breakdown.vm_cost:.2f}</td><td>${breakdown.storage_cost:.2f}</td>"
            f"<td>${breakdown.network_cost:.2f}</td><td>${breakdown.total:.2f}</td></tr>"
        )
    return "\n        ".join(rows)


def render_dashboard(
    inputs: UsageInputs,
    evaluation: Evaluation,
    breakdowns: List[CostBreakdown],
    best: CostBreakdown,
    pricing_table: PricingTable
) -> str:
    """Render the dashboard page for one evaluation."""
    breakdown = evaluation.breakdown
    return PAGE_TEMPLATE.format(
        title=escape(config.APP_NAME),
        provider_options=_provider_options(pricing_table, inputs.provider),
        provider=escape(inputs.provider),
        vm_hours=inputs.vm_hours,
        storage_gb=inputs.storage_gb,
        network_gb=inputs.network_gb,
        vm_cost=breakdown.vm_cost,
        storage_cost=breakdown.storage_cost,
        network_cost=breakdown.network_cost,
        total=breakdown.total,
        recommendation_rows=_recommendation_rows(evaluation),
        total_savings=evaluation.total_savings,
        total_cost=evaluation.total_cost,
        savings_percent=evaluation.savings_percent,
        comparison_rows=_comparison_rows(breakdowns, best),
    )


@router.get("/", response_class=HTMLResponse)
async def dashboard(
    inputs: UsageInputs = Depends(parse_usage_inputs),
    pricing_table: PricingTable = Depends(get_pricing_table)
) -> HTMLResponse:
    """
    Root endpoint serving the cost dashboard.
    
    Returns:
        HTML page with the breakdown, suggestions and provider comparison
    """
    try:
        evaluation = evaluate(
            inputs.provider, inputs.vm_hours, inputs.storage_gb, inputs.network_gb, pricing_table
        )
        breakdowns = compare_providers(
            inputs.vm_hours, inputs.storage_gb, inputs.network_gb, pricing_table
        )
    except InvalidUsageError as error:
        raise HTTPException(status_code=400, detail=str(error)) from error
    
    best = cheapest_breakdown(breakdowns)
    
    return HTMLResponse(content=render_dashboard(inputs, evaluation, breakdowns, best, pricing_table))
