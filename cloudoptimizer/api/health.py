"""
Health check endpoint.
Reports the pricing configuration the process is serving with.
"""
from typing import List
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from cloudoptimizer.api.dependencies import get_pricing_table
from cloudoptimizer.core.config import config
from cloudoptimizer.pricing.pricing_table import PricingTable


router = APIRouter()


class ServiceStatus(BaseModel):
    """Response model for the service status check."""
    status: str
    app: str
    environment: str
    providers: List[str]
    default_provider: str
    default_vm_hours: float
    checked_at: str


@router.get("/api/health", response_model=ServiceStatus)
async def service_status(
    pricing_table: PricingTable = Depends(get_pricing_table)
) -> ServiceStatus:
    """
    Liveness endpoint that also summarizes the loaded pricing.
    
    Returns:
        Status with the priced providers and the request defaults in effect
    """
    return ServiceStatus(
        status="ok",
        app=config.APP_NAME,
        environment=config.ENVIRONMENT,
        providers=list(pricing_table.providers),
        default_provider=config.DEFAULT_PROVIDER,
        default_vm_hours=config.DEFAULT_VM_HOURS,
        checked_at=datetime.now(timezone.utc).isoformat(),
    )
