"""
Main FastAPI application bootstrap.
Configures logging, loads pricing and includes routers.
"""
import logging

from fastapi import FastAPI

from cloudoptimizer.core.config import config
from cloudoptimizer.core.logging_setup import configure_logging
from cloudoptimizer.api.dependencies import get_pricing_table
from cloudoptimizer.api.dashboard import router as dashboard_router
from cloudoptimizer.api.health import router as health_router
from cloudoptimizer.api.optimizer import router as optimizer_router
from cloudoptimizer.pricing.pricing_table import PricingConfigError


logger = logging.getLogger(__name__)

# Validate configuration on startup
try:
    config.validate()
except ValueError as error:
    raise RuntimeError(f"Configuration error: {error}") from error

configure_logging(config.LOG_LEVEL)

# Load pricing once so a broken pricing file fails at startup, not per request
try:
    pricing_table = get_pricing_table()
except PricingConfigError as error:
    raise RuntimeError(f"Pricing configuration error: {error}") from error

logger.info(
    "Pricing loaded for providers=%s (default provider=%s, default vm_hours=%s)",
    ", ".join(pricing_table.providers),
    config.DEFAULT_PROVIDER,
    config.DEFAULT_VM_HOURS,
)


app = FastAPI(
    title=config.APP_NAME,
    description="Multi-cloud cost estimation with rule-based optimization suggestions",
)

# Include routers
app.include_router(health_router)
app.include_router(optimizer_router)
app.include_router(dashboard_router)
