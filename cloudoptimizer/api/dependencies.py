"""
Shared FastAPI dependencies.
"""
from functools import lru_cache

from cloudoptimizer.core.config import config
from cloudoptimizer.pricing.pricing_table import PricingTable, load_pricing_table


@lru_cache
def get_pricing_table() -> PricingTable:
    """Load the pricing table once per process."""
    return load_pricing_table(config.PRICING_TABLE_PATH)
