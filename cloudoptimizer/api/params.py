"""
Query parameter parsing for the cost endpoints.
Raw query strings are turned into engine inputs; anything missing or
unusable is replaced with the configured default instead of failing.
"""
from typing import Optional
from dataclasses import dataclass
import logging
import math

from cloudoptimizer.core.config import config


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UsageInputs:
    """Validated inputs for one evaluation request."""
    provider: str
    vm_hours: float
    storage_gb: float
    network_gb: float


def parse_usage_value(raw: Optional[str], default: float, name: str = "value") -> float:
    """
    Parse a usage magnitude from a query string value.
    
    Missing, blank, non-numeric, non-finite and negative values all fall back
    to default.
    """
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Unparseable %s=%r, using default %s", name, raw, default)
        return default
    if not math.isfinite(value) or value < 0:
        logger.warning("Rejected %s=%r, using default %s", name, raw, default)
        return default
    return value


def parse_provider(raw: Optional[str], default: str) -> str:
    """Strip the provider name; missing or blank falls back to default."""
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def parse_usage_inputs(
    provider: Optional[str] = None,
    vm_hours: Optional[str] = None,
    storage_gb: Optional[str] = None,
    network_gb: Optional[str] = None
) -> UsageInputs:
    """
    Build UsageInputs from raw query values using configured defaults.
    
    Used directly as a FastAPI dependency, so each argument is a query parameter.
    """
    return UsageInputs(
        provider=parse_provider(provider, config.DEFAULT_PROVIDER),
        vm_hours=parse_usage_value(vm_hours, config.DEFAULT_VM_HOURS, "vm_hours"),
        storage_gb=parse_usage_value(storage_gb, config.DEFAULT_STORAGE_GB, "storage_gb"),
        network_gb=parse_usage_value(network_gb, config.DEFAULT_NETWORK_GB, "network_gb"),
    )
