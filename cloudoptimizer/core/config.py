"""
Configuration module for loading environment variables.
Engine defaults and the pricing table location are resolved here once.
"""
import math
import os
from typing import Optional


def _float_env(name: str, default: float) -> float:
    """
    Read a float from the environment, falling back to default when unset.
    
    Unparseable values come back as NaN so validate() reports them instead
    of the import failing.
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return math.nan


class Config:
    """Application configuration loaded from environment variables."""
    
    # Application
    APP_NAME: str = os.getenv("APP_NAME", "CloudOptimizer Pro")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    
    # Pricing Configuration
    # Optional JSON file overriding the built-in per-provider rates
    PRICING_TABLE_PATH: Optional[str] = os.getenv("PRICING_TABLE_PATH") or None
    
    # Fallback values used when a query parameter is missing or unparseable
    DEFAULT_PROVIDER: str = os.getenv("DEFAULT_PROVIDER", "AWS")
    DEFAULT_VM_HOURS: float = _float_env("DEFAULT_VM_HOURS", 744.0)  # 31 days x 24h
    DEFAULT_STORAGE_GB: float = _float_env("DEFAULT_STORAGE_GB", 100.0)
    DEFAULT_NETWORK_GB: float = _float_env("DEFAULT_NETWORK_GB", 50.0)
    
    ALLOWED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
    
    @classmethod
    def validate(cls) -> None:
        """
        Validates that configuration values are usable.
        
        Raises:
            ValueError: If any configuration value is missing or invalid.
        """
        if not cls.DEFAULT_PROVIDER:
            raise ValueError("DEFAULT_PROVIDER is required")
        
        for name in ("DEFAULT_VM_HOURS", "DEFAULT_STORAGE_GB", "DEFAULT_NETWORK_GB"):
            value = getattr(cls, name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be a finite, non-negative number (got: {value})")
        
        if cls.LOG_LEVEL not in cls.ALLOWED_LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(cls.ALLOWED_LOG_LEVELS)} (got: {cls.LOG_LEVEL})"
            )
        
        if cls.PRICING_TABLE_PATH and not os.path.isfile(cls.PRICING_TABLE_PATH):
            raise ValueError(f"PRICING_TABLE_PATH does not exist: {cls.PRICING_TABLE_PATH}")


config = Config()
