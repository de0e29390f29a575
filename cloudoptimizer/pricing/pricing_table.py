"""
Static per-provider pricing table.
Rates are loaded once at startup (built-in defaults or a JSON override file)
and shared read-only across requests.
"""
from typing import Dict, Any, Optional, Tuple
from dataclasses import dataclass
from pathlib import Path
import json
import logging
import math


logger = logging.getLogger(__name__)


class PricingConfigError(Exception):
    """Raised when a pricing table file cannot be loaded."""
    pass


@dataclass(frozen=True)
class ProviderRates:
    """Per-unit USD rates for one provider."""
    vm_rate: float  # per VM-hour
    storage_rate: float  # per GB-month
    network_rate: float  # per GB transferred
    
    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary for JSON serialization."""
        return {
            "vm_rate": self.vm_rate,
            "storage_rate": self.storage_rate,
            "network_rate": self.network_rate,
        }


DEFAULT_PROVIDER = "AWS"

# Providers scanned by the cheapest-provider comparison, in tie-break order
COMPARISON_PROVIDERS: Tuple[str, ...] = ("AWS", "Azure", "Google")

DEFAULT_RATES: Dict[str, ProviderRates] = {
    "AWS": ProviderRates(vm_rate=0.05, storage_rate=0.01, network_rate=0.02),
    "Azure": ProviderRates(vm_rate=0.045, storage_rate=0.015, network_rate=0.018),
    "Google": ProviderRates(vm_rate=0.048, storage_rate=0.011, network_rate=0.025),
}
DEFAULT_RATES["GCP"] = DEFAULT_RATES["Google"]


class PricingTable:
    """Immutable provider -> rates lookup with a default-provider fallback."""
    
    def __init__(
        self,
        rates: Optional[Dict[str, ProviderRates]] = None,
        default_provider: str = DEFAULT_PROVIDER,
        comparison_providers: Tuple[str, ...] = COMPARISON_PROVIDERS
    ):
        """
        Initialize pricing table.
        
        Args:
            rates: Provider name -> rates (built-in defaults if None)
            default_provider: Provider whose rates answer unknown lookups
            comparison_providers: Providers scanned by the best-provider search
        
        Raises:
            PricingConfigError: If the default or a comparison provider has no rates
        """
        self._rates = dict(rates if rates is not None else DEFAULT_RATES)
        if default_provider not in self._rates:
            raise PricingConfigError(f"Default provider {default_provider!r} has no rates")
        missing = [name for name in comparison_providers if name not in self._rates]
        if missing:
            raise PricingConfigError(f"Comparison providers without rates: {', '.join(missing)}")
        self.default_provider = default_provider
        self.comparison_providers = tuple(comparison_providers)
    
    @property
    def providers(self) -> Tuple[str, ...]:
        """Known provider names in declaration order."""
        return tuple(self._rates)
    
    def rates(self, provider: str) -> ProviderRates:
        """
        Look up rates for a provider.
        
        Lookup is case-sensitive. Unknown names resolve to the default
        provider's rates rather than raising.
        """
        found = self._rates.get(provider)
        if found is None:
            logger.info(
                "Unknown provider %r, using %s rates",
                provider,
                self.default_provider,
            )
            return self._rates[self.default_provider]
        return found
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "default_provider": self.default_provider,
            "comparison_providers": list(self.comparison_providers),
            "rates": {name: rates.to_dict() for name, rates in self._rates.items()},
        }


def _parse_rates(provider: str, raw: Any) -> ProviderRates:
    """Build ProviderRates from one JSON entry."""
    if not isinstance(raw, dict):
        raise PricingConfigError(f"Rates for {provider!r} must be an object")
    try:
        rates = ProviderRates(
            vm_rate=float(raw["vm_rate"]),
            storage_rate=float(raw["storage_rate"]),
            network_rate=float(raw["network_rate"]),
        )
    except KeyError as error:
        raise PricingConfigError(f"Rates for {provider!r} missing {error.args[0]!r}") from error
    except (TypeError, ValueError) as error:
        raise PricingConfigError(f"Rates for {provider!r} are not numeric: {error}") from error
    
    for field, value in rates.to_dict().items():
        if not math.isfinite(value) or value < 0:
            raise PricingConfigError(
                f"Rate {field!r} for {provider!r} must be a finite, non-negative number (got: {value})"
            )
    return rates


def load_pricing_table(path: Optional[str] = None) -> PricingTable:
    """
    Load the pricing table.
    
    Args:
        path: JSON file mapping provider name to
              {"vm_rate", "storage_rate", "network_rate"}; built-in rates if None
    
    Returns:
        PricingTable instance
    
    Raises:
        PricingConfigError: If the file is unreadable or malformed
    """
    if not path:
        return PricingTable()
    
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as error:
        raise PricingConfigError(f"Cannot read pricing table {path}: {error}") from error
    except json.JSONDecodeError as error:
        raise PricingConfigError(f"Invalid JSON in pricing table {path}: {error}") from error
    
    if not isinstance(data, dict) or not data:
        raise PricingConfigError(f"Pricing table {path} must be a non-empty object")
    
    rates = {provider: _parse_rates(provider, raw) for provider, raw in data.items()}
    comparison = tuple(name for name in COMPARISON_PROVIDERS if name in rates)
    table = PricingTable(rates=rates, comparison_providers=comparison)
    logger.info("Loaded pricing table from %s (%d providers)", path, len(rates))
    return table
