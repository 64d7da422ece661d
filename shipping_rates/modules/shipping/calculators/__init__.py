"""
Calculator Registry and Factory v1.0.0

Shipping methods store a calculator type key plus preferences;
CalculatorFactory turns those into calculator instances.
"""
from typing import Any, Dict, List, Optional, Type
import logging

from shipping_rates.core.exceptions import CalculatorNotFound
from shipping_rates.modules.shipping.calculators.base import BaseCalculator

logger = logging.getLogger(__name__)

# Registry of calculator implementations
_CALCULATOR_REGISTRY: Dict[str, Type[BaseCalculator]] = {}


def register_calculator(type_key: str):
    """
    Decorator to register a calculator implementation.

    Usage:
        @register_calculator("flat_rate")
        class FlatRateCalculator(BaseCalculator):
            ...
    """
    def decorator(cls: Type[BaseCalculator]):
        cls.type_key = type_key
        _CALCULATOR_REGISTRY[type_key] = cls
        logger.info(f"Registered calculator: {type_key} -> {cls.__name__}")
        return cls
    return decorator


class CalculatorFactory:
    """Factory for creating calculator instances from stored configuration."""

    @classmethod
    def create(
        cls,
        type_key: str,
        preferences: Optional[Dict[str, Any]] = None
    ) -> BaseCalculator:
        """
        Create a calculator instance.

        Raises:
            CalculatorNotFound: no implementation registered for type_key
        """
        calculator_cls = _CALCULATOR_REGISTRY.get(type_key)
        if not calculator_cls:
            raise CalculatorNotFound(
                message=f"No calculator registered for type: {type_key}",
                details={"calculator_type": type_key},
            )
        return calculator_cls(preferences)

    @classmethod
    def registered_types(cls) -> List[str]:
        """Get list of all registered calculator type keys."""
        return list(_CALCULATOR_REGISTRY.keys())


# Import calculators to trigger registration
# These imports must be at the bottom to avoid circular imports
from shipping_rates.modules.shipping.calculators.flat_rate import FlatRateCalculator  # noqa: E402, F401
from shipping_rates.modules.shipping.calculators.per_item import PerItemCalculator  # noqa: E402, F401
from shipping_rates.modules.shipping.calculators.flat_percent_item_total import FlatPercentItemTotalCalculator  # noqa: E402, F401
from shipping_rates.modules.shipping.calculators.price_sack import PriceSackCalculator  # noqa: E402, F401
from shipping_rates.modules.shipping.calculators.weight_table import WeightTableCalculator  # noqa: E402, F401

__all__ = [
    "BaseCalculator",
    "CalculatorFactory",
    "register_calculator",
    "FlatRateCalculator",
    "PerItemCalculator",
    "FlatPercentItemTotalCalculator",
    "PriceSackCalculator",
    "WeightTableCalculator",
]
