"""
Shipping Rates Exception Hierarchy

All exceptions include code, message, and details for logging and debugging.

Exception Hierarchy:
    ShippingRatesError
    ├── EstimatorError
    │   ├── ShipmentRequired
    │   └── OrderRequired
    ├── CalculatorError
    │   ├── CalculatorNotFound
    │   └── CalculatorPreferenceError
    └── ConfigurationError
"""
import logging
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)


class ShippingRatesError(Exception):
    """
    Base exception for all shipping rate errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code for programmatic handling
        details: Additional context for debugging
    """

    default_code: str = "SHIPPING_RATES_ERROR"
    default_message: str = "Shipping rate estimation failed"

    def __init__(
        self,
        message: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message or self.default_message
        self.code = code or self.default_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


# =============================================================================
# ESTIMATOR ERRORS
# =============================================================================

class EstimatorError(ShippingRatesError):
    """Base exception for invalid estimator input."""
    default_code = "ESTIMATOR_ERROR"


class ShipmentRequired(EstimatorError):
    """Package has no associated shipment."""
    default_code = "SHIPMENT_REQUIRED"
    default_message = "Package must belong to a shipment to estimate rates"


class OrderRequired(EstimatorError):
    """Shipment has no associated order."""
    default_code = "ORDER_REQUIRED"
    default_message = "Shipment must belong to an order to estimate rates"


# =============================================================================
# CALCULATOR ERRORS
# =============================================================================

class CalculatorError(ShippingRatesError):
    """Base exception for calculator errors."""
    default_code = "CALCULATOR_ERROR"


class CalculatorNotFound(CalculatorError):
    """No calculator registered for the requested type."""
    default_code = "CALCULATOR_NOT_FOUND"
    default_message = "Calculator type is not registered"


class CalculatorPreferenceError(CalculatorError):
    """Calculator preference is missing or malformed."""
    default_code = "CALCULATOR_PREFERENCE_INVALID"
    default_message = "Calculator preference is missing or invalid"


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================

class ConfigurationError(ShippingRatesError):
    """Selector or sorter configuration cannot be resolved."""
    default_code = "CONFIGURATION_ERROR"
    default_message = "Invalid shipping rate configuration"
