"""
Base Calculator Interface v1.0.0

Every shipping method owns exactly one calculator. The estimator depends
only on this contract:
- available(package): can this method ship the package at all
- compute(package): the cost, or None when the method does not apply
- preferred_currency: optional currency the calculator prices in
"""
from abc import ABC, abstractmethod
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Dict, Optional

from shipping_rates.core.exceptions import CalculatorPreferenceError

CENTS = Decimal("0.01")


def to_money(value: Decimal) -> Decimal:
    """Round a monetary amount to cents (half up)."""
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def normalize_currency(currency) -> Optional[str]:
    """Strip and upper-case a currency code; blank becomes None."""
    if currency is None or not str(currency).strip():
        return None
    return str(currency).strip().upper()


class BaseCalculator(ABC):
    """
    Abstract base class for shipping cost calculators.

    Preferences are the calculator's stored settings (amounts, percentages,
    currency) as saved on the shipping method.
    """

    type_key: str = ""

    def __init__(self, preferences: Optional[Dict[str, Any]] = None):
        self.preferences = dict(preferences or {})

    @property
    def preferred_currency(self) -> Optional[str]:
        """Currency this calculator prices in, or None for any currency."""
        return normalize_currency(self.preferences.get("currency"))

    def get_preference(self, key: str, default: Any = None) -> Any:
        return self.preferences.get(key, default)

    def decimal_preference(self, key: str, default: Optional[Decimal] = None) -> Decimal:
        """
        Read a numeric preference as Decimal.

        Raises:
            CalculatorPreferenceError: preference missing (and no default), not numeric,
                NaN or infinite
        """
        value = self.preferences.get(key)
        if value is None or value == "":
            if default is None:
                raise CalculatorPreferenceError(
                    message=f"{self.__class__.__name__} requires preference '{key}'",
                    details={"calculator": self.type_key, "preference": key},
                )
            return default
        try:
            number = Decimal(str(value))
        except (InvalidOperation, ValueError):
            number = None
        if number is None or not number.is_finite():
            raise CalculatorPreferenceError(
                message=f"{self.__class__.__name__} preference '{key}' is not a finite number: {value!r}",
                details={"calculator": self.type_key, "preference": key, "value": value},
            )
        return number

    def available(self, package) -> bool:
        """Whether this calculator can price the package. Defaults to True."""
        return True

    @abstractmethod
    def compute(self, package) -> Optional[Decimal]:
        """
        Compute the shipping cost for a package.

        Returns:
            Cost as Decimal, or None if the method does not apply to the package
            (None is not the same as zero cost)
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.preferences!r})"
