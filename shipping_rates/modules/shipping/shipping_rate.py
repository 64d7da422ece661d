"""
Shipping rate value type

A priced, optionally tax-adjusted offer to ship a package via one shipping
method. Rates are built fresh for every estimate and are not persisted.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional


@dataclass
class ShippingRate:
    """Shipping rate quote."""
    shipping_method: Any
    shipment: Any
    cost: Decimal
    tax_rate: Optional[Any] = None
    selected: bool = False

    @property
    def shipping_method_id(self) -> Optional[int]:
        return getattr(self.shipping_method, "id", None)

    @property
    def tax_rate_id(self) -> Optional[int]:
        if self.tax_rate is None:
            return None
        return getattr(self.tax_rate, "id", None)

    @property
    def name(self) -> str:
        return getattr(self.shipping_method, "name", "")
