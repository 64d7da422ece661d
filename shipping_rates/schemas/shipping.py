"""
Shipping rate schemas

Pydantic models for presenting estimated rates to callers.
"""
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field

from shipping_rates.modules.shipping.shipping_rate import ShippingRate


class ShippingRateResponse(BaseModel):
    """One shipping rate option."""
    shipping_method_id: Optional[int] = None
    name: str
    cost: Decimal = Field(..., description="Shipping cost before tax")
    selected: bool = False
    tax_rate_id: Optional[int] = None

    @classmethod
    def from_rate(cls, rate: ShippingRate) -> "ShippingRateResponse":
        return cls(
            shipping_method_id=rate.shipping_method_id,
            name=rate.name,
            cost=rate.cost,
            selected=rate.selected,
            tax_rate_id=rate.tax_rate_id,
        )


class ShippingRatesResponse(BaseModel):
    """All shipping rate options for a package, in display order."""
    rates: List[ShippingRateResponse] = []

    @classmethod
    def from_rates(cls, rates: List[ShippingRate]) -> "ShippingRatesResponse":
        return cls(rates=[ShippingRateResponse.from_rate(rate) for rate in rates])

    @property
    def selected_rate(self) -> Optional[ShippingRateResponse]:
        return next((rate for rate in self.rates if rate.selected), None)
