"""
Shipping Module v1.0.0

- Package/ContentItem value types
- ShippingRate value type
- Calculator registry (one calculator per shipping method)
- Rate selector and rate sorter strategies
"""
from shipping_rates.modules.shipping.package import ContentItem, Package
from shipping_rates.modules.shipping.shipping_rate import ShippingRate
from shipping_rates.modules.shipping.rate_selector import RateSelector, LowestCostRateSelector
from shipping_rates.modules.shipping.rate_sorter import RateSorter, CostRateSorter

__all__ = [
    "ContentItem",
    "Package",
    "ShippingRate",
    "RateSelector",
    "LowestCostRateSelector",
    "RateSorter",
    "CostRateSorter",
]
