from shipping_rates.services.estimator import Estimator, build_estimator
from shipping_rates.services.shipping_method_lookup import (
    ShippingMethodLookup,
    InMemoryShippingMethodLookup,
    SqlShippingMethodLookup,
)

__all__ = [
    "Estimator",
    "build_estimator",
    "ShippingMethodLookup",
    "InMemoryShippingMethodLookup",
    "SqlShippingMethodLookup",
]
