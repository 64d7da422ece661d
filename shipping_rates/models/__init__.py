from shipping_rates.models.zone import Zone, ZoneMember
from shipping_rates.models.address import Address
from shipping_rates.models.order import Order, Shipment
from shipping_rates.models.tax import TaxCategory, TaxRate
from shipping_rates.models.shipping_method import DisplayOn, ShippingMethod, shipping_method_zones

__all__ = [
    "Zone",
    "ZoneMember",
    "Address",
    "Order",
    "Shipment",
    "TaxCategory",
    "TaxRate",
    "DisplayOn",
    "ShippingMethod",
    "shipping_method_zones",
]
