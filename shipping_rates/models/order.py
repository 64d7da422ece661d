"""
Order and Shipment models

A shipment belongs to exactly one order and carries the destination
address. The order supplies the settlement currency and the tax zone.
"""
from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship

from shipping_rates.core.config import settings
from shipping_rates.core.database import Base
from shipping_rates.modules.shipping.calculators.base import normalize_currency


class Order(Base):
    """Customer order."""
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    number = Column(String(32), unique=True, nullable=False)
    currency = Column(String(3), nullable=False)

    # Zone matched from the order's tax address, resolved at checkout
    tax_zone_id = Column(Integer, ForeignKey("zones.id"), nullable=True)

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    tax_zone = relationship("Zone")
    shipments = relationship("Shipment", back_populates="order")

    def __init__(self, **kwargs):
        kwargs["currency"] = normalize_currency(kwargs.get("currency")) or settings.DEFAULT_CURRENCY
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        return f"<Order {self.number}>"


class Shipment(Base):
    """Fulfillment record tying a package to an order and an address."""
    __tablename__ = "shipments"
    __table_args__ = (
        Index("ix_shipments_order_id", "order_id"),
    )

    id = Column(Integer, primary_key=True, index=True)
    number = Column(String(32), unique=True, nullable=False)

    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False)
    address_id = Column(Integer, ForeignKey("addresses.id"), nullable=True)

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    order = relationship("Order", back_populates="shipments")
    address = relationship("Address")

    def __repr__(self) -> str:
        return f"<Shipment {self.number}>"
