"""
Shipping method model

A shipping method is a named eligibility + cost rule:
- zones decide which destination addresses it serves
- calculator_type/calculator_preferences decide its cost
- tax_category decides which tax rates can attach to its rates
- display_on decides whether storefront customers can see it
"""
from datetime import datetime, timezone
import enum

from sqlalchemy import (
    Column, Integer, String, DateTime, JSON, ForeignKey, Table, Index, Enum as SQLEnum
)
from sqlalchemy.orm import relationship

from shipping_rates.core.database import Base
from shipping_rates.modules.shipping.calculators import CalculatorFactory


class DisplayOn(str, enum.Enum):
    """Audience of a shipping method."""
    BOTH = "both"  # Storefront and admin
    FRONT_END = "front_end"  # Storefront only
    BACK_END = "back_end"  # Internal/admin only


shipping_method_zones = Table(
    "shipping_method_zones",
    Base.metadata,
    Column("shipping_method_id", Integer, ForeignKey("shipping_methods.id", ondelete="CASCADE"), primary_key=True),
    Column("zone_id", Integer, ForeignKey("zones.id", ondelete="CASCADE"), primary_key=True),
)


class ShippingMethod(Base):
    """Shipping method configuration."""
    __tablename__ = "shipping_methods"
    __table_args__ = (
        Index("ix_shipping_methods_code", "code"),
        Index("ix_shipping_methods_deleted_at", "deleted_at"),
    )

    id = Column(Integer, primary_key=True, index=True)

    # Identification
    name = Column(String(100), nullable=False)  # Customer-facing name
    admin_name = Column(String(100), nullable=True)  # Internal name
    code = Column(String(50), nullable=True)  # Carrier/service code

    display_on = Column(SQLEnum(DisplayOn), default=DisplayOn.BOTH, nullable=False)

    # Cost rule
    calculator_type = Column(String(50), nullable=False)
    calculator_preferences = Column(JSON, default=dict)

    tax_category_id = Column(Integer, ForeignKey("tax_categories.id"), nullable=True)

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    deleted_at = Column(DateTime(timezone=True), nullable=True)

    tax_category = relationship("TaxCategory")
    zones = relationship("Zone", secondary=shipping_method_zones, order_by="Zone.id")

    @property
    def frontend(self) -> bool:
        """Visible to storefront customers."""
        return self.display_on in (None, DisplayOn.BOTH, DisplayOn.FRONT_END)

    @property
    def calculator(self):
        """Calculator instance built from calculator_type and its preferences."""
        return CalculatorFactory.create(self.calculator_type, self.calculator_preferences or {})

    def include(self, address) -> bool:
        """Check whether any of this method's zones serve the address."""
        return any(zone.include(address) for zone in self.zones)

    def __repr__(self) -> str:
        return f"<ShippingMethod {self.name}>"
