"""
Tax category and tax rate models

A tax category groups the zone-scoped rates that apply to a kind of charge.
Shipping methods reference a category; the estimator decides which of the
category's rates (if any) applies to a shipping rate. Tax amounts are not
computed here.
"""
from sqlalchemy import Column, Integer, String, Boolean, Numeric, Text, ForeignKey, Index
from sqlalchemy.orm import relationship

from shipping_rates.core.database import Base


class TaxCategory(Base):
    """Named group of tax rates."""
    __tablename__ = "tax_categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, nullable=False)
    description = Column(Text, nullable=True)
    is_default = Column(Boolean, default=False, nullable=False)

    tax_rates = relationship(
        "TaxRate",
        back_populates="tax_category",
        order_by="TaxRate.id",
    )

    def __repr__(self) -> str:
        return f"<TaxCategory {self.name}>"


class TaxRate(Base):
    """Tax rate scoped to one zone."""
    __tablename__ = "tax_rates"
    __table_args__ = (
        Index("ix_tax_rates_tax_category_id", "tax_category_id"),
        Index("ix_tax_rates_zone_id", "zone_id"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=True)
    amount = Column(Numeric(8, 5), nullable=False)  # 0.08 = 8%
    included_in_price = Column(Boolean, default=False, nullable=False)

    zone_id = Column(Integer, ForeignKey("zones.id"), nullable=True)
    tax_category_id = Column(Integer, ForeignKey("tax_categories.id"), nullable=False)

    zone = relationship("Zone")
    tax_category = relationship("TaxCategory", back_populates="tax_rates")

    @property
    def is_default_tax_zone(self) -> bool:
        """True when this rate belongs to the default tax zone."""
        return bool(self.zone is not None and self.zone.default_tax)

    def __repr__(self) -> str:
        return f"<TaxRate {self.name} {self.amount}>"
