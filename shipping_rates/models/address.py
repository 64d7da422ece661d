"""
Address model

Destination addresses for shipments. Only the fields used for zone
matching are required.
"""
from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, DateTime

from shipping_rates.core.database import Base


class Address(Base):
    """Shipping destination."""
    __tablename__ = "addresses"

    id = Column(Integer, primary_key=True, index=True)

    recipient_name = Column(String(100), nullable=True)
    address_line1 = Column(String(100), nullable=True)
    address_line2 = Column(String(100), nullable=True)
    city = Column(String(100), nullable=True)
    state_province = Column(String(50), nullable=True)
    postal_code = Column(String(20), nullable=True)
    country_code = Column(String(2), nullable=False, default="US")

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    def __repr__(self) -> str:
        return f"<Address {self.city}, {self.state_province} {self.country_code}>"
