"""
Zone models

A zone is a set of countries and/or states. Zones scope shipping methods
(where a method is serviceable) and tax rates (where a rate applies).
One zone may be flagged as the default tax zone.
"""
from typing import Iterable, Optional

from sqlalchemy import Column, Integer, String, Boolean, Text, ForeignKey, Index
from sqlalchemy.orm import relationship

from shipping_rates.core.database import Base


class Zone(Base):
    """
    Geographic zone.

    default_tax marks the zone whose tax rates apply when the order's own
    tax zone has no rate for a tax category.
    """
    __tablename__ = "zones"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, nullable=False)
    description = Column(Text, nullable=True)
    default_tax = Column(Boolean, default=False, nullable=False)

    members = relationship(
        "ZoneMember",
        back_populates="zone",
        cascade="all, delete-orphan",
        order_by="ZoneMember.id",
    )

    @property
    def is_state_zone(self) -> bool:
        """True when any member narrows the zone to a state/province."""
        return any(member.state_province for member in self.members)

    def include(self, address) -> bool:
        """Check whether the address falls inside this zone."""
        if address is None:
            return False
        return any(member.include(address) for member in self.members)

    @staticmethod
    def match(zones: Iterable["Zone"], address) -> Optional["Zone"]:
        """
        Find the zone that best matches an address.

        State-level zones win over country-level zones; within the same
        level the first zone in iteration order wins.
        """
        matches = [zone for zone in zones if zone.include(address)]
        if not matches:
            return None
        state_matches = [zone for zone in matches if zone.is_state_zone]
        return (state_matches or matches)[0]

    def __repr__(self) -> str:
        return f"<Zone {self.name}>"


class ZoneMember(Base):
    """A country, or a single state of a country, belonging to a zone."""
    __tablename__ = "zone_members"
    __table_args__ = (
        Index("ix_zone_members_zone_id", "zone_id"),
        Index("ix_zone_members_country", "country_code"),
    )

    id = Column(Integer, primary_key=True)
    zone_id = Column(Integer, ForeignKey("zones.id", ondelete="CASCADE"), nullable=False)
    country_code = Column(String(2), nullable=False)
    state_province = Column(String(50), nullable=True)  # None = whole country

    zone = relationship("Zone", back_populates="members")

    def include(self, address) -> bool:
        country = (address.country_code or "").upper()
        if country != self.country_code.upper():
            return False
        if not self.state_province:
            return True
        return (address.state_province or "").upper() == self.state_province.upper()
