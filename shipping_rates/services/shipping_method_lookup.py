"""
Shipping method eligibility lookup

Finds the shipping methods that serve a destination address. Methods are
returned with their zones and tax category/tax rates already loaded, in a
stable order (by id), so downstream tie-breaks are deterministic.
"""
import logging
from abc import ABC, abstractmethod
from typing import Iterable, List

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from shipping_rates.models.shipping_method import ShippingMethod
from shipping_rates.models.tax import TaxCategory, TaxRate
from shipping_rates.models.zone import Zone

logger = logging.getLogger(__name__)


class ShippingMethodLookup(ABC):
    """Source of candidate shipping methods for an address."""

    @abstractmethod
    def available_for_address(self, address) -> List[ShippingMethod]:
        pass


class InMemoryShippingMethodLookup(ShippingMethodLookup):
    """Lookup over methods the caller has already loaded."""

    def __init__(self, methods: Iterable[ShippingMethod]):
        self._methods = list(methods)

    def available_for_address(self, address) -> List[ShippingMethod]:
        if address is None:
            return []
        return [method for method in self._methods if method.include(address)]


class SqlShippingMethodLookup(ShippingMethodLookup):
    """Database-backed lookup."""

    def __init__(self, db: Session):
        self.db = db

    def available_for_address(self, address) -> List[ShippingMethod]:
        if address is None:
            return []

        result = self.db.execute(
            select(ShippingMethod)
            .where(ShippingMethod.deleted_at.is_(None))
            .options(
                selectinload(ShippingMethod.zones).selectinload(Zone.members),
                selectinload(ShippingMethod.tax_category)
                .selectinload(TaxCategory.tax_rates)
                .selectinload(TaxRate.zone),
            )
            .order_by(ShippingMethod.id)
        )
        methods = [method for method in result.scalars().all() if method.include(address)]

        logger.debug(f"{len(methods)} shipping methods serve {address!r}")
        return methods
