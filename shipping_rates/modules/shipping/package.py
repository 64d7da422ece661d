"""
Package value types

A package is the shippable contents of (part of) an order, bound to one
shipment. Packages are immutable for the duration of an estimate.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class ContentItem:
    """One line of package contents."""
    sku: str
    quantity: int = 1
    price: Decimal = Decimal("0.00")  # unit price
    weight: Decimal = Decimal("0")  # unit weight

    @property
    def amount(self) -> Decimal:
        return self.price * self.quantity

    @property
    def total_weight(self) -> Decimal:
        return self.weight * self.quantity


@dataclass(frozen=True)
class Package:
    """Contents destined for the shipment's address."""
    shipment: Optional[Any]
    contents: Tuple[ContentItem, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable but always store a tuple
        if not isinstance(self.contents, tuple):
            object.__setattr__(self, "contents", tuple(self.contents))

    @property
    def address(self):
        """Destination address (the shipment's address)."""
        if self.shipment is None:
            return None
        return self.shipment.address

    @property
    def quantity(self) -> int:
        return sum(item.quantity for item in self.contents)

    @property
    def item_total(self) -> Decimal:
        return sum((item.amount for item in self.contents), Decimal("0.00"))

    @property
    def weight(self) -> Decimal:
        return sum((item.total_weight for item in self.contents), Decimal("0"))

    @property
    def is_empty(self) -> bool:
        return self.quantity == 0
