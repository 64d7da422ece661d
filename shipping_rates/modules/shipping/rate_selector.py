"""
Rate selectors

A selector picks the default rate from a non-empty list of computed rates.
The estimator marks the returned rate as selected.
"""
from abc import ABC, abstractmethod
from typing import List

from shipping_rates.modules.shipping.shipping_rate import ShippingRate


class RateSelector(ABC):
    """Strategy that chooses the default shipping rate."""

    @abstractmethod
    def find_default(self, rates: List[ShippingRate]) -> ShippingRate:
        """
        Choose the default rate.

        Args:
            rates: Non-empty list of rates (callers never pass an empty list)

        Returns:
            A member of rates
        """
        pass


class LowestCostRateSelector(RateSelector):
    """Cheapest rate wins; on a tie the earliest rate in the list wins."""

    def find_default(self, rates: List[ShippingRate]) -> ShippingRate:
        # min() keeps the first of equal keys
        return min(rates, key=lambda rate: rate.cost)
