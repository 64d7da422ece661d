"""
Rate sorters

A sorter returns the rates in display order. Output is always a permutation
of the input; rates themselves are never modified.
"""
from abc import ABC, abstractmethod
from typing import List

from shipping_rates.modules.shipping.shipping_rate import ShippingRate


class RateSorter(ABC):
    """Strategy that orders shipping rates for presentation."""

    @abstractmethod
    def sort(self, rates: List[ShippingRate]) -> List[ShippingRate]:
        pass


class CostRateSorter(RateSorter):
    """
    Most expensive first.

    The selected flag plays no part in ordering. Equal costs keep their
    input order (sorted() is stable, including with reverse=True).
    """

    def sort(self, rates: List[ShippingRate]) -> List[ShippingRate]:
        return sorted(rates, key=lambda rate: rate.cost, reverse=True)
