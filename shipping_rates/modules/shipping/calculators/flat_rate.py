"""Flat rate: the same cost for every package."""
from decimal import Decimal

from shipping_rates.modules.shipping.calculators import register_calculator
from shipping_rates.modules.shipping.calculators.base import BaseCalculator, to_money


@register_calculator("flat_rate")
class FlatRateCalculator(BaseCalculator):
    """
    Preferences:
        amount   - cost per package
        currency - optional currency the amount is quoted in
    """

    def compute(self, package) -> Decimal:
        return to_money(self.decimal_preference("amount"))
