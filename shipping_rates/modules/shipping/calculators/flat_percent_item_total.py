"""Flat percent: a percentage of the package's item total."""
from decimal import Decimal

from shipping_rates.modules.shipping.calculators import register_calculator
from shipping_rates.modules.shipping.calculators.base import BaseCalculator, to_money


@register_calculator("flat_percent_item_total")
class FlatPercentItemTotalCalculator(BaseCalculator):
    """
    Preferences:
        flat_percent - percentage of item total (10 = 10%)
    """

    def compute(self, package) -> Decimal:
        percent = self.decimal_preference("flat_percent")
        return to_money(package.item_total * percent / Decimal("100"))
