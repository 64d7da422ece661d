"""Price sack: a normal cost, discounted once the item total reaches a threshold."""
from decimal import Decimal

from shipping_rates.modules.shipping.calculators import register_calculator
from shipping_rates.modules.shipping.calculators.base import BaseCalculator, to_money


@register_calculator("price_sack")
class PriceSackCalculator(BaseCalculator):
    """
    Preferences:
        minimal_amount  - item total at which the discount starts
        normal_amount   - cost below the threshold
        discount_amount - cost at or above the threshold
        currency        - optional currency the amounts are quoted in
    """

    def compute(self, package) -> Decimal:
        minimal = self.decimal_preference("minimal_amount")
        if package.item_total >= minimal:
            return to_money(self.decimal_preference("discount_amount", Decimal("0")))
        return to_money(self.decimal_preference("normal_amount"))
