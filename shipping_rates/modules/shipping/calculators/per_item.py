"""Per item: a fixed amount for every unit in the package."""
from decimal import Decimal

from shipping_rates.modules.shipping.calculators import register_calculator
from shipping_rates.modules.shipping.calculators.base import BaseCalculator, to_money


@register_calculator("per_item")
class PerItemCalculator(BaseCalculator):
    """
    Preferences:
        amount   - cost per unit
        currency - optional currency the amount is quoted in
    """

    def compute(self, package) -> Decimal:
        return to_money(self.decimal_preference("amount") * package.quantity)
