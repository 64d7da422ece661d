"""
Weight table: cost by package weight bracket.

Brackets are inclusive upper bounds. A package heavier than the largest
bracket cannot ship with this method, so compute() returns None.
"""
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Tuple

from shipping_rates.core.exceptions import CalculatorPreferenceError
from shipping_rates.modules.shipping.calculators import register_calculator
from shipping_rates.modules.shipping.calculators.base import BaseCalculator, to_money


@register_calculator("weight_table")
class WeightTableCalculator(BaseCalculator):
    """
    Preferences:
        brackets - list of {"max_weight": ..., "amount": ...}
        currency - optional currency the amounts are quoted in
    """

    def brackets(self) -> List[Tuple[Decimal, Decimal]]:
        """Brackets as (max_weight, amount), lightest first."""
        raw = self.get_preference("brackets")
        if not raw:
            raise CalculatorPreferenceError(
                message="WeightTableCalculator requires preference 'brackets'",
                details={"calculator": self.type_key, "preference": "brackets"},
            )

        parsed = []
        for bracket in raw:
            try:
                max_weight = Decimal(str(bracket["max_weight"]))
                amount = Decimal(str(bracket["amount"]))
            except (KeyError, TypeError, InvalidOperation) as e:
                raise CalculatorPreferenceError(
                    message=f"Invalid weight bracket: {bracket!r}",
                    details={"calculator": self.type_key, "bracket": bracket, "error": str(e)},
                )
            if not (max_weight.is_finite() and amount.is_finite()):
                raise CalculatorPreferenceError(
                    message=f"Weight bracket values must be finite: {bracket!r}",
                    details={"calculator": self.type_key, "bracket": bracket},
                )
            parsed.append((max_weight, amount))
        return sorted(parsed, key=lambda b: b[0])

    def available(self, package) -> bool:
        return not package.is_empty

    def compute(self, package) -> Optional[Decimal]:
        weight = package.weight
        for max_weight, amount in self.brackets():
            if weight <= max_weight:
                return to_money(amount)
        return None
