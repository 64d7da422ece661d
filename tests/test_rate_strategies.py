"""
Tests for the reference rate selector and rate sorter.
"""
from decimal import Decimal
from types import SimpleNamespace

import pytest

from shipping_rates.modules.shipping import CostRateSorter, LowestCostRateSelector, ShippingRate


def make_rate(name: str, cost: str, selected: bool = False) -> ShippingRate:
    return ShippingRate(
        shipping_method=SimpleNamespace(id=None, name=name),
        shipment=None,
        cost=Decimal(cost),
        selected=selected,
    )


class TestLowestCostRateSelector:

    def test_picks_lowest_cost(self):
        rates = [make_rate("Express", "25.00"), make_rate("Ground", "5.00"), make_rate("Priority", "12.00")]

        assert LowestCostRateSelector().find_default(rates) is rates[1]

    def test_tie_first_occurrence_wins(self):
        """Equal lowest costs resolve to the earliest rate."""
        rates = [make_rate("A", "9.00"), make_rate("B", "5.00"), make_rate("C", "5.00")]

        assert LowestCostRateSelector().find_default(rates) is rates[1]

    def test_single_rate(self):
        rates = [make_rate("Only", "7.00")]
        assert LowestCostRateSelector().find_default(rates) is rates[0]

    def test_does_not_mark_selected(self):
        """Selector only chooses; the estimator sets the flag."""
        rates = [make_rate("A", "1.00"), make_rate("B", "2.00")]

        LowestCostRateSelector().find_default(rates)

        assert not any(rate.selected for rate in rates)


class TestCostRateSorter:

    def test_descending_cost(self):
        rates = [make_rate("Ground", "5.00"), make_rate("Express", "25.00"), make_rate("Priority", "12.00")]

        result = CostRateSorter().sort(rates)

        assert [rate.name for rate in result] == ["Express", "Priority", "Ground"]

    def test_ties_keep_input_order(self):
        rates = [make_rate("A", "5.00"), make_rate("B", "9.00"), make_rate("C", "5.00"), make_rate("D", "9.00")]

        result = CostRateSorter().sort(rates)

        assert [rate.name for rate in result] == ["B", "D", "A", "C"]

    def test_selected_rate_not_special_cased(self):
        """Selected cheapest rate still sorts last."""
        rates = [make_rate("Ground", "5.00", selected=True), make_rate("Express", "25.00")]

        result = CostRateSorter().sort(rates)

        assert [rate.name for rate in result] == ["Express", "Ground"]
        assert result[1].selected is True

    @pytest.mark.parametrize("costs", [[], ["1.00"], ["3.00", "1.00", "2.00", "1.00"]])
    def test_permutation_of_input(self, costs):
        """Output has the same rates, unchanged, and nothing else."""
        rates = [make_rate(f"R{i}", cost) for i, cost in enumerate(costs)]
        snapshot = [(rate.name, rate.cost, rate.tax_rate, rate.selected) for rate in rates]

        result = CostRateSorter().sort(rates)

        assert len(result) == len(rates)
        assert {id(rate) for rate in result} == {id(rate) for rate in rates}
        assert [(rate.name, rate.cost, rate.tax_rate, rate.selected) for rate in rates] == snapshot

    def test_returns_new_list(self):
        rates = [make_rate("A", "1.00"), make_rate("B", "2.00")]

        result = CostRateSorter().sort(rates)

        assert result is not rates
        assert [rate.name for rate in rates] == ["A", "B"]
