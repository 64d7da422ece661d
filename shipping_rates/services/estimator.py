"""
Shipping Rate Estimator v1.0.0

Turns a package into the list of shipping rates a customer can choose from:
1. Candidate methods for the destination (calculator available, currency ok)
2. One rate per method that produces a cost, with its tax rate attached
3. Storefront filter (frontend_only)
4. Default rate chosen by the selector
5. Display order from the sorter

Calculator, lookup and tax data errors are not caught here.
"""
import importlib
import logging
from typing import List, Optional

from shipping_rates.core.config import EstimatorConfig
from shipping_rates.core.exceptions import ConfigurationError, OrderRequired, ShipmentRequired
from shipping_rates.modules.shipping.calculators.base import normalize_currency
from shipping_rates.modules.shipping.rate_selector import LowestCostRateSelector, RateSelector
from shipping_rates.modules.shipping.rate_sorter import CostRateSorter, RateSorter
from shipping_rates.modules.shipping.shipping_rate import ShippingRate
from shipping_rates.services.shipping_method_lookup import ShippingMethodLookup

logger = logging.getLogger(__name__)


class Estimator:
    """
    Estimates shipping rates for packages.

    Holds no per-call state; one instance can serve any number of packages.
    """

    def __init__(
        self,
        method_lookup: ShippingMethodLookup,
        selector: Optional[RateSelector] = None,
        sorter: Optional[RateSorter] = None,
    ):
        self.method_lookup = method_lookup
        self.selector = selector or LowestCostRateSelector()
        self.sorter = sorter or CostRateSorter()

    def shipping_rates(self, package, frontend_only: bool = True) -> List[ShippingRate]:
        """
        Estimate the shipping rates for a package.

        Args:
            package: The package to be shipped
            frontend_only: Restrict to methods visible on the storefront

        Returns:
            Rates in sorter order, exactly one marked selected when non-empty

        Raises:
            ShipmentRequired: package has no shipment
            OrderRequired: the shipment has no order
        """
        shipment = package.shipment
        if shipment is None:
            raise ShipmentRequired()
        if shipment.order is None:
            raise OrderRequired(details={"shipment": getattr(shipment, "number", None)})

        rates = self._calculate_shipping_rates(package)

        if frontend_only:
            visible = [rate for rate in rates if rate.shipping_method.frontend]
            if len(visible) != len(rates):
                logger.debug(f"Dropped {len(rates) - len(visible)} internal-only shipping rates")
            rates = visible

        self._choose_default_shipping_rate(rates)
        return self.sorter.sort(rates)

    def _choose_default_shipping_rate(self, rates: List[ShippingRate]) -> None:
        if not rates:
            return
        default_rate = self.selector.find_default(rates)
        default_rate.selected = True
        logger.debug(f"Default shipping rate: {default_rate.name!r} at {default_rate.cost}")

    def _calculate_shipping_rates(self, package) -> List[ShippingRate]:
        shipment = package.shipment
        rates = []

        for shipping_method, calculator in self._shipping_methods(package):
            cost = calculator.compute(package)
            if cost is None:
                logger.debug(f"Shipping method {shipping_method.name!r} produced no cost")
                continue

            rates.append(ShippingRate(
                shipping_method=shipping_method,
                shipment=shipment,
                cost=cost,
                tax_rate=self._find_tax_rate(shipping_method, shipment.order),
            ))

        return rates

    def _find_tax_rate(self, shipping_method, order):
        """
        Tax rate for a shipping method's rate.

        Prefers the category's rate for the order's tax zone, then the
        default tax zone rate. The first match in category order wins.
        """
        tax_category = shipping_method.tax_category
        if tax_category is None:
            return None

        tax_zone = order.tax_zone
        tax_rates = list(tax_category.tax_rates)

        if tax_zone is not None:
            for tax_rate in tax_rates:
                if tax_rate.zone is not None and tax_rate.zone == tax_zone:
                    return tax_rate

        for tax_rate in tax_rates:
            if tax_rate.is_default_tax_zone:
                return tax_rate

        return None

    def _shipping_methods(self, package) -> list:
        """Eligible methods paired with the calculator instance that vetted them."""
        order_currency = normalize_currency(package.shipment.order.currency)
        methods = self.method_lookup.available_for_address(package.shipment.address)
        logger.debug(f"{len(methods)} candidate shipping methods for shipment")

        eligible = []
        for shipping_method in methods:
            calculator = shipping_method.calculator
            if not calculator.available(package):
                logger.debug(f"Calculator unavailable for {shipping_method.name!r}")
                continue

            currency = calculator.preferred_currency
            if currency and currency != order_currency:
                logger.debug(
                    f"Skipping {shipping_method.name!r}: priced in {currency}, order in {order_currency}"
                )
                continue

            eligible.append((shipping_method, calculator))

        return eligible


def _import_class(path: str):
    module_path, _, attr = path.rpartition(".")
    try:
        module = importlib.import_module(module_path)
        return getattr(module, attr)
    except (ImportError, AttributeError, ValueError) as e:
        raise ConfigurationError(
            message=f"Cannot import {path!r}: {e}",
            details={"path": path},
        )


def build_estimator(
    method_lookup: ShippingMethodLookup,
    config: Optional[EstimatorConfig] = None,
) -> Estimator:
    """
    Build an Estimator with the configured selector and sorter.

    Raises:
        ConfigurationError: a configured class cannot be imported or does not
            implement the selector/sorter contract
    """
    config = config or EstimatorConfig()

    selector_cls = _import_class(config.selector_class)
    if not (isinstance(selector_cls, type) and issubclass(selector_cls, RateSelector)):
        raise ConfigurationError(
            message=f"{config.selector_class} is not a RateSelector",
            details={"path": config.selector_class},
        )

    sorter_cls = _import_class(config.sorter_class)
    if not (isinstance(sorter_cls, type) and issubclass(sorter_cls, RateSorter)):
        raise ConfigurationError(
            message=f"{config.sorter_class} is not a RateSorter",
            details={"path": config.sorter_class},
        )

    return Estimator(method_lookup, selector=selector_cls(), sorter=sorter_cls())
