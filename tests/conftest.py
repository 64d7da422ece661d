"""
Pytest configuration and fixtures for shipping rate tests.
"""
import os
from decimal import Decimal
from typing import Callable

import pytest

# Set test environment before importing app modules
os.environ["ENVIRONMENT"] = "development"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DEFAULT_CURRENCY"] = "USD"

from shipping_rates.models import (  # noqa: E402
    Address,
    DisplayOn,
    Order,
    Shipment,
    ShippingMethod,
    TaxCategory,
    TaxRate,
    Zone,
    ZoneMember,
)
from shipping_rates.modules.shipping import ContentItem, Package  # noqa: E402


@pytest.fixture
def us_zone() -> Zone:
    return Zone(name="United States", default_tax=False, members=[ZoneMember(country_code="US")])


@pytest.fixture
def eu_zone() -> Zone:
    return Zone(
        name="EU VAT",
        default_tax=True,
        members=[ZoneMember(country_code="DE"), ZoneMember(country_code="FR")],
    )


@pytest.fixture
def ny_zone() -> Zone:
    return Zone(
        name="New York",
        default_tax=False,
        members=[ZoneMember(country_code="US", state_province="NY")],
    )


@pytest.fixture
def us_address() -> Address:
    return Address(
        recipient_name="John Doe",
        address_line1="123 Main Street",
        city="New York",
        state_province="NY",
        postal_code="10001",
        country_code="US",
    )


@pytest.fixture
def order(us_zone) -> Order:
    return Order(number="R100000001", currency="USD", tax_zone=us_zone)


@pytest.fixture
def shipment(order, us_address) -> Shipment:
    return Shipment(number="H100000001", order=order, address=us_address)


@pytest.fixture
def package(shipment) -> Package:
    return Package(
        shipment=shipment,
        contents=(
            ContentItem(sku="COMIC-001", quantity=2, price=Decimal("12.50"), weight=Decimal("0.5")),
            ContentItem(sku="COMIC-002", quantity=1, price=Decimal("25.00"), weight=Decimal("1.0")),
        ),
    )


@pytest.fixture
def shipping_tax_category() -> TaxCategory:
    return TaxCategory(name="Shipping")


@pytest.fixture
def make_method(us_zone) -> Callable[..., ShippingMethod]:
    """Factory for transient shipping methods serving the US zone by default."""
    def _make(
        name: str,
        amount: str = "5.00",
        calculator_type: str = "flat_rate",
        preferences: dict = None,
        display_on: DisplayOn = DisplayOn.BOTH,
        tax_category: TaxCategory = None,
        zones: list = None,
    ) -> ShippingMethod:
        return ShippingMethod(
            name=name,
            display_on=display_on,
            calculator_type=calculator_type,
            calculator_preferences=preferences if preferences is not None else {"amount": amount},
            tax_category=tax_category,
            zones=zones if zones is not None else [us_zone],
        )
    return _make


@pytest.fixture
def make_tax_rate() -> Callable[..., TaxRate]:
    """Factory attaching a new tax rate to a category (appended in creation order)."""
    def _make(category: TaxCategory, zone: Zone, amount: str = "0.10", name: str = None) -> TaxRate:
        return TaxRate(name=name or f"{zone.name} tax", amount=Decimal(amount), zone=zone, tax_category=category)
    return _make
