"""
Tests for settings and estimator construction from configuration.
"""
import importlib

import pytest
from pydantic import ValidationError

from shipping_rates.core.config import (
    DEFAULT_RATE_SELECTOR_CLASS,
    DEFAULT_RATE_SORTER_CLASS,
    EstimatorConfig,
    Settings,
)
from shipping_rates.core.exceptions import ConfigurationError
from shipping_rates.modules.shipping import CostRateSorter, LowestCostRateSelector, RateSorter
from shipping_rates.services.estimator import build_estimator
from shipping_rates.services.shipping_method_lookup import InMemoryShippingMethodLookup


class NameRateSorter(RateSorter):
    def sort(self, rates):
        return sorted(rates, key=lambda rate: rate.name)


class NotASorter:
    pass


class TestSettings:

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.SHIPPING_RATE_SELECTOR_CLASS == DEFAULT_RATE_SELECTOR_CLASS
        assert settings.SHIPPING_RATE_SORTER_CLASS == DEFAULT_RATE_SORTER_CLASS

    def test_postgres_url_normalized(self):
        settings = Settings(_env_file=None, DATABASE_URL="postgres://u:p@host/db")
        assert settings.DATABASE_URL == "postgresql://u:p@host/db"

    def test_currency_upper_cased(self):
        assert Settings(_env_file=None, DEFAULT_CURRENCY="eur").DEFAULT_CURRENCY == "EUR"

    def test_invalid_currency(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, DEFAULT_CURRENCY="euros")

    def test_class_path_requires_module(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, SHIPPING_RATE_SORTER_CLASS="CostRateSorter")

    def test_strategy_paths_from_environment(self, monkeypatch):
        monkeypatch.setenv("SHIPPING_RATE_SORTER_CLASS", "tests.test_config.NameRateSorter")

        config = EstimatorConfig.from_settings(Settings(_env_file=None))

        assert config.sorter_class == "tests.test_config.NameRateSorter"
        assert config.selector_class == DEFAULT_RATE_SELECTOR_CLASS

    def test_invalid_environment_fails_at_import(self, monkeypatch):
        """Bad settings surface at import, even in development."""
        from shipping_rates.core import config

        monkeypatch.setenv("ENVIRONMENT", "development")
        monkeypatch.setenv("DEFAULT_CURRENCY", "euros")
        try:
            with pytest.raises(ValidationError):
                importlib.reload(config)
        finally:
            monkeypatch.setenv("DEFAULT_CURRENCY", "USD")
            importlib.reload(config)


class TestEstimatorConfig:

    def test_frozen(self):
        config = EstimatorConfig()
        with pytest.raises(AttributeError):
            config.sorter_class = "other.Sorter"


class TestBuildEstimator:

    def test_default_strategies(self):
        estimator = build_estimator(InMemoryShippingMethodLookup([]))

        assert isinstance(estimator.selector, LowestCostRateSelector)
        assert isinstance(estimator.sorter, CostRateSorter)

    def test_custom_sorter(self):
        estimator = build_estimator(
            InMemoryShippingMethodLookup([]),
            EstimatorConfig(sorter_class="tests.test_config.NameRateSorter"),
        )
        assert isinstance(estimator.sorter, NameRateSorter)

    def test_estimators_do_not_share_strategies(self):
        lookup = InMemoryShippingMethodLookup([])
        assert build_estimator(lookup).sorter is not build_estimator(lookup).sorter

    def test_unimportable_path(self):
        with pytest.raises(ConfigurationError) as exc_info:
            build_estimator(
                InMemoryShippingMethodLookup([]),
                EstimatorConfig(selector_class="no_such_module.Selector"),
            )
        assert exc_info.value.details["path"] == "no_such_module.Selector"

    def test_missing_attribute(self):
        with pytest.raises(ConfigurationError):
            build_estimator(
                InMemoryShippingMethodLookup([]),
                EstimatorConfig(sorter_class="shipping_rates.modules.shipping.rate_sorter.Missing"),
            )

    def test_wrong_contract(self):
        with pytest.raises(ConfigurationError):
            build_estimator(
                InMemoryShippingMethodLookup([]),
                EstimatorConfig(sorter_class="tests.test_config.NotASorter"),
            )
