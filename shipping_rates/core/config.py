"""
Application configuration

Settings are read from the environment (or a .env file).
The rate selector and rate sorter are configured by dotted import path so a
deployment can substitute its own strategy without code changes.
"""
from dataclasses import dataclass
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_RATE_SELECTOR_CLASS = "shipping_rates.modules.shipping.rate_selector.LowestCostRateSelector"
DEFAULT_RATE_SORTER_CLASS = "shipping_rates.modules.shipping.rate_sorter.CostRateSorter"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # App
    APP_NAME: str = "Shipping Rates"
    DEBUG: bool = False
    ENVIRONMENT: str = "production"

    # Database (sync driver, the estimator pipeline is synchronous)
    DATABASE_URL: str = "sqlite:///./shipping_rates.db"

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def convert_database_url(cls, v):
        """Normalize Heroku/Railway style postgres:// URLs."""
        if isinstance(v, str) and v.startswith("postgres://"):
            v = v.replace("postgres://", "postgresql://", 1)
        return v

    # Rate strategies
    SHIPPING_RATE_SELECTOR_CLASS: str = DEFAULT_RATE_SELECTOR_CLASS
    SHIPPING_RATE_SORTER_CLASS: str = DEFAULT_RATE_SORTER_CLASS

    @field_validator("SHIPPING_RATE_SELECTOR_CLASS", "SHIPPING_RATE_SORTER_CLASS")
    @classmethod
    def validate_class_path(cls, v):
        module_path, _, attr = v.strip().rpartition(".")
        if not module_path or not attr:
            raise ValueError(f"Expected a dotted 'module.ClassName' path, got {v!r}")
        return v.strip()

    # Currency used for orders that do not carry one
    DEFAULT_CURRENCY: str = "USD"

    @field_validator("DEFAULT_CURRENCY")
    @classmethod
    def validate_currency(cls, v):
        v = v.strip().upper()
        if len(v) != 3 or not v.isalpha():
            raise ValueError(f"DEFAULT_CURRENCY must be a 3-letter ISO code, got {v!r}")
        return v


@dataclass(frozen=True)
class EstimatorConfig:
    """
    Strategy configuration for the estimator.

    Attributes:
        selector_class: Dotted path of the rate selector (picks the default rate)
        sorter_class: Dotted path of the rate sorter (orders rates for display)
    """
    selector_class: str = DEFAULT_RATE_SELECTOR_CLASS
    sorter_class: str = DEFAULT_RATE_SORTER_CLASS

    @classmethod
    def from_settings(cls, app_settings: "Settings") -> "EstimatorConfig":
        return cls(
            selector_class=app_settings.SHIPPING_RATE_SELECTOR_CLASS,
            sorter_class=app_settings.SHIPPING_RATE_SORTER_CLASS,
        )


settings = Settings()
