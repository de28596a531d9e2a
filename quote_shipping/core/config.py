"""Quote Shipping Service Configuration"""

from pathlib import Path
from typing import Literal
from functools import lru_cache

from pydantic import BaseModel
from pydantic_settings import BaseSettings

# config/.env at the project root, wherever the service is started from
ENV_FILE = Path(__file__).resolve().parents[2] / "config" / ".env"


class CarrierSettings(BaseModel):
    """Settings shared by every carrier"""
    title: str
    active: bool = True
    sort_order: int = 0
    # Empty means every country is allowed
    allowed_countries: list[str] = []
    show_method_when_unavailable: bool = False
    error_message: str = "This shipping method is not available. To use this shipping method, please contact us."


class FlatRateMethod(BaseModel):
    title: str
    price: float


class FlatRateSettings(CarrierSettings):
    title: str = "Flat Rate"
    sort_order: int = 10
    pricing: Literal["per_item", "per_order"] = "per_item"
    handling_fee: float = 0.0
    methods: dict[str, FlatRateMethod] = {
        "standard": FlatRateMethod(title="Standard", price=5.0),
        "express": FlatRateMethod(title="Express", price=15.0),
    }


class FreeShippingSettings(CarrierSettings):
    title: str = "Free Shipping"
    sort_order: int = 20
    method_title: str = "Free"
    free_shipping_subtotal: float = 100.0


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Quote Shipping Service"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8001

    # Currency
    base_currency: str = "USD"
    currency_rates: dict[str, float] = {
        "USD": 1.0,
        "EUR": 0.92,
        "GBP": 0.79,
    }

    # Carriers
    flatrate: FlatRateSettings = FlatRateSettings()
    freeshipping: FreeShippingSettings = FreeShippingSettings()

    class Config:
        env_file = ENV_FILE
        env_file_encoding = "utf-8"
        env_nested_delimiter = "__"
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
