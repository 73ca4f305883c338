from pydantic import Field, field_validator

from food_ordering.settings.base import FoodOrderingBaseSettings


class OrderingSettings(FoodOrderingBaseSettings):
    """
    Order lifecycle settings.
    Loaded from .env file with exact variable name matching.
    """

    default_currency: str = Field("EUR", alias="ORDER_DEFAULT_CURRENCY")
    allow_cancel_from_pending: bool = Field(True, alias="ORDER_ALLOW_CANCEL_FROM_PENDING")
    log_level: str = Field("INFO", alias="ORDER_LOG_LEVEL")

    @field_validator("default_currency")
    @classmethod
    def _currency_code(cls, value: str) -> str:
        if len(value) != 3 or not value.isalpha():
            raise ValueError(f"Currency must be 3-letter ISO code, got: {value}")
        return value.upper()

    @field_validator("log_level")
    @classmethod
    def _level_name(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level
