# Settings package
from food_ordering.settings.app import AppSettings, get_app_settings
from food_ordering.settings.sections import OrderingSettings

__all__ = ["get_app_settings", "AppSettings", "OrderingSettings"]
