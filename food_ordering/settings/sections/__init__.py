from food_ordering.settings.sections.ordering import OrderingSettings

__all__ = ["OrderingSettings"]
