"""Food ordering - order domain core and application layer."""

__version__ = "0.1.0"
