"""Economic model of goods, prices, buildings, locations and production methods."""

__version__ = "0.1.0"
__all__ = ["buildings", "goods", "locations", "prices", "production_methods"]