# backend/errors.py
from __future__ import annotations


class CountLookupError(Exception):
    """Base class for everything a count lookup can raise."""


class RestaurantNotFound(CountLookupError):
    def __init__(self, restaurant: str, backend: str = ""):
        self.restaurant = restaurant
        self.backend = backend
        where = f" in {backend}" if backend else ""
        super().__init__(f"no count recorded for restaurant {restaurant!r}{where}")


class BackendConnectionError(CountLookupError):
    """The selected store could not be reached or refused the request."""


class ConfigurationError(CountLookupError):
    """Connection parameters are missing/invalid, or the stored value is unusable."""


class InvalidRestaurantName(CountLookupError, ValueError):
    """Restaurant name that cannot be sent to a store; raised before any I/O."""
