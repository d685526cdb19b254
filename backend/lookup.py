# backend/lookup.py
from __future__ import annotations

import logging
from typing import Protocol

from backend.errors import InvalidRestaurantName, RestaurantNotFound

LOG = logging.getLogger(__name__)


class CountStore(Protocol):
    name: str

    def read_count(self, restaurant: str) -> int: ...


class RestaurantCountLookup:
    """
    Look up a restaurant's vote count in whichever store was configured.

    Missing restaurants raise RestaurantNotFound on every backend; connection and
    configuration problems surface as BackendConnectionError / ConfigurationError.
    Nothing is retried here.
    """

    def __init__(self, store: CountStore):
        self.store = store

    @property
    def backend(self) -> str:
        return self.store.name

    def lookup_count(self, restaurant: str) -> str:
        if not isinstance(restaurant, str) or not restaurant.strip():
            raise InvalidRestaurantName("restaurant name must be a non-empty string")
        if "\x00" in restaurant:
            raise InvalidRestaurantName("restaurant name must not contain NUL characters")
        LOG.debug("count lookup for %r via %s", restaurant, self.store.name)
        try:
            count = self.store.read_count(restaurant)
        except RestaurantNotFound:
            LOG.warning("restaurant %r not found in %s", restaurant, self.store.name)
            raise
        return str(count)
