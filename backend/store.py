# backend/store.py
from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Any

from backend.backends import RelationalParams
from backend.db import fetch_scalar
from backend.errors import ConfigurationError, RestaurantNotFound

LOG = logging.getLogger(__name__)

READ_COUNT_SQL = "SELECT count FROM restaurants WHERE name = %s"


def coerce_count(value: Any, restaurant: str) -> int:
    """Turn whatever the store handed back (int, Decimal, numeric text) into a non-negative int."""
    if isinstance(value, bool):
        raise ConfigurationError(f"count for {restaurant!r} is a boolean, not a number")
    try:
        d = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as e:
        raise ConfigurationError(f"count for {restaurant!r} is not numeric: {value!r}") from e
    if not d.is_finite() or d != d.to_integral_value() or d < 0:
        raise ConfigurationError(f"count for {restaurant!r} is not a non-negative integer: {value!r}")
    return int(d)


class PostgresCountStore:
    name = "postgres"

    def __init__(self, params: RelationalParams):
        params.validate()
        self.params = params

    def read_count(self, restaurant: str) -> int:
        value = fetch_scalar(self.params, READ_COUNT_SQL, [restaurant])
        if value is None:
            raise RestaurantNotFound(restaurant, self.name)
        return coerce_count(value, restaurant)
