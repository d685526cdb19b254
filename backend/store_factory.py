# backend/store_factory.py
from __future__ import annotations

from typing import Optional, TYPE_CHECKING

from backend.backends import KeyValueBackend, RelationalBackend
from backend.lookup import RestaurantCountLookup

if TYPE_CHECKING:
    from app.settings import Settings


def get_store(cfg: Optional["Settings"] = None):
    if cfg is None:
        from app.settings import settings as cfg
    backend = cfg.backend()
    if isinstance(backend, KeyValueBackend):
        from backend.store_dynamo import DynamoCountStore
        return DynamoCountStore(backend.params)
    if isinstance(backend, RelationalBackend):
        from backend.store import PostgresCountStore
        return PostgresCountStore(backend.params)
    raise TypeError(f"unsupported backend {backend!r}")


def get_lookup(cfg: Optional["Settings"] = None) -> RestaurantCountLookup:
    return RestaurantCountLookup(get_store(cfg))
