# backend/backends.py
"""
Backend selection for restaurant counts.

A backend is chosen once from settings and never re-inspected per call:

  RelationalBackend(RelationalParams)  -> Postgres `restaurants` table
  KeyValueBackend(KeyValueParams)      -> DynamoDB table keyed by `name`
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from backend.errors import ConfigurationError

_SSLMODES = ("disable", "allow", "prefer", "require", "verify-ca", "verify-full")


@dataclass(frozen=True)
class RelationalParams:
    host: str
    port: int = 5432
    dbname: str = "yelb"
    user: str = "postgres"
    password: str = ""
    sslmode: str = "verify-full"
    sslrootcert: Optional[str] = None
    connect_timeout: int = 10

    def validate(self) -> None:
        if not (self.host or "").strip():
            raise ConfigurationError("Postgres host is not configured (YELB_DB_SERVER_ENDPOINT)")
        if not (0 < int(self.port) < 65536):
            raise ConfigurationError(f"Postgres port out of range: {self.port}")
        if not (self.dbname or "").strip():
            raise ConfigurationError("Postgres database name is not configured (YELB_DB_NAME)")
        if self.sslmode not in _SSLMODES:
            raise ConfigurationError(f"unknown sslmode {self.sslmode!r}")

    def connect_kwargs(self) -> dict:
        kw = {
            "host": self.host,
            "port": self.port,
            "dbname": self.dbname,
            "user": self.user,
            "sslmode": self.sslmode,
            "connect_timeout": self.connect_timeout,
        }
        # libpq falls back to ~/.pgpass when no password is passed
        if self.password:
            kw["password"] = self.password
        if self.sslrootcert:
            kw["sslrootcert"] = self.sslrootcert
        return kw

    def __repr__(self) -> str:
        return f"RelationalParams(host={self.host!r}, port={self.port}, dbname={self.dbname!r}, user={self.user!r})"


@dataclass(frozen=True)
class KeyValueParams:
    table_name: str
    region: str

    def validate(self) -> None:
        if not (self.table_name or "").strip():
            raise ConfigurationError("DynamoDB table name is empty")
        if not (self.region or "").strip():
            raise ConfigurationError("AWS_REGION must be set when YELB_DDB_RESTAURANTS is used")


@dataclass(frozen=True)
class RelationalBackend:
    params: RelationalParams
    name = "postgres"


@dataclass(frozen=True)
class KeyValueBackend:
    params: KeyValueParams
    name = "dynamodb"


Backend = Union[RelationalBackend, KeyValueBackend]
