# backend/db.py
"""
Blocking Postgres access for the relational count backend.

Every call opens its own connection and closes it on the way out, including
when the query raises. There is no pool.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional, Sequence

import psycopg2

from backend.backends import RelationalParams
from backend.errors import BackendConnectionError, ConfigurationError

LOG = logging.getLogger(__name__)


@contextmanager
def get_conn(params: RelationalParams) -> Iterator[Any]:
    params.validate()
    try:
        conn = psycopg2.connect(**params.connect_kwargs())
    except psycopg2.OperationalError as e:
        LOG.error("postgres connect failed for %s:%s/%s: %s", params.host, params.port, params.dbname, e)
        raise BackendConnectionError(f"unable to connect to postgres at {params.host}:{params.port}") from e
    try:
        yield conn
    finally:
        conn.close()


def fetch_scalar(params: RelationalParams, sql: str, args: Sequence[Any]) -> Optional[Any]:
    """
    Run a read-only query and return the first column of the first row,
    or None when the query yields no rows.
    """
    with get_conn(params) as conn:
        try:
            with conn.cursor() as cur:
                cur.execute(sql, tuple(args))
                row = cur.fetchone()
        except psycopg2.ProgrammingError as e:
            raise ConfigurationError(f"query rejected by postgres: {e}") from e
        except (psycopg2.OperationalError, psycopg2.InterfaceError) as e:
            raise BackendConnectionError(f"postgres connection lost: {e}") from e
    if row is None:
        return None
    return row[0]
