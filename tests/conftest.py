import pytest

from app.settings import Settings
from backend.errors import RestaurantNotFound


def make_settings(**overrides) -> Settings:
    """Settings built from explicit values only, so the caller's env/.env can't leak in."""
    values = {
        "YELB_DDB_RESTAURANTS": None,
        "AWS_REGION": "us-east-1",
        "YELB_DB_SERVER_ENDPOINT": "db.example.internal",
        "YELB_DB_SERVER_PORT": 5432,
        "YELB_DB_NAME": "yelb",
        "YELB_DB_USERNAME": "postgres",
        "YELB_DB_PASSWORD": "secret",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class FakeCursor:
    def __init__(self, conn):
        self.conn = conn
        self._row = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, args):
        self.conn.executed.append((sql, args))
        if self.conn.execute_error is not None:
            raise self.conn.execute_error
        name = args[0]
        self._row = (self.conn.rows[name],) if name in self.conn.rows else None

    def fetchone(self):
        return self._row


class FakeConn:
    def __init__(self, rows, execute_error=None):
        self.rows = rows
        self.execute_error = execute_error
        self.executed = []
        self.closed = False

    def cursor(self):
        return FakeCursor(self)

    def close(self):
        self.closed = True


class FakePostgres:
    """Stands in for psycopg2.connect; remembers every connection it handed out."""

    def __init__(self, rows=None, execute_error=None, connect_error=None):
        self.rows = rows or {}
        self.execute_error = execute_error
        self.connect_error = connect_error
        self.connections = []
        self.connect_kwargs = []

    def __call__(self, **kwargs):
        self.connect_kwargs.append(kwargs)
        if self.connect_error is not None:
            raise self.connect_error
        conn = FakeConn(self.rows, self.execute_error)
        self.connections.append(conn)
        return conn


class FakeStore:
    name = "fake"

    def __init__(self, counts=None, error=None):
        self.counts = counts or {}
        self.error = error
        self.calls = []

    def read_count(self, restaurant):
        self.calls.append(restaurant)
        if self.error is not None:
            raise self.error
        if restaurant not in self.counts:
            raise RestaurantNotFound(restaurant, self.name)
        return self.counts[restaurant]


@pytest.fixture
def fake_pg(monkeypatch):
    fake = FakePostgres(rows={"joes": 42})
    monkeypatch.setattr("backend.db.psycopg2.connect", fake)
    return fake
