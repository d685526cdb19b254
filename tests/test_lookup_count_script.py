import os

import pytest

from backend.errors import BackendConnectionError
from backend.lookup import RestaurantCountLookup
from conftest import FakeStore
from utils.scripts import lookup_count


@pytest.fixture
def store(monkeypatch):
    fake = FakeStore({"ihop": 12})
    monkeypatch.setattr("backend.store_factory.get_lookup", lambda cfg=None: RestaurantCountLookup(fake))
    return fake


def test_prints_count(store, capsys):
    assert lookup_count.main(["ihop"]) == 0
    assert capsys.readouterr().out.strip() == "12"


def test_not_found_exit_code(store, capsys):
    assert lookup_count.main(["nobody"]) == 1
    assert "nobody" in capsys.readouterr().err


def test_backend_error_exit_code(store, capsys):
    store.error = BackendConnectionError("unable to connect to postgres at db:5432")
    assert lookup_count.main(["ihop"]) == 2
    assert "lookup failed" in capsys.readouterr().err


def test_env_file_is_loaded(store, tmp_path, monkeypatch):
    env = tmp_path / "yelb.env"
    env.write_text("YELB_DB_NAME=yelb_from_file\n", encoding="utf-8")
    monkeypatch.setenv("YELB_DB_NAME", "yelb")
    assert lookup_count.main(["ihop", "--env-file", str(env)]) == 0
    assert os.environ["YELB_DB_NAME"] == "yelb_from_file"
