import pytest
from fastapi.testclient import TestClient

from tourney.core.config import Settings
from tourney.core.database import Store
from tourney.main import create_app
from tourney.models import create_tables

ADMIN_USER = "admin"
ADMIN_PASS = "admin123"


@pytest.fixture
def store():
    """Fresh in-memory store with the schema in place."""
    store = Store()
    create_tables(store)
    yield store
    store.close()


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "tournament.db")


@pytest.fixture
def settings(db_path, tmp_path):
    return Settings(
        _env_file=None,
        DATABASE_PATH=db_path,
        ADMIN_USER=ADMIN_USER,
        ADMIN_PASS=ADMIN_PASS,
        BCRYPT_ROUNDS=4,
        STATIC_DIR=str(tmp_path / "no-static"),
    )


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def admin_client(client):
    resp = client.post("/api/admin/login", json={"username": ADMIN_USER, "password": ADMIN_PASS})
    assert resp.status_code == 200
    return client


@pytest.fixture
def add_participant():
    """Inserts a row with a chosen timestamp, bypassing registration rules."""
    def _add(store: Store, name: str, game: str, created_at: str, status: str = "active") -> None:
        store.run(
            "INSERT INTO participants (name, game, email, phone, created_at, status) "
            "VALUES (:name, :game, '', '', :created_at, :status)",
            {"name": name, "game": game, "created_at": created_at, "status": status},
        )
    return _add
