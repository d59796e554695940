import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.db.store import ScoreStore
from app.scripts.seed_data import initialize_data
from app.core.application import create_app


@pytest.fixture
def settings():
    return Settings(
        secret_key="test-secret",
        admin_username="admin",
        admin_password="admin",
        seed_on_startup=False,
        medal_policy="strict",
    )


@pytest.fixture
def store():
    store = ScoreStore()
    yield store
    store.close()


@pytest.fixture
def seeded_store(store, settings):
    initialize_data(store, settings)
    return store


@pytest.fixture
def small_store(store, settings):
    """Tres equipos y dos eventos: suficiente para casi todo."""
    initialize_data(
        store,
        settings,
        teams=[
            {"name": "Red Bulls", "color": "bull"},
            {"name": "Green Pythons", "color": "python"},
            {"name": "Maroon Tigers", "color": "tiger"},
        ],
        categories=[{"name": "DANCES", "color": "pink"}],
        events={"DANCES": ["Contemporary Dance", "Hip-Hop"]},
    )
    return store


@pytest.fixture
def make_client(settings):
    clients = []

    def _make(store, **overrides):
        app_settings = settings
        if overrides:
            app_settings = Settings(**{**vars(settings), **overrides})
        client = TestClient(create_app(app_settings, store))
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client, small_store):
    return make_client(small_store)


@pytest.fixture
def auth_headers(client):
    response = client.post("/api/auth/login", json={"username": "admin", "password": "admin"})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
