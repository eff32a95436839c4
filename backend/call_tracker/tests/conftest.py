import pytest
from fastapi.testclient import TestClient
from call_tracker.core.config import Settings
from call_tracker.main import create_app
from call_tracker.services.record_store import RecordStore


@pytest.fixture()
def settings(tmp_path):
    return Settings(
        db_path=str(tmp_path / "data" / "test.db"),
        static_dir=str(tmp_path / "public"),
        cors_origins=["*"],
    )


@pytest.fixture()
def store(settings):
    record_store = RecordStore.from_path(settings.db_path)
    record_store.init_schema()
    yield record_store
    record_store.close()


@pytest.fixture()
def client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


def make_record(**overrides):
    payload = {
        "developer_name": "Alice",
        "client_name": "Acme",
        "call_date": "2024-01-05",
        "duration_minutes": 30,
        "topic_discussed": "Setup",
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def add_record(client):
    def _add(**overrides):
        response = client.post("/api/records", json=make_record(**overrides))
        assert response.status_code == 200, response.text
        return response.json()["id"]

    return _add
