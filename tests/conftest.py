import pytest
from fastapi.testclient import TestClient

from main import app, get_history_store
from detector.history_store import HistoryStore
from detector.knowledge_base import get_knowledge_base


@pytest.fixture
def kb():
    return get_knowledge_base()


@pytest.fixture
def history(tmp_path):
    return HistoryStore(tmp_path / "history.json", limit=100)


@pytest.fixture
def client(history):
    app.dependency_overrides[get_history_store] = lambda: history
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
