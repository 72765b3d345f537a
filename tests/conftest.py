import pytest
from fastapi.testclient import TestClient

from announcement_board.app.core.config import Settings
from announcement_board.app.core.storage import AnnouncementStore
from announcement_board.app.main import create_app


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data" / "announcements.json"


@pytest.fixture
def settings(data_file):
    return Settings(data_file=str(data_file))


@pytest.fixture
def store(data_file):
    """Store backed by an empty collection."""
    data_file.parent.mkdir(parents=True, exist_ok=True)
    store = AnnouncementStore(data_file)
    store.save([])
    return store


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Client for a freshly started app; the data file holds the welcome record."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def empty_client(client, app):
    """Client whose collection has been emptied after startup."""
    app.state.store.save([])
    return client
