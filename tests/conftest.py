import pytest
from fastapi.testclient import TestClient
from songs_api.core.config import Settings
from songs_api.main import create_app
from songs_api.services.song_service import SongStore

@pytest.fixture
def song_store():
    """Fresh, empty permissive store."""
    return SongStore()

@pytest.fixture
def make_client():
    """Build a TestClient for an app created with the given settings overrides."""
    def _make_client(store=None, **overrides):
        app = create_app(Settings(**overrides), store=store)
        return TestClient(app)
    return _make_client

@pytest.fixture
def client(make_client, song_store):
    """Client for the default app, sharing ``song_store``."""
    return make_client(store=song_store)

@pytest.fixture
def test_song_data():
    """Return test song metadata."""
    return {
        "title": "Test Song",
        "artist": "Test Artist",
        "album": "Test Album",
        "year": 2024
    }
