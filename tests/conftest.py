import pytest
from fastapi.testclient import TestClient

from text2docx.config import Settings, get_settings
from text2docx.main import app
from text2docx.routes.convert import get_blob_store
from text2docx.services.storage import BlobStore

class FakeStore(BlobStore):
    def __init__(self, fail: Exception = None):
        self.fail = fail
        self.puts = []

    async def put(self, name, data, content_type):
        if self.fail:
            raise self.fail
        self.puts.append((name, data, content_type))
        return f"https://blob.example.test/{name}"

@pytest.fixture(name="store")
def store_fixture():
    return FakeStore()

@pytest.fixture(name="settings")
def settings_fixture():
    return Settings(app_env="production")

@pytest.fixture(name="client")
def client_fixture(store, settings):
    app.dependency_overrides[get_blob_store] = lambda: store
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
