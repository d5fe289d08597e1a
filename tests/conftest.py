import pytest
from fastapi.testclient import TestClient

from salon_api.config import Settings
from salon_api.deps import get_media_store
from salon_api.errors import UploadFailed
from salon_api.main import create_app


class FakeMediaStore:
    def __init__(self):
        self.uploads = []
        self.fail_with = None

    def upload(self, data, filename=None, content_type=None):
        if self.fail_with:
            raise UploadFailed(self.fail_with)
        self.uploads.append((data, filename, content_type))
        return f"https://media.test/products/{len(self.uploads)}.png"


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite://",
        jwt_secret="test-secret",
        storage_access_key_id="test",
        storage_secret_access_key="test",
        storage_bucket="test-bucket",
        storage_public_url="https://media.test",
    )


@pytest.fixture
def media():
    return FakeMediaStore()


@pytest.fixture
def app(settings, media):
    app = create_app(settings)
    app.dependency_overrides[get_media_store] = lambda: media
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def signup(client):
    def _signup(username="aluser", email="al@example.com", phone="555-0100", password="secret123"):
        res = client.post(
            "/signup",
            json={
                "name": "Al",
                "email": email,
                "phone": phone,
                "username": username,
                "password": password,
            },
        )
        assert res.status_code == 200, res.text
        return res.json()["token"]

    return _signup
