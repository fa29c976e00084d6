import pytest
from fastapi.testclient import TestClient

from configs.manager import BackendBaseSettings
from main import initialize_backend_application

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "correct-horse-battery"
JWT_SECRET = "test-secret-key-long-enough-for-hs256-signatures"


class PlainPasswordHasher:
    """Stand-in hasher so auth logic can be tested without bcrypt."""

    def hash(self, password: str) -> str:
        return f"plain:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return bool(hashed) and hashed == f"plain:{password}"


@pytest.fixture
def settings(tmp_path):
    return BackendBaseSettings(
        DATA_PATH=str(tmp_path / "data" / "db.json"),
        UPLOADS_DIR=str(tmp_path / "uploads"),
        PUBLIC_DIR=str(tmp_path / "public"),
        JWT_SECRET=JWT_SECRET,
        BCRYPT_ROUNDS=4,
        ADMIN_USERNAME=ADMIN_USERNAME,
        ADMIN_PASSWORD=ADMIN_PASSWORD,
    )


@pytest.fixture
def app(settings):
    return initialize_backend_application(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def store(app, client):
    return app.state.store


@pytest.fixture
def auth_headers(client):
    response = client.post(
        "/api/auth/login",
        json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def category(client, auth_headers):
    response = client.post(
        "/api/categories",
        json={"name": "Silk", "description": "Pure silk sarees"},
        headers=auth_headers,
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def product(client, auth_headers, category):
    response = client.post(
        "/api/products",
        json={"name": "Kanjivaram Red", "categoryId": category["id"], "price": 120},
        headers=auth_headers,
    )
    assert response.status_code == 201
    return response.json()
