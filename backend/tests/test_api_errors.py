from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError, OperationalError

from inventory_api.core.config import Settings
from inventory_api.crud import crud_category
from inventory_api.main import create_app


def test_database_error_becomes_500(client, monkeypatch):
    async def broken_get_categories(db):
        raise OperationalError("SELECT * FROM category", {}, Exception("connection refused"))

    monkeypatch.setattr(crud_category, "get_categories", broken_get_categories)

    response = client.get("/categories")
    assert response.status_code == 500
    assert response.json() == {"detail": "Database error"}


def test_integrity_error_becomes_409(client, monkeypatch, category_payload):
    async def conflicting_create(db, *, category_in):
        raise IntegrityError("INSERT INTO category", {}, Exception("duplicate key"))

    monkeypatch.setattr(crud_category, "create_category", conflicting_create)

    response = client.post("/categories", json=category_payload)
    assert response.status_code == 409
    assert response.json() == {"detail": "Request conflicts with the stored data."}


def test_missing_database_url_answers_503():
    app = create_app(Settings(_env_file=None, DATABASE_URL=None, POSTGRES_PASSWORD=None, LOG_LEVEL="WARNING"))
    with TestClient(app) as client:
        response = client.get("/categories")
        assert response.status_code == 503
        assert response.json() == {"detail": "Database connection is not available."}

        # The app itself still serves its liveness endpoints
        assert client.get("/health").json()["status"] == "ok"


def test_non_integer_id_is_422(client):
    assert client.get("/categories/abc").status_code == 422
    assert client.get("/items/abc").status_code == 422


def test_root_and_health(client):
    assert client.get("/").json() == {"message": "Welcome to Inventory API!"}
    assert client.get("/health").json() == {"status": "ok", "message": "Inventory API is healthy!"}
