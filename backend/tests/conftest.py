import pytest
from fastapi.testclient import TestClient

from inventory_api.core.config import Settings
from inventory_api.db.init_db import init_db
from inventory_api.db.session import Database
from inventory_api.main import create_app


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'inventory.db'}",
        RATE_LIMIT_MAX_REQUESTS=1000,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def client(test_settings):
    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
async def database(test_settings):
    database = Database(test_settings.DATABASE_URL)
    await init_db(database)
    yield database
    await database.dispose()


@pytest.fixture
async def db(database):
    async with database.session() as session:
        yield session


@pytest.fixture
def category_payload():
    return {"category_name": "socks", "category_image_link": "http://x/y.jpg"}


@pytest.fixture
def item_payload():
    def build(category_id, **overrides):
        payload = {
            "item_name": "black tshirt",
            "item_desc": "High quality black tshirt",
            "item_price": 15,
            "item_stock": 8,
            "item_status": True,
            "item_image_link": "https://i.imgur.com/WAKEv0i.jpeg",
            "category_id": category_id,
        }
        payload.update(overrides)
        return payload
    return build
