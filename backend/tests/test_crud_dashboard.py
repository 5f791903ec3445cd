from decimal import Decimal

from inventory_api import crud
from inventory_api.db.init_db import seed_db


async def test_stats_on_empty_database(db):
    stats = await crud.dashboard.get_inventory_stats(db)

    assert stats["total_categories"] == 0
    assert stats["total_items"] == 0
    assert stats["total_stock"] == 0
    assert stats["available_items"] == 0
    assert stats["unavailable_items"] == 0
    assert Decimal(stats["inventory_value"]) == 0
    assert stats["categories"] == []


async def test_stats_on_sample_catalogue(db):
    await seed_db(db)
    stats = await crud.dashboard.get_inventory_stats(db)

    assert stats["total_categories"] == 3
    assert stats["total_items"] == 3
    assert stats["total_stock"] == 20
    assert stats["available_items"] == 2
    assert stats["unavailable_items"] == 1
    assert Decimal(stats["inventory_value"]) == Decimal("300")
    assert [
        (c["category_name"], c["item_count"], c["total_stock"]) for c in stats["categories"]
    ] == [("tshirts", 2, 20), ("socks", 1, 0), ("pants", 0, 0)]
