from inventory_api import crud, schemas


async def test_create_then_get_returns_same_fields(db):
    created = await crud.category.create_category(
        db, category_in=schemas.CategoryCreate(category_name="socks", category_image_link="http://x/y.jpg")
    )
    assert created.category_id is not None

    fetched = await crud.category.get_category(db, category_id=created.category_id)
    assert fetched.category_name == "socks"
    assert fetched.category_image_link == "http://x/y.jpg"


async def test_get_categories_in_insertion_order(db):
    for name in ("tshirts", "socks", "pants"):
        await crud.category.create_category(
            db, category_in=schemas.CategoryCreate(category_name=name, category_image_link="http://x/y.jpg")
        )
    categories = await crud.category.get_categories(db)
    assert [c.category_name for c in categories] == ["tshirts", "socks", "pants"]


async def test_get_missing_category_returns_none(db):
    assert await crud.category.get_category(db, category_id=404) is None


async def test_update_reports_affected_rows(db):
    created = await crud.category.create_category(
        db, category_in=schemas.CategoryCreate(category_name="socks", category_image_link="http://x/y.jpg")
    )
    update_in = schemas.CategoryUpdate(category_name="long socks", category_image_link="http://x/z.jpg")

    assert await crud.category.update_category(db, category_id=created.category_id, category_in=update_in) == 1
    assert await crud.category.update_category(db, category_id=9999, category_in=update_in) == 0

    db.expire_all()
    fetched = await crud.category.get_category(db, category_id=created.category_id)
    assert fetched.category_name == "long socks"
    assert fetched.category_image_link == "http://x/z.jpg"


async def test_delete_missing_category_affects_no_rows(db):
    assert await crud.category.delete_category(db, category_id=9999) == 0


async def test_delete_category(db):
    created = await crud.category.create_category(
        db, category_in=schemas.CategoryCreate(category_name="socks", category_image_link="http://x/y.jpg")
    )
    category_id = created.category_id
    assert await crud.category.delete_category(db, category_id=category_id) == 1
    assert await crud.category.get_category(db, category_id=category_id) is None
