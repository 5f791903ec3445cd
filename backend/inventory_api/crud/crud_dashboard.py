from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import case, func, select

from inventory_api.models.category import Category as CategoryModel
from inventory_api.models.item import Item as ItemModel

async def get_inventory_stats(db: AsyncSession) -> dict: # Validated by the InventoryStats schema
    """
    Totals behind the dashboard charts: item availability, stock and value,
    plus a per-category breakdown that also lists empty categories.
    """
    totals_query = select(
        func.count(ItemModel.item_id),
        func.coalesce(func.sum(ItemModel.item_stock), 0),
        func.coalesce(func.sum(case((ItemModel.item_status.is_(True), 1), else_=0)), 0),
        func.coalesce(func.sum(ItemModel.item_price * ItemModel.item_stock), 0),
    )
    totals_result = await db.execute(totals_query)
    total_items, total_stock, available_items, inventory_value = totals_result.one()

    total_categories_result = await db.execute(select(func.count(CategoryModel.category_id)))
    total_categories = total_categories_result.scalar_one()

    # LEFT OUTER JOIN so categories without items report zero
    breakdown_query = (
        select(
            CategoryModel.category_id,
            CategoryModel.category_name,
            func.count(ItemModel.item_id).label("item_count"),
            func.coalesce(func.sum(ItemModel.item_stock), 0).label("total_stock"),
        )
        .outerjoin(ItemModel, ItemModel.category_id == CategoryModel.category_id)
        .group_by(CategoryModel.category_id, CategoryModel.category_name)
        .order_by(CategoryModel.category_id)
    )
    breakdown_result = await db.execute(breakdown_query)

    return {
        "total_categories": total_categories,
        "total_items": total_items,
        "total_stock": int(total_stock),
        "available_items": int(available_items),
        "unavailable_items": total_items - int(available_items),
        "inventory_value": inventory_value,
        "categories": [dict(row) for row in breakdown_result.mappings().all()],
    }
