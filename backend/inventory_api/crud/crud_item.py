from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any, Dict, List, Optional
import logging

from inventory_api.crud.utils import column_values
from inventory_api.models.category import Category as CategoryModel
from inventory_api.models.item import Item as ItemModel
from inventory_api.schemas.item import ItemCreate, ItemRestrictedUpdate, ItemUpdate

logger = logging.getLogger(__name__)

async def create_item(db: AsyncSession, *, item_in: ItemCreate) -> ItemModel:
    """
    Insert a new item. The category reference is not checked here;
    the API layer and the foreign key take care of that.
    """
    db_obj = ItemModel(**column_values(item_in))
    db.add(db_obj)
    await db.commit()
    await db.refresh(db_obj)
    logger.debug(f"Created item #{db_obj.item_id} '{db_obj.item_name}' in category #{db_obj.category_id}")
    return db_obj

async def get_items(db: AsyncSession) -> List[ItemModel]:
    result = await db.execute(select(ItemModel).order_by(ItemModel.item_id))
    return result.scalars().all()

async def get_item(db: AsyncSession, item_id: int) -> Optional[ItemModel]:
    result = await db.execute(select(ItemModel).filter(ItemModel.item_id == item_id))
    return result.scalars().first()

async def get_items_by_category(db: AsyncSession, *, category_id: int) -> List[ItemModel]:
    result = await db.execute(
        select(ItemModel)
        .filter(ItemModel.category_id == category_id)
        .order_by(ItemModel.item_id)
    )
    return result.scalars().all()

async def get_items_with_category_name(db: AsyncSession) -> List[Dict[str, Any]]:
    """
    Every item with its category's name alongside.
    INNER JOIN: an item whose category row is gone does not show up here.
    """
    result = await db.execute(
        select(ItemModel.__table__, CategoryModel.category_name)
        .join(CategoryModel, ItemModel.category_id == CategoryModel.category_id)
        .order_by(ItemModel.item_id)
    )
    return [dict(row) for row in result.mappings().all()]

async def _update_returning(
    db: AsyncSession, item_id: int, values: Dict[str, Any]
) -> Optional[ItemModel]:
    result = await db.execute(
        update(ItemModel)
        .where(ItemModel.item_id == item_id)
        .values(**values)
        .returning(ItemModel)
        .execution_options(populate_existing=True)
    )
    db_obj = result.scalars().first()
    await db.commit()
    logger.debug(f"Updated item #{item_id} fields {sorted(values)}: {'ok' if db_obj else 'not found'}")
    return db_obj

async def update_item(
    db: AsyncSession, *, item_id: int, item_in: ItemUpdate
) -> Optional[ItemModel]:
    """
    Replace every field of an item, category included.
    Returns the updated row, or None when no item has this id.
    """
    return await _update_returning(db, item_id, column_values(item_in))

async def update_item_restricted(
    db: AsyncSession, *, item_id: int, item_in: ItemRestrictedUpdate
) -> Optional[ItemModel]:
    """
    Update the fields sent in item_in; category_id is never touched.
    Returns the updated row, or None when no item has this id.
    """
    values = column_values(item_in, exclude_unset=True)
    values.pop("category_id", None)
    if not values:
        return await get_item(db, item_id=item_id)
    return await _update_returning(db, item_id, values)

async def delete_item(db: AsyncSession, *, item_id: int) -> int:
    """
    Delete an item. Returns the number of rows deleted.
    """
    result = await db.execute(delete(ItemModel).where(ItemModel.item_id == item_id))
    await db.commit()
    logger.debug(f"Deleted item #{item_id}: {result.rowcount} row(s)")
    return result.rowcount
