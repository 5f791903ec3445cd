from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from inventory_api.crud.utils import column_values
from inventory_api.models.category import Category as CategoryModel
from inventory_api.schemas.category import CategoryCreate, CategoryUpdate

logger = logging.getLogger(__name__)

async def create_category(db: AsyncSession, *, category_in: CategoryCreate) -> CategoryModel:
    """
    Insert a new category and return the stored row, id included.
    """
    db_obj = CategoryModel(**column_values(category_in))
    db.add(db_obj)
    await db.commit()
    await db.refresh(db_obj)
    logger.debug(f"Created category #{db_obj.category_id} '{db_obj.category_name}'")
    return db_obj

async def get_categories(db: AsyncSession) -> list[CategoryModel]:
    """
    All categories in insertion order.
    """
    result = await db.execute(select(CategoryModel).order_by(CategoryModel.category_id))
    return result.scalars().all()

async def get_category(db: AsyncSession, category_id: int) -> CategoryModel | None:
    result = await db.execute(select(CategoryModel).filter(CategoryModel.category_id == category_id))
    return result.scalars().first()

async def update_category(
    db: AsyncSession, *, category_id: int, category_in: CategoryUpdate
) -> int:
    """
    Overwrite name and image link of a category.
    Returns the number of rows affected; 0 means no category has this id.
    """
    result = await db.execute(
        update(CategoryModel)
        .where(CategoryModel.category_id == category_id)
        .values(**column_values(category_in))
    )
    await db.commit()
    logger.debug(f"Updated category #{category_id}: {result.rowcount} row(s)")
    return result.rowcount

async def delete_category(db: AsyncSession, *, category_id: int) -> int:
    """
    Delete a category. Its items go with it through the ON DELETE CASCADE
    foreign key. Returns the number of category rows deleted.
    """
    result = await db.execute(
        delete(CategoryModel).where(CategoryModel.category_id == category_id)
    )
    await db.commit()
    logger.debug(f"Deleted category #{category_id}: {result.rowcount} row(s)")
    return result.rowcount
