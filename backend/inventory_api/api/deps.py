from typing import AsyncIterator
from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from inventory_api import crud, models

logger = logging.getLogger(__name__)

async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """
    Dependency to get a database session from the app's Database handle.
    Ensures the session is closed after the request.
    """
    database = getattr(request.app.state, "db", None)
    if database is None:
        logger.error("No database configured on the application. Check DATABASE_URL.")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database connection is not available."
        )

    db: AsyncSession = database.session()
    try:
        yield db
    finally:
        await db.close()

async def get_valid_category(
    category_id: int, # Path parameter from the endpoint
    db: AsyncSession = Depends(get_db),
) -> models.Category:
    """
    Dependency to get a category by ID.
    Raises HTTPException if not found.
    """
    category = await crud.category.get_category(db, category_id=category_id)
    if not category:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return category

async def ensure_category_exists(db: AsyncSession, category_id: int) -> None:
    """
    Items may only point at an existing category.
    """
    if not await crud.category.get_category(db, category_id=category_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
