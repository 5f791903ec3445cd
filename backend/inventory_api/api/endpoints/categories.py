# backend/inventory_api/api/endpoints/categories.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any, List

from inventory_api import crud, models, schemas
from inventory_api.api import deps

router = APIRouter()

@router.post("", response_model=schemas.Category)
async def create_new_category(
    *,
    db: AsyncSession = Depends(deps.get_db),
    category_in: schemas.CategoryCreate,
) -> Any:
    """
    Create a new category.
    """
    category = await crud.category.create_category(db=db, category_in=category_in)
    return category

@router.get("", response_model=List[schemas.Category])
async def read_categories(
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    """
    Retrieve all categories in the order they were created.
    """
    return await crud.category.get_categories(db)

@router.get("/{category_id}", response_model=schemas.Category)
async def read_category_by_id(
    category: models.Category = Depends(deps.get_valid_category),
) -> Any:
    return category

@router.put("/{category_id}", response_model=schemas.StatusMessage)
async def update_existing_category(
    category_id: int,
    *,
    db: AsyncSession = Depends(deps.get_db),
    category_in: schemas.CategoryUpdate,
) -> Any:
    """
    Replace the name and image link of a category.
    """
    affected_rows = await crud.category.update_category(
        db=db, category_id=category_id, category_in=category_in
    )
    if affected_rows == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return {"message": "Category was updated!", "affected_rows": affected_rows}

@router.delete("/{category_id}", response_model=schemas.StatusMessage)
async def delete_existing_category(
    category_id: int,
    *,
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    """
    Delete a category together with its items.
    """
    affected_rows = await crud.category.delete_category(db=db, category_id=category_id)
    if affected_rows == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return {"message": "Category was deleted!", "affected_rows": affected_rows}

@router.get("/{category_id}/item", response_model=List[schemas.Item])
async def read_items_for_category(
    *,
    db: AsyncSession = Depends(deps.get_db),
    category: models.Category = Depends(deps.get_valid_category),
) -> Any:
    """
    Retrieve the items of one category.
    """
    return await crud.item.get_items_by_category(db, category_id=category.category_id)

@router.put("/{item_id}/item", response_model=schemas.Item)
async def update_item_within_category(
    item_id: int,
    *,
    db: AsyncSession = Depends(deps.get_db),
    item_in: schemas.ItemRestrictedUpdate,
) -> Any:
    """
    Edit an item from its category page. The path segment is the item id,
    as sent by the category items screen; the item keeps its category.
    """
    item = await crud.item.update_item_restricted(db=db, item_id=item_id, item_in=item_in)
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
    return item
