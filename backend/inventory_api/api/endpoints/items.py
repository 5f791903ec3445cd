# backend/inventory_api/api/endpoints/items.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any, List

from inventory_api import crud, schemas
from inventory_api.api import deps

router = APIRouter()
# Mounted without prefix: GET /allitems
joined_router = APIRouter()

@router.post("", response_model=schemas.Item)
async def create_new_item(
    item_in: schemas.ItemCreate,
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    await deps.ensure_category_exists(db, item_in.category_id)
    item = await crud.item.create_item(db=db, item_in=item_in)
    return item

@router.get("", response_model=List[schemas.Item])
async def read_items(
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    return await crud.item.get_items(db)

@router.get("/{item_id}", response_model=schemas.Item)
async def read_item_by_id(
    item_id: int,
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    item = await crud.item.get_item(db, item_id=item_id)
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
    return item

@router.put("/{item_id}", response_model=schemas.Item)
async def update_existing_item(
    item_id: int,
    item_in: schemas.ItemUpdate,
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    await deps.ensure_category_exists(db, item_in.category_id)
    item = await crud.item.update_item(db=db, item_id=item_id, item_in=item_in)
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
    return item

@router.delete("/{item_id}", response_model=schemas.StatusMessage)
async def delete_existing_item(
    item_id: int,
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    affected_rows = await crud.item.delete_item(db=db, item_id=item_id)
    if affected_rows == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
    return {"message": "Item was deleted!", "affected_rows": affected_rows}

@joined_router.get("/allitems", response_model=List[schemas.ItemWithCategory])
async def read_items_with_category_name(
    db: AsyncSession = Depends(deps.get_db),
) -> Any:
    """
    All items, each with the name of its category.
    """
    return await crud.item.get_items_with_category_name(db)
