from decimal import Decimal
from pydantic import BaseModel, HttpUrl, constr, Field, field_validator
from typing import Optional

class ItemBase(BaseModel):
    item_name: constr(strip_whitespace=True, min_length=1, max_length=255)
    item_desc: constr(min_length=1)
    item_price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    item_stock: int = Field(ge=0)
    item_status: bool = True # available
    item_image_link: Optional[HttpUrl] = None

class ItemCreate(ItemBase):
    category_id: int

class ItemUpdate(ItemCreate):
    # PUT /items/{item_id} replaces the full field set, category included
    pass

class ItemRestrictedUpdate(BaseModel):
    """
    Body of the category-scoped edit (PUT /categories/{item_id}/item).
    category_id is not part of it: an unknown key in the body is ignored and
    the item keeps its category. Only the fields sent are changed.
    """
    item_name: Optional[constr(strip_whitespace=True, min_length=1, max_length=255)] = None
    item_desc: Optional[constr(min_length=1)] = None
    item_price: Optional[Decimal] = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    item_stock: Optional[int] = Field(default=None, ge=0)
    item_status: Optional[bool] = None
    item_image_link: Optional[HttpUrl] = None # null clears the link

    @field_validator("item_name", "item_desc", "item_price", "item_stock", "item_status", mode="before")
    @classmethod
    def reject_null(cls, value):
        # Omit a field to leave it unchanged; these columns are NOT NULL
        if value is None:
            raise ValueError("may be omitted but not null")
        return value

class Item(BaseModel): # Full Item response schema
    item_id: int
    item_name: str
    item_desc: str
    item_price: Decimal
    item_stock: int
    item_status: bool
    item_image_link: Optional[str] = None
    category_id: int

    class Config:
        from_attributes = True

class ItemWithCategory(Item): # Row of the joined listing
    category_name: str
