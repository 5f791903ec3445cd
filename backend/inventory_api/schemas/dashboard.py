from decimal import Decimal
from pydantic import BaseModel
from typing import List

class CategoryBreakdown(BaseModel):
    category_id: int
    category_name: str
    item_count: int
    total_stock: int

class InventoryStats(BaseModel):
    total_categories: int
    total_items: int
    total_stock: int
    available_items: int
    unavailable_items: int
    inventory_value: Decimal # sum of item_price * item_stock
    categories: List[CategoryBreakdown] = []
