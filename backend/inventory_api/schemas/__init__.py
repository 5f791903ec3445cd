from .category import Category, CategoryCreate, CategoryUpdate
from .item import Item, ItemCreate, ItemUpdate, ItemRestrictedUpdate, ItemWithCategory
from .dashboard import InventoryStats, CategoryBreakdown
from .msg import StatusMessage
