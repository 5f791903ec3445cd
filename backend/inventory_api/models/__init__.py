from .category import Category
from .item import Item
