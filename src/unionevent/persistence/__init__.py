"""
UnionEvent Persistence Module

Storage for the demo application's item list.
"""

from .item import Item, light_random_color, css_color
from .base import ItemStore
from .memory import MemoryItemStore

__all__ = [
    "Item",
    "light_random_color",
    "css_color",
    "ItemStore",
    "MemoryItemStore",
]
