"""
Item Store - Memory Backend

In-memory item store for development and testing.
Data is lost when the application restarts.
"""

import logging
from typing import Dict, List, Optional
from uuid import UUID

from .base import ItemStore
from .item import Item

logger = logging.getLogger(__name__)


class MemoryItemStore(ItemStore):
    """In-memory item store. Each instance holds its own items."""

    def __init__(self, items: Optional[List[Item]] = None):
        self._data: Dict[UUID, Item] = {}
        for item in items or []:
            self._data[item.uuid] = item

    def add(self, item: Optional[Item] = None) -> Item:
        item = item or Item()
        self._data[item.uuid] = item
        logger.debug(f"Saved item {item.uuid}")
        return item

    def get(self, uuid: UUID) -> Optional[Item]:
        return self._data.get(uuid)

    def delete(self, uuid: UUID) -> bool:
        existed = self._data.pop(uuid, None) is not None
        if existed:
            logger.debug(f"Deleted item {uuid}")
        return existed

    def list_items(self) -> List[Item]:
        return sorted(self._data.values(), key=lambda item: item.timestamp)

    def count(self) -> int:
        return len(self._data)
