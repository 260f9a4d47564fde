"""
Item Store - Base Class

Abstract interface for the CRUD collaborator backing the item list.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from .item import Item


class ItemStore(ABC):
    """
    Abstract base class for item stores.

    Implementations keep ``Item`` records keyed by their UUID.
    """

    @abstractmethod
    def add(self, item: Optional[Item] = None) -> Item:
        """
        Save an item, creating a new one when none is given.

        Returns:
            The stored item
        """

    @abstractmethod
    def get(self, uuid: UUID) -> Optional[Item]:
        """
        Load an item.

        Args:
            uuid: Identifier of the item

        Returns:
            The item if found, None otherwise
        """

    @abstractmethod
    def delete(self, uuid: UUID) -> bool:
        """
        Delete an item.

        Returns:
            True if the item existed, False otherwise
        """

    @abstractmethod
    def list_items(self) -> List[Item]:
        """All items, oldest first."""

    def count(self) -> int:
        return len(self.list_items())

    def delete_at(self, offsets: List[int]) -> int:
        """Delete the items at the given positions of ``list_items()``."""
        items = self.list_items()
        targets = [items[i].uuid for i in offsets if 0 <= i < len(items)]
        return sum(1 for uuid in targets if self.delete(uuid))
