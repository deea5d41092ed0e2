"""
Catalog repository interface.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from ..exceptions import ItemNotFoundError
from ..value_objects.item import Item


class CatalogRepository(ABC):
    """Read-only source of purchasable items."""

    @abstractmethod
    def lookup(self, item_id: str) -> Optional[Item]:
        """Find an item by id."""
        pass

    @abstractmethod
    def list_all(self) -> List[Item]:
        """List every item, sorted ascending by unit price."""
        pass

    def get(self, item_id: str) -> Item:
        """Find an item by id or raise ``ItemNotFoundError``."""
        item = self.lookup(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        return item
