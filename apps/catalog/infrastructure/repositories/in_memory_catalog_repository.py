"""
In-memory implementation of CatalogRepository.
"""
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from ...domain.exceptions import CatalogLoadError
from ...domain.repositories.catalog_repository import CatalogRepository
from ...domain.value_objects.item import Item

DEFAULT_ITEMS = (
    Item(id='P101', name='Laptop', unit_price=Decimal('1200.00'), category='Electronics'),
    Item(id='P102', name='Java Book', unit_price=Decimal('45.00'), category='Books'),
    Item(id='P103', name='Headphones', unit_price=Decimal('150.00'), category='Electronics'),
    Item(id='P104', name='Desk Lamp', unit_price=Decimal('30.00'), category='Home'),
)


class InMemoryCatalogRepository(CatalogRepository):
    """Catalog held in a dict, keyed by item id."""

    def __init__(self, items: Iterable[Item] = ()):
        self._items: Dict[str, Item] = {}
        for item in items:
            self._add(item)

    @classmethod
    def with_defaults(cls) -> 'InMemoryCatalogRepository':
        """Catalog seeded with the demo products."""
        return cls(DEFAULT_ITEMS)

    def _add(self, item: Item, source: str = None, line: int = None) -> None:
        if item.id in self._items:
            raise CatalogLoadError(f"Duplicate item id '{item.id}'", source=source, line=line)
        self._items[item.id] = item

    def lookup(self, item_id: str) -> Optional[Item]:
        """Find an item by id."""
        return self._items.get((item_id or '').strip())

    def list_all(self) -> List[Item]:
        """List every item, sorted ascending by unit price."""
        return sorted(self._items.values(), key=lambda item: item.unit_price)
