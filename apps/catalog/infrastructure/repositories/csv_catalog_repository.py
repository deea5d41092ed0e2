"""
CSV backed catalog.

The source is a flat table with a header row ``id,name,price,category``.
"""
import csv
import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Union

from ...domain.exceptions import CatalogLoadError, InvalidItemError
from ...domain.value_objects.item import Item
from .in_memory_catalog_repository import InMemoryCatalogRepository

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ('id', 'name', 'price', 'category')


class CsvCatalogRepository(InMemoryCatalogRepository):
    """Catalog loaded once from a CSV file."""

    def __init__(self, path: Union[str, Path]):
        super().__init__()
        self.path = Path(path)
        self._load()

    def _load(self) -> None:
        source = str(self.path)
        try:
            with self.path.open(newline='', encoding='utf-8-sig') as f:
                reader = csv.DictReader(f)
                missing = [c for c in REQUIRED_COLUMNS if c not in (reader.fieldnames or [])]
                if missing:
                    raise CatalogLoadError(f"Missing columns: {', '.join(missing)}", source=source)
                for row in reader:
                    self._add(self._parse_row(row, source, reader.line_num), source, reader.line_num)
        except OSError as e:
            raise CatalogLoadError(f"Cannot read catalog: {e}", source=source) from e

        logger.info(f"Loaded {len(self._items)} catalog items from {source}")

    @staticmethod
    def _parse_row(row: dict, source: str, line: int) -> Item:
        if None in row or any(row.get(c) is None for c in REQUIRED_COLUMNS):
            raise CatalogLoadError("Malformed row", source=source, line=line)
        try:
            price = Decimal(row['price'].strip())
        except InvalidOperation:
            raise CatalogLoadError(f"Invalid price '{row['price']}'", source=source, line=line)
        try:
            return Item(
                id=row['id'],
                name=row['name'].strip(),
                unit_price=price,
                category=row['category'].strip(),
            )
        except InvalidItemError as e:
            raise CatalogLoadError(e.message, source=source, line=line) from e
