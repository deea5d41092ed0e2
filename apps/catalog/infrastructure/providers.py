"""
Catalog wiring from Django settings.
"""
import logging
from pathlib import Path

from django.conf import settings

from ..domain.repositories.catalog_repository import CatalogRepository
from .repositories import CsvCatalogRepository, InMemoryCatalogRepository

logger = logging.getLogger(__name__)


def get_catalog_repository() -> CatalogRepository:
    """Build the catalog configured by ``CHECKOUT['CATALOG_CSV']``.

    Falls back to the built-in demo items when no CSV is configured or the
    configured file does not exist.
    """
    csv_path = settings.CHECKOUT.get('CATALOG_CSV')
    if csv_path and Path(csv_path).is_file():
        return CsvCatalogRepository(csv_path)
    if csv_path:
        logger.warning(f"Catalog file {csv_path} not found, using built-in items")
    return InMemoryCatalogRepository.with_defaults()
