# Repository implementations
from .in_memory_catalog_repository import InMemoryCatalogRepository
from .csv_catalog_repository import CsvCatalogRepository

__all__ = ['InMemoryCatalogRepository', 'CsvCatalogRepository']
