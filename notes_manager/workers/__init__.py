from .catalog_refresh import CatalogController, CatalogRefreshWorker

__all__ = [
    "CatalogController",
    "CatalogRefreshWorker",
]
