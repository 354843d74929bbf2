"""SDK for reading the agent catalog over HTTP."""

from catalog.sdk.catalog_client import CatalogClient, CatalogClientError

__all__ = [
    "CatalogClient",
    "CatalogClientError",
]
