"""
Catalog errors.

Services raise these; the HTTP layer maps them to status codes through the
handlers registered in ``toolcatalog.main``, and GraphQL resolvers let them
surface as query errors.
"""
from fastapi import status


class CatalogError(Exception):
    """Base class for every error the catalog reports to a caller."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "CATALOG_ERROR"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(CatalogError):
    """Missing or malformed input (absent title, invalid slug, ...)."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "VALIDATION_ERROR"


class NotFound(CatalogError):
    """Referenced id or slug does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"

    def __init__(self, detail: str = "Not found", resource_id=None):
        resource_info = f" ({resource_id})" if resource_id is not None else ""
        super().__init__(f"{detail}{resource_info}")


class Conflict(CatalogError):
    """Unique value already taken by another record."""

    status_code = status.HTTP_409_CONFLICT
    code = "CONFLICT"


class StoreError(CatalogError):
    """Underlying persistence failure."""

    code = "STORE_ERROR"
