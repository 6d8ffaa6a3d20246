"""Domain-specific exceptions for catalog services."""


class CatalogServiceError(Exception):
    """Base exception for catalog services."""
    pass


class InvalidAccessCodeError(CatalogServiceError):
    """Raised when the daily access code does not match."""
    pass
