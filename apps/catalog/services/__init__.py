"""Services for catalog business logic."""

from .exceptions import CatalogServiceError, InvalidAccessCodeError
from .stock_lookup import (
    ApprovedMedicine,
    StockLookupResult,
    StockCatalog,
    APPROVED_MEDICINES,
    get_default_catalog,
)
from .access_code import get_daily_code, verify_code, unlock_session, is_unlocked

__all__ = [
    # Exceptions
    'CatalogServiceError',
    'InvalidAccessCodeError',
    # Stock lookup
    'ApprovedMedicine',
    'StockLookupResult',
    'StockCatalog',
    'APPROVED_MEDICINES',
    'get_default_catalog',
    # Access code
    'get_daily_code',
    'verify_code',
    'unlock_session',
    'is_unlocked',
]
