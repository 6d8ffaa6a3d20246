"""
Domain exceptions for scans app.

Service-level errors derive from ScansServiceError and are translated to
``{'error': ...}`` responses by the views. Store failures surface as a DRF
APIException so any view touching the store reports them the same way.
"""
from rest_framework.exceptions import APIException


class ScansServiceError(Exception):
    """Base exception for scan service errors."""
    pass


class ScanNotFoundError(ScansServiceError):
    """Raised when a scan does not exist or is not owned by the caller."""
    pass


class InvalidAnalysisDetailsError(ScansServiceError):
    """Raised when analysis details do not match the check-kind schema."""
    pass


class RecordStoreError(APIException):
    """Record store could not complete the operation."""
    status_code = 503
    default_detail = 'Record store is unavailable. Please try again.'
    default_code = 'record_store_unavailable'
