"""
Record store operations for scan records.

Every operation is scoped to an owner; a scan owned by someone else is
reported exactly like a missing one. Database failures are logged and
re-raised as RecordStoreError with nothing partially applied.
"""

from contextlib import contextmanager
from datetime import date, datetime, time
from typing import List, Optional
from uuid import UUID
import logging

from django.db import transaction, DatabaseError
from django.utils import timezone

from ..exceptions import ScanNotFoundError, RecordStoreError
from ..models import ScanRecord
from .analysis import AnalysisProvider, get_analysis_provider, validate_analysis_details

logger = logging.getLogger(__name__)

# Fields a user may edit after submission
UPDATABLE_FIELDS = frozenset({
    'medicine_name',
    'batch_number',
    'manufacturer',
    'dosage',
    'expiry_date',
})


@contextmanager
def _store_errors(operation: str):
    try:
        yield
    except DatabaseError as e:
        logger.exception("Record store %s failed", operation)
        raise RecordStoreError() from e


def _day_start(day: date) -> datetime:
    return timezone.make_aware(datetime.combine(day, time.min))


def _day_end(day: date) -> datetime:
    return timezone.make_aware(datetime.combine(day, time.max))


def list_scans(
    *,
    owner_id: UUID,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None
) -> List[ScanRecord]:
    """
    List an owner's scans, newest first.

    Args:
        owner_id: Owner of the records
        date_from: Inclusive lower bound, from local midnight
        date_to: Inclusive upper bound, through the end of that local day

    Returns:
        List of ScanRecord ordered by scan_date descending

    Raises:
        RecordStoreError: If the database query fails
    """
    queryset = ScanRecord.objects.filter(owner_id=owner_id)

    if date_from:
        queryset = queryset.filter(scan_date__gte=_day_start(date_from))
    if date_to:
        queryset = queryset.filter(scan_date__lte=_day_end(date_to))

    with _store_errors('list'):
        return list(queryset.order_by('-scan_date'))


def get_scan(*, scan_id: UUID, owner_id: UUID) -> ScanRecord:
    """
    Fetch one scan owned by owner_id.

    Raises:
        ScanNotFoundError: If the scan is missing or owned by someone else
        RecordStoreError: If the database query fails
    """
    with _store_errors('get'):
        try:
            return ScanRecord.objects.get(id=scan_id, owner_id=owner_id)
        except ScanRecord.DoesNotExist:
            raise ScanNotFoundError(f"Scan {scan_id} not found")


def submit_scan(
    *,
    owner,
    medicine_name: str = '',
    batch_number: str = '',
    manufacturer: str = '',
    dosage: str = '',
    expiry_date: Optional[date] = None,
    provider: Optional[AnalysisProvider] = None
) -> ScanRecord:
    """
    Analyze and store a new scan.

    The record starts unreviewed (is_approved None) with the provider's
    score and validated per-check breakdown.

    Args:
        owner: User submitting the scan
        medicine_name, batch_number, manufacturer, dosage: Optional descriptive text
        expiry_date: Optional expiry date
        provider: Analysis provider; defaults to the configured one

    Returns:
        Created ScanRecord

    Raises:
        InvalidAnalysisDetailsError: If the provider returns a malformed breakdown
        RecordStoreError: If the insert fails
    """
    if provider is None:
        provider = get_analysis_provider()

    result = provider.analyze(
        medicine_name=medicine_name,
        batch_number=batch_number,
        manufacturer=manufacturer,
        dosage=dosage,
    )
    details = validate_analysis_details(result.details_dict())

    with _store_errors('insert'):
        scan = ScanRecord.objects.create(
            owner=owner,
            medicine_name=medicine_name,
            batch_number=batch_number,
            manufacturer=manufacturer,
            dosage=dosage,
            expiry_date=expiry_date,
            quality_score=result.score,
            is_approved=None,
            analysis_details=details,
        )

    logger.info("Scan %s submitted by %s with score %s", scan.id, owner.id, scan.quality_score)
    return scan


def update_scan(*, scan_id: UUID, owner_id: UUID, **fields) -> ScanRecord:
    """
    Update descriptive fields of a scan.

    Score, approval, scan date and analysis details cannot be changed here.

    Raises:
        ValueError: If a non-editable field is passed
        ScanNotFoundError: If the scan is missing or not owned
        RecordStoreError: If the update fails
    """
    invalid = set(fields) - UPDATABLE_FIELDS
    if invalid:
        raise ValueError(f"Fields cannot be updated: {', '.join(sorted(invalid))}")

    scan = get_scan(scan_id=scan_id, owner_id=owner_id)
    if not fields:
        return scan

    for name, value in fields.items():
        setattr(scan, name, value)

    with _store_errors('update'):
        scan.save(update_fields=[*fields, 'updated_at'])

    return scan


def mark_reviewed(*, scan_id: UUID, owner_id: UUID) -> ScanRecord:
    """
    Mark a scan as reviewed and approved.

    The transition is one-way: an approved scan stays approved, and calling
    this again is a no-op.

    Raises:
        ScanNotFoundError: If the scan is missing or not owned
        RecordStoreError: If the update fails
    """
    with _store_errors('mark reviewed'):
        with transaction.atomic():
            try:
                scan = (
                    ScanRecord.objects
                    .select_for_update()
                    .get(id=scan_id, owner_id=owner_id)
                )
            except ScanRecord.DoesNotExist:
                raise ScanNotFoundError(f"Scan {scan_id} not found")

            if scan.is_approved is True:
                return scan

            scan.is_approved = True
            scan.save(update_fields=['is_approved', 'updated_at'])

    logger.info("Scan %s marked reviewed", scan.id)
    return scan


def delete_scan(*, scan_id: UUID, owner_id: UUID) -> None:
    """
    Delete a scan.

    Raises:
        ScanNotFoundError: If the scan is missing or not owned
        RecordStoreError: If the delete fails
    """
    with _store_errors('delete'):
        deleted, _ = ScanRecord.objects.filter(id=scan_id, owner_id=owner_id).delete()

    if not deleted:
        raise ScanNotFoundError(f"Scan {scan_id} not found")

    logger.info("Scan %s deleted", scan_id)
