"""
Report export serializers.

``build_tabular_export`` renders a filtered report list as CSV text and
``build_snapshot_export`` renders one record as pretty-printed JSON. Both
return an ExportFile; the view decides how to send it.

CSV fields are wrapped in double quotes without escaping embedded quotes,
matching the dashboard's export format.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Optional

from django.utils import timezone

from .classification import classify_record


NOT_AVAILABLE = 'N/A'

CSV_HEADERS = (
    'Medicine Name',
    'Batch Number',
    'Manufacturer',
    'Scan Date',
    'Quality Score',
    'Status',
    'Expiry Date',
    'Dosage',
    'Approved',
)

SNAPSHOT_FIELDS = (
    'medicine_name',
    'batch_number',
    'manufacturer',
    'quality_score',
    'scan_date',
    'expiry_date',
    'dosage',
    'analysis_details',
    'is_approved',
)

DATETIME_FORMAT = '%b %d, %Y %H:%M'
DATE_FORMAT = '%b %d, %Y'


@dataclass(frozen=True)
class ExportFile:
    filename: str
    content_type: str
    content: str


def _text(value: Optional[str]) -> str:
    return value or NOT_AVAILABLE


def _format_datetime(value: Optional[datetime]) -> str:
    if value is None:
        return NOT_AVAILABLE
    return timezone.localtime(value).strftime(DATETIME_FORMAT)


def _format_date(value: Optional[date]) -> str:
    if value is None:
        return NOT_AVAILABLE
    return value.strftime(DATE_FORMAT)


def _csv_row(record) -> list[str]:
    score = record.quality_score
    return [
        _text(record.medicine_name),
        _text(record.batch_number),
        _text(record.manufacturer),
        _format_datetime(record.scan_date),
        str(score) if score is not None else NOT_AVAILABLE,
        classify_record(record).value.upper(),
        _format_date(record.expiry_date),
        _text(record.dosage),
        'No' if record.is_approved is False else 'Yes',
    ]


def build_tabular_export(records: Iterable, today: Optional[date] = None) -> ExportFile:
    """Render records as quoted CSV, one row per record after the header.

    Args:
        records: Already filtered and ordered scan records.
        today:   Date used in the filename; defaults to the local date.

    Returns:
        ExportFile named ``quality-reports-<YYYY-MM-DD>.csv``.
    """
    if today is None:
        today = timezone.localdate()

    lines = [','.join(CSV_HEADERS)]
    for record in records:
        lines.append(','.join(f'"{cell}"' for cell in _csv_row(record)))

    return ExportFile(
        filename=f'quality-reports-{today.isoformat()}.csv',
        content_type='text/csv; charset=utf-8',
        content='\n'.join(lines),
    )


def snapshot_data(record) -> dict:
    """The nine snapshot fields of one record, in export order."""
    expiry = record.expiry_date
    return {
        'medicine_name': record.medicine_name,
        'batch_number': record.batch_number,
        'manufacturer': record.manufacturer,
        'quality_score': record.quality_score,
        'scan_date': record.scan_date.isoformat() if record.scan_date else None,
        'expiry_date': expiry.isoformat() if expiry else None,
        'dosage': record.dosage,
        'analysis_details': record.analysis_details,
        'is_approved': record.is_approved,
    }


def build_snapshot_export(record) -> ExportFile:
    """Render one record as a pretty-printed JSON snapshot."""
    return ExportFile(
        filename=f'report-{record.medicine_name}-{record.batch_number}.json',
        content_type='application/json',
        content=json.dumps(snapshot_data(record), indent=2, default=str),
    )
