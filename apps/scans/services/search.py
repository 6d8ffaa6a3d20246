"""Report search and status filtering."""

from typing import Iterable, List, Optional

from .classification import classify_record


SEARCH_FIELDS = ('medicine_name', 'batch_number', 'manufacturer')

STATUS_ALL = 'all'


def matches(record, query: Optional[str]) -> bool:
    """
    Case-insensitive substring match over name, batch and manufacturer.

    Empty or missing fields never match; an empty query matches everything.
    """
    if not query:
        return True

    needle = query.lower()
    for field in SEARCH_FIELDS:
        value = getattr(record, field, None)
        if value and needle in value.lower():
            return True
    return False


def filter_records(
    records: Iterable,
    query: Optional[str] = '',
    status: Optional[str] = None
) -> List:
    """
    Keep records matching the query and, unless status is None or 'all',
    whose derived status equals it. Input order is preserved.
    """
    check_status = status and status != STATUS_ALL

    return [
        record for record in records
        if matches(record, query)
        and (not check_status or classify_record(record) == status)
    ]
