"""
Dashboard aggregation over classified scan records.

All functions are pure: they take an already-fetched, owner-scoped list
ordered by scan_date descending and never touch the database.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Optional, Sequence

from .classification import ScanStatus, classify_record


DEFAULT_TREND_POINTS = 15
DEFAULT_RECENT_LIMIT = 3


def summarize(records: Iterable) -> Dict[str, int]:
    """Count records per derived status; the three counts always sum to total."""
    counts = {status: 0 for status in ScanStatus.values}
    total = 0

    for record in records:
        counts[classify_record(record)] += 1
        total += 1

    return {
        'total': total,
        'passed_count': counts[ScanStatus.PASSED],
        'warning_count': counts[ScanStatus.WARNING],
        'failed_count': counts[ScanStatus.FAILED],
    }


def rate(count: int, total: int) -> int:
    """Integer percentage rounded half up; 0 when total is 0."""
    if total == 0:
        return 0
    value = Decimal(100 * count) / Decimal(total)
    return int(value.quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def trend_series(records: Sequence, max_points: int = DEFAULT_TREND_POINTS) -> List[Dict]:
    """
    Build chart points from the most recent records, oldest first.

    Each point carries the score on exactly one status channel (the
    record's derived status) and None on the other two, so a line chart
    shows gaps instead of zeros. ``total`` always carries the score.
    A record without a score populates no status channel.
    """
    points = []
    max_points = max(max_points, 0)

    for record in reversed(list(records)[:max_points]):
        score = record.quality_score
        status = classify_record(record)
        point = {
            'id': record.id,
            'medicine_name': record.medicine_name,
            'scan_date': record.scan_date,
            'passed': None,
            'warning': None,
            'failed': None,
            'total': score,
        }
        if score is not None:
            point[status.value] = score
        points.append(point)

    return points


def dashboard_summary(
    records: Sequence,
    trend_points: Optional[int] = None,
    recent_limit: Optional[int] = None
) -> Dict:
    """Assemble the dashboard payload: counts, rates, trend and recent scans."""
    if trend_points is None:
        trend_points = DEFAULT_TREND_POINTS
    if recent_limit is None:
        recent_limit = DEFAULT_RECENT_LIMIT

    records = list(records)
    summary = summarize(records)
    total = summary['total']

    return {
        **summary,
        'pass_rate': rate(summary['passed_count'], total),
        'warning_rate': rate(summary['warning_count'], total),
        'rejection_rate': rate(summary['failed_count'], total),
        'trend': trend_series(records, trend_points),
        'recent_scans': records[:recent_limit],
    }
