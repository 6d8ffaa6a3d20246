"""Score classification: (quality_score, is_approved) -> status."""

from typing import Optional

from django.db import models


PASS_THRESHOLD = 80
WARNING_THRESHOLD = 60


class ScanStatus(models.TextChoices):
    PASSED = 'passed', 'Passed'
    WARNING = 'warning', 'Warning'
    FAILED = 'failed', 'Failed'


def classify(score: Optional[int], approved: Optional[bool]) -> ScanStatus:
    """
    Classify a scan outcome.

    Precedence is fixed: a missing score is a warning even when the scan
    was explicitly rejected; an explicit rejection otherwise fails the scan
    regardless of score.

    Args:
        score: Quality score 0-100, or None when not yet scored
        approved: True / False / None (not yet reviewed)

    Returns:
        ScanStatus
    """
    if score is None:
        return ScanStatus.WARNING
    if approved is False:
        return ScanStatus.FAILED
    if score >= PASS_THRESHOLD:
        return ScanStatus.PASSED
    if score >= WARNING_THRESHOLD:
        return ScanStatus.WARNING
    return ScanStatus.FAILED


def classify_record(record) -> ScanStatus:
    """Classify anything exposing quality_score / is_approved attributes."""
    return classify(
        getattr(record, 'quality_score', None),
        getattr(record, 'is_approved', None),
    )
