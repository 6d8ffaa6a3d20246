"""
Analysis provider boundary.

A provider turns submitted scan input into a quality score plus a per-check
breakdown. The dashboard only consumes the result; which provider runs is
chosen by the ``SCAN_ANALYSIS_PROVIDER`` setting.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
import random
from typing import Any, Dict, Mapping, Optional

from django.conf import settings
from django.db import models
from django.utils.module_loading import import_string

from ..exceptions import InvalidAnalysisDetailsError
from .classification import ScanStatus, classify


class CheckKind(models.TextChoices):
    IMAGE_ANALYSIS = 'image_analysis', 'Image Analysis'
    OCR_VERIFICATION = 'ocr_verification', 'OCR Verification'
    COMPOSITION_MATCH = 'composition_match', 'Composition Match'
    REGULATORY_COMPLIANCE = 'regulatory_compliance', 'Regulatory Compliance'


@dataclass(frozen=True)
class CheckResult:
    status: str
    score: int
    details: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {'status': self.status, 'score': self.score, 'details': self.details}


@dataclass(frozen=True)
class AnalysisResult:
    score: int
    checks: Dict[str, CheckResult] = field(default_factory=dict)

    def details_dict(self) -> Dict[str, Dict[str, Any]]:
        return {kind: check.to_dict() for kind, check in self.checks.items()}


class AnalysisProvider(ABC):
    """Abstract base for scan quality analysis."""

    @abstractmethod
    def analyze(self, *, medicine_name: str = '', batch_number: str = '',
                manufacturer: str = '', dosage: str = '') -> AnalysisResult:
        """Score one submitted scan."""
        ...


class RandomAnalysisProvider(AnalysisProvider):
    """
    Placeholder provider: uniform score in [70, 99] and per-check scores
    jittered around it. Pass a seed for reproducible output.
    """

    MIN_SCORE = 70
    MAX_SCORE = 99
    CHECK_JITTER = 5

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def analyze(self, *, medicine_name='', batch_number='', manufacturer='', dosage=''):
        score = self._random.randint(self.MIN_SCORE, self.MAX_SCORE)

        checks = {}
        for kind in CheckKind:
            jitter = self._random.randint(-self.CHECK_JITTER, self.CHECK_JITTER)
            check_score = max(0, min(100, score + jitter))
            checks[kind.value] = CheckResult(
                status=classify(check_score, None).value,
                score=check_score,
                details=f'{kind.label} scored {check_score}/100.',
            )

        return AnalysisResult(score=score, checks=checks)


def get_analysis_provider() -> AnalysisProvider:
    """Instantiate the provider class named by SCAN_ANALYSIS_PROVIDER."""
    provider_class = import_string(settings.SCAN_ANALYSIS_PROVIDER)
    return provider_class()


def validate_analysis_details(details: Optional[Mapping]) -> Dict[str, Dict[str, Any]]:
    """
    Validate and normalize an analysis breakdown.

    Accepts a mapping of check kind -> {status, score, details}. Any subset
    of the known check kinds is allowed; unknown kinds, unknown statuses and
    scores outside 0-100 are rejected.

    Raises:
        InvalidAnalysisDetailsError: If the structure is malformed
    """
    if details is None:
        return {}
    if not isinstance(details, Mapping):
        raise InvalidAnalysisDetailsError("Analysis details must be an object")

    cleaned = {}
    for kind, entry in details.items():
        if kind not in CheckKind.values:
            raise InvalidAnalysisDetailsError(f"Unknown check kind: {kind}")
        if not isinstance(entry, Mapping):
            raise InvalidAnalysisDetailsError(f"Check '{kind}' must be an object")

        status = entry.get('status')
        if status not in ScanStatus.values:
            raise InvalidAnalysisDetailsError(f"Check '{kind}' has invalid status: {status}")

        score = entry.get('score')
        if isinstance(score, bool) or not isinstance(score, int) or not 0 <= score <= 100:
            raise InvalidAnalysisDetailsError(f"Check '{kind}' score must be an integer 0-100")

        text = entry.get('details', '')
        if not isinstance(text, str):
            raise InvalidAnalysisDetailsError(f"Check '{kind}' details must be text")

        cleaned[kind] = CheckResult(status=status, score=score, details=text).to_dict()

    return cleaned
