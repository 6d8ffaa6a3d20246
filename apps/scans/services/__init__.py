"""Services for scans business logic."""

from .classification import ScanStatus, classify, classify_record
from .search import matches, filter_records
from .aggregation import summarize, rate, trend_series, dashboard_summary
from .export import ExportFile, build_tabular_export, build_snapshot_export
from .analysis import (
    CheckKind,
    CheckResult,
    AnalysisResult,
    AnalysisProvider,
    RandomAnalysisProvider,
    get_analysis_provider,
    validate_analysis_details,
)
from .record_store import (
    list_scans,
    get_scan,
    submit_scan,
    update_scan,
    mark_reviewed,
    delete_scan,
)

__all__ = [
    # Classification
    'ScanStatus',
    'classify',
    'classify_record',
    # Search
    'matches',
    'filter_records',
    # Aggregation
    'summarize',
    'rate',
    'trend_series',
    'dashboard_summary',
    # Export
    'ExportFile',
    'build_tabular_export',
    'build_snapshot_export',
    # Analysis
    'CheckKind',
    'CheckResult',
    'AnalysisResult',
    'AnalysisProvider',
    'RandomAnalysisProvider',
    'get_analysis_provider',
    'validate_analysis_details',
    # Record store
    'list_scans',
    'get_scan',
    'submit_scan',
    'update_scan',
    'mark_reviewed',
    'delete_scan',
]
