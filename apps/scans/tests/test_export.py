import json
from datetime import date
from apps.scans.services import build_tabular_export, build_snapshot_export
from apps.scans.services.export import CSV_HEADERS, SNAPSHOT_FIELDS


def _cells(line):
    """Split one quoted CSV data line back into its cells."""
    return line[1:-1].split('","')


class TestTabularExport:

    def test_header_columns(self, record):
        export = build_tabular_export([record()], today=date(2024, 3, 1))
        header = export.content.split('\n')[0]

        assert header.split(',') == [
            'Medicine Name',
            'Batch Number',
            'Manufacturer',
            'Scan Date',
            'Quality Score',
            'Status',
            'Expiry Date',
            'Dosage',
            'Approved',
        ]
        assert len(CSV_HEADERS) == 9

    def test_full_row(self, record, settings):
        settings.TIME_ZONE = 'UTC'
        scan = record(quality_score=65, expiry_date=date(2025, 12, 31))
        export = build_tabular_export([scan], today=date(2024, 3, 1))
        lines = export.content.split('\n')

        assert len(lines) == 2
        assert _cells(lines[1]) == [
            'Amoxicillin 500mg',
            'AMX2024-Q1-001',
            'PharmaCorp Ltd',
            'Jan 15, 2024 10:30',
            '65',
            'WARNING',
            'Dec 31, 2025',
            '500mg Capsules',
            'Yes',
        ]

    def test_missing_values(self, record):
        scan = record(
            medicine_name='',
            batch_number=None,
            manufacturer='',
            dosage='',
            quality_score=None,
            is_approved=False,
        )
        export = build_tabular_export([scan], today=date(2024, 3, 1))
        cells = _cells(export.content.split('\n')[1])

        assert cells[0] == 'N/A'
        assert cells[1] == 'N/A'
        assert cells[4] == 'N/A'
        assert cells[5] == 'WARNING'
        assert cells[6] == 'N/A'
        assert cells[8] == 'No'

    def test_zero_score_is_rendered(self, record):
        export = build_tabular_export([record(quality_score=0)], today=date(2024, 3, 1))
        cells = _cells(export.content.split('\n')[1])

        assert cells[4] == '0'
        assert cells[5] == 'FAILED'

    def test_approved_only_no_when_rejected(self, record):
        rows = build_tabular_export(
            [record(is_approved=True), record(is_approved=None), record(is_approved=False)],
            today=date(2024, 3, 1),
        ).content.split('\n')[1:]

        assert [_cells(row)[8] for row in rows] == ['Yes', 'Yes', 'No']

    def test_quotes_are_not_escaped(self, record):
        export = build_tabular_export([record(medicine_name='Say "hi"')], today=date(2024, 3, 1))
        assert '"Say "hi""' in export.content

    def test_file_metadata(self, record):
        export = build_tabular_export([record()], today=date(2024, 3, 1))

        assert export.filename == 'quality-reports-2024-03-01.csv'
        assert export.content_type.startswith('text/csv')


class TestSnapshotExport:

    def test_exact_fields(self, record):
        scan = record(
            expiry_date=date(2025, 12, 31),
            is_approved=True,
            analysis_details={'image_analysis': {'status': 'passed', 'score': 98, 'details': 'ok'}},
        )
        export = build_snapshot_export(scan)
        data = json.loads(export.content)

        assert list(data) == list(SNAPSHOT_FIELDS)
        assert data['quality_score'] == 95
        assert data['expiry_date'] == '2025-12-31'
        assert data['is_approved'] is True
        assert data['analysis_details']['image_analysis']['score'] == 98

    def test_pretty_printed(self, record):
        export = build_snapshot_export(record())
        assert '\n  "medicine_name": ' in export.content

    def test_file_metadata(self, record):
        export = build_snapshot_export(record())

        assert export.filename == 'report-Amoxicillin 500mg-AMX2024-Q1-001.json'
        assert export.content_type == 'application/json'
