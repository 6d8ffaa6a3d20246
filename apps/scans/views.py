from rest_framework import viewsets, status, serializers as drf_serializers
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from django.conf import settings
from django.http import HttpResponse
from django.utils.http import content_disposition_header
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema, OpenApiParameter
from .exceptions import ScanNotFoundError, InvalidAnalysisDetailsError
from .serializers import (
    ScanRecordSerializer,
    DashboardSerializer,
    # Input serializers
    DateRangeSerializer,
    ScanFilterSerializer,
    ScanSubmitSerializer,
    ScanUpdateSerializer,
)
from .services import (
    list_scans,
    get_scan,
    submit_scan,
    update_scan,
    mark_reviewed,
    delete_scan,
    filter_records,
    dashboard_summary,
    build_tabular_export,
    build_snapshot_export,
)


# Response serializers for API documentation
class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


class EmptyExportResponseSerializer(drf_serializers.Serializer):
    message = drf_serializers.CharField()
    detail = drf_serializers.CharField()


FILTER_PARAMETERS = [
    OpenApiParameter('date_from', str, description='Inclusive start date (YYYY-MM-DD)'),
    OpenApiParameter('date_to', str, description='Inclusive end date (YYYY-MM-DD)'),
    OpenApiParameter('search', str, description='Medicine name, batch number or manufacturer'),
    OpenApiParameter('status', str, description='all, passed, warning or failed'),
]


def _not_found(e):
    return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)


def _download(export_file):
    response = HttpResponse(export_file.content, content_type=export_file.content_type)
    response['Content-Disposition'] = content_disposition_header(
        as_attachment=True, filename=export_file.filename
    )
    return response


class ScanRecordViewSet(viewsets.ViewSet):
    """
    Quality scan reports for the current user.

    list: Filtered reports, newest first
    create: Submit a scan for analysis
    retrieve: One report
    partial_update: Edit descriptive fields
    destroy: Delete a report
    """

    permission_classes = [IsAuthenticated]
    lookup_value_regex = '[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}'

    def _filtered_scans(self, request):
        filter_serializer = ScanFilterSerializer(data=request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        records = list_scans(
            owner_id=request.user.id,
            date_from=params.get('date_from'),
            date_to=params.get('date_to'),
        )
        return filter_records(records, params.get('search'), params.get('status'))

    @extend_schema(parameters=FILTER_PARAMETERS, responses={200: ScanRecordSerializer(many=True)}, tags=['scans'])
    def list(self, request):
        records = self._filtered_scans(request)
        return Response(ScanRecordSerializer(records, many=True).data)

    @extend_schema(
        request=ScanSubmitSerializer,
        responses={201: ScanRecordSerializer, 400: ErrorResponseSerializer},
        tags=['scans'],
    )
    def create(self, request):
        serializer = ScanSubmitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            scan = submit_scan(owner=request.user, **serializer.validated_data)
        except InvalidAnalysisDetailsError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ScanRecordSerializer(scan).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: ScanRecordSerializer, 404: ErrorResponseSerializer}, tags=['scans'])
    def retrieve(self, request, pk=None):
        try:
            scan = get_scan(scan_id=pk, owner_id=request.user.id)
        except ScanNotFoundError as e:
            return _not_found(e)
        return Response(ScanRecordSerializer(scan).data)

    @extend_schema(
        request=ScanUpdateSerializer,
        responses={200: ScanRecordSerializer, 404: ErrorResponseSerializer},
        tags=['scans'],
    )
    def partial_update(self, request, pk=None):
        serializer = ScanUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            scan = update_scan(scan_id=pk, owner_id=request.user.id, **serializer.validated_data)
        except ScanNotFoundError as e:
            return _not_found(e)
        return Response(ScanRecordSerializer(scan).data)

    @extend_schema(responses={204: None, 404: ErrorResponseSerializer}, tags=['scans'])
    def destroy(self, request, pk=None):
        try:
            delete_scan(scan_id=pk, owner_id=request.user.id)
        except ScanNotFoundError as e:
            return _not_found(e)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        request=None,
        responses={200: ScanRecordSerializer, 404: ErrorResponseSerializer},
        tags=['scans'],
    )
    @action(detail=True, methods=['post'])
    def mark_reviewed(self, request, pk=None):
        """
        Approve a scan after review.

        POST /api/scans/{id}/mark_reviewed/
        """
        try:
            scan = mark_reviewed(scan_id=pk, owner_id=request.user.id)
        except ScanNotFoundError as e:
            return _not_found(e)
        return Response(ScanRecordSerializer(scan).data)

    @extend_schema(responses={(200, 'application/json'): OpenApiTypes.OBJECT, 404: ErrorResponseSerializer}, tags=['scans'])
    @action(detail=True, methods=['get'])
    def snapshot(self, request, pk=None):
        """
        Download one report as a JSON snapshot.

        GET /api/scans/{id}/snapshot/
        """
        try:
            scan = get_scan(scan_id=pk, owner_id=request.user.id)
        except ScanNotFoundError as e:
            return _not_found(e)
        return _download(build_snapshot_export(scan))

    @extend_schema(
        parameters=FILTER_PARAMETERS,
        responses={(200, 'text/csv'): OpenApiTypes.STR, (200, 'application/json'): EmptyExportResponseSerializer},
        tags=['scans'],
    )
    @action(detail=False, methods=['get'])
    def export(self, request):
        """
        Download the filtered report list as CSV.

        GET /api/scans/export/
        An empty result returns a message instead of a file.
        """
        records = self._filtered_scans(request)

        if not records:
            return Response({
                'message': 'No data to export',
                'detail': 'Apply filters to see reports before exporting',
            })

        response = _download(build_tabular_export(records))
        response['X-Export-Message'] = f'Exported {len(records)} reports to CSV'
        return response

    @extend_schema(
        parameters=FILTER_PARAMETERS[:2],
        responses={200: DashboardSerializer},
        tags=['scans'],
    )
    @action(detail=False, methods=['get'])
    def dashboard(self, request):
        """
        Dashboard statistics, trend series and recent scans.

        GET /api/scans/dashboard/?date_from=&date_to=
        """
        range_serializer = DateRangeSerializer(data=request.query_params)
        range_serializer.is_valid(raise_exception=True)
        params = range_serializer.validated_data

        records = list_scans(
            owner_id=request.user.id,
            date_from=params.get('date_from'),
            date_to=params.get('date_to'),
        )
        summary = dashboard_summary(
            records,
            trend_points=settings.DASHBOARD_TREND_POINTS,
            recent_limit=settings.DASHBOARD_RECENT_SCANS,
        )
        return Response(DashboardSerializer(summary).data)
