from rest_framework import serializers
from .models import ScanRecord
from .services import ScanStatus, classify_record
from .services.search import STATUS_ALL


# =============================================================================
# Input Serializers
# =============================================================================


class DateRangeSerializer(serializers.Serializer):
    """
    Validate an optional inclusive date range.

    Query Parameters:
        date_from (date): Scans from this local date
        date_to (date): Scans through the end of this local date
    """

    date_from = serializers.DateField(required=False)
    date_to = serializers.DateField(required=False)

    def validate(self, attrs):
        """Validate date range."""
        date_from = attrs.get('date_from')
        date_to = attrs.get('date_to')

        if date_from and date_to and date_from > date_to:
            raise serializers.ValidationError({
                'date_to': 'date_to must be on or after date_from'
            })

        return attrs


class ScanFilterSerializer(DateRangeSerializer):
    """
    Validate query parameters for the report list and CSV export.

    Query Parameters:
        search (str): Substring of medicine name, batch number or manufacturer
        status (str): all, passed, warning or failed
    """

    search = serializers.CharField(required=False, allow_blank=True, max_length=200)
    status = serializers.ChoiceField(
        choices=[STATUS_ALL, *ScanStatus.values],
        required=False,
        default=STATUS_ALL
    )


class ScanSubmitSerializer(serializers.Serializer):
    """Validate a new scan submission; the score comes from the analysis provider."""

    medicine_name = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')
    batch_number = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    manufacturer = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')
    dosage = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    expiry_date = serializers.DateField(required=False, allow_null=True, default=None)


class ScanUpdateSerializer(serializers.Serializer):
    """Validate a partial update of descriptive fields."""

    medicine_name = serializers.CharField(max_length=200, required=False, allow_blank=True)
    batch_number = serializers.CharField(max_length=100, required=False, allow_blank=True)
    manufacturer = serializers.CharField(max_length=200, required=False, allow_blank=True)
    dosage = serializers.CharField(max_length=100, required=False, allow_blank=True)
    expiry_date = serializers.DateField(required=False, allow_null=True)


# =============================================================================
# Output Serializers
# =============================================================================


class ScanRecordSerializer(serializers.ModelSerializer):
    """Scan record with its derived status."""

    status = serializers.SerializerMethodField()

    class Meta:
        model = ScanRecord
        fields = [
            'id',
            'medicine_name',
            'batch_number',
            'manufacturer',
            'dosage',
            'expiry_date',
            'scan_date',
            'quality_score',
            'is_approved',
            'status',
            'analysis_details',
            'updated_at',
        ]
        read_only_fields = fields

    def get_status(self, obj) -> str:
        return classify_record(obj).value


class TrendPointSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    medicine_name = serializers.CharField()
    scan_date = serializers.DateTimeField()
    passed = serializers.IntegerField(allow_null=True)
    warning = serializers.IntegerField(allow_null=True)
    failed = serializers.IntegerField(allow_null=True)
    total = serializers.IntegerField(allow_null=True)


class DashboardSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    passed_count = serializers.IntegerField()
    warning_count = serializers.IntegerField()
    failed_count = serializers.IntegerField()
    pass_rate = serializers.IntegerField()
    warning_rate = serializers.IntegerField()
    rejection_rate = serializers.IntegerField()
    trend = TrendPointSerializer(many=True)
    recent_scans = ScanRecordSerializer(many=True)
