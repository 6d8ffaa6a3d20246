from rest_framework import serializers
from .models import NewsAlert


# =============================================================================
# Input Serializers
# =============================================================================


class StockQuerySerializer(serializers.Serializer):
    """
    Validate query parameters for stock lookup.

    Query Parameters:
        q (str): Medicine name or part of it
    """

    q = serializers.CharField(required=True, max_length=200)


class MedicineSearchSerializer(serializers.Serializer):
    """
    Query Parameters:
        search (str): Name, generic name, manufacturer or regulatory id
    """

    search = serializers.CharField(required=False, allow_blank=True, max_length=200)


class UnlockInputSerializer(serializers.Serializer):
    code = serializers.RegexField(
        regex=r'^\d{8}$',
        error_messages={'invalid': 'Please enter the correct 8-digit code'}
    )


# =============================================================================
# Output Serializers
# =============================================================================


class ApprovedMedicineSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    generic_name = serializers.CharField()
    manufacturer = serializers.CharField()
    composition = serializers.CharField()
    dosage = serializers.CharField()
    approval_date = serializers.DateField()
    regulatory_id = serializers.CharField()
    stock = serializers.IntegerField()
    in_stock = serializers.BooleanField()


class StockLookupSerializer(serializers.Serializer):
    found = serializers.BooleanField()
    in_stock = serializers.BooleanField()
    medicine = ApprovedMedicineSerializer(allow_null=True)


class AccessCodeSerializer(serializers.Serializer):
    date = serializers.DateField()
    code = serializers.CharField()


class NewsAlertSerializer(serializers.ModelSerializer):

    class Meta:
        model = NewsAlert
        fields = [
            'id',
            'title',
            'description',
            'source',
            'published_at',
            'category',
            'severity',
        ]
        read_only_fields = fields
