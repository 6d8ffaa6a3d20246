from rest_framework import status, serializers as drf_serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated, IsAdminUser
from rest_framework.response import Response
from django.utils import timezone
from drf_spectacular.utils import extend_schema, OpenApiParameter
from .models import NewsAlert
from .permissions import IsCatalogUnlocked
from .serializers import (
    StockQuerySerializer,
    MedicineSearchSerializer,
    UnlockInputSerializer,
    ApprovedMedicineSerializer,
    StockLookupSerializer,
    AccessCodeSerializer,
    NewsAlertSerializer,
)
from .services import (
    get_default_catalog,
    get_daily_code,
    unlock_session,
    InvalidAccessCodeError,
)


# Response serializers for API documentation
class MessageResponseSerializer(drf_serializers.Serializer):
    message = drf_serializers.CharField()
    detail = drf_serializers.CharField()


class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()
    detail = drf_serializers.CharField()


@extend_schema(
    parameters=[OpenApiParameter('q', str, required=True, description='Medicine name')],
    responses={200: StockLookupSerializer},
    description="Check stock for the first approved medicine whose name contains q.",
    tags=['catalog'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def stock_lookup(request):
    """Stock availability lookup."""
    query_serializer = StockQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    result = get_default_catalog().lookup(query_serializer.validated_data['q'])

    return Response(StockLookupSerializer({
        'found': result.found,
        'in_stock': result.in_stock,
        'medicine': result.medicine,
    }).data)


@extend_schema(
    request=UnlockInputSerializer,
    responses={
        200: MessageResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Unlock the medicine database for this session with today's code.",
    tags=['catalog'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def unlock(request):
    """Enter the daily access code."""
    serializer = UnlockInputSerializer(data=request.data)
    if not serializer.is_valid():
        return Response({
            'error': 'Invalid code',
            'detail': 'Please enter the correct 8-digit code',
        }, status=status.HTTP_400_BAD_REQUEST)

    try:
        unlock_session(request.session, serializer.validated_data['code'])
    except InvalidAccessCodeError as e:
        return Response({
            'error': str(e),
            'detail': 'Please enter the correct 8-digit code',
        }, status=status.HTTP_400_BAD_REQUEST)

    return Response({
        'message': 'Access granted',
        'detail': 'You can now view the medicine database',
    })


@extend_schema(
    parameters=[OpenApiParameter('search', str, description='Name, generic name, manufacturer or regulatory id')],
    responses={200: ApprovedMedicineSerializer(many=True)},
    description="Approved medicine reference database. Requires an unlocked session.",
    tags=['catalog'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsCatalogUnlocked])
def list_medicines(request):
    """Search the approved medicine database."""
    search_serializer = MedicineSearchSerializer(data=request.query_params)
    search_serializer.is_valid(raise_exception=True)

    medicines = get_default_catalog().search(search_serializer.validated_data.get('search'))
    return Response(ApprovedMedicineSerializer(medicines, many=True).data)


@extend_schema(
    responses={200: AccessCodeSerializer},
    description="Reveal today's database access code (staff only).",
    tags=['catalog'],
)
@api_view(['GET'])
@permission_classes([IsAdminUser])
def access_code(request):
    """Today's access code for distribution to staff."""
    today = timezone.localdate()
    return Response(AccessCodeSerializer({
        'date': today,
        'code': get_daily_code(today),
    }).data)


@extend_schema(
    responses={200: NewsAlertSerializer(many=True)},
    description="Counterfeit and quality news alerts, newest first.",
    tags=['catalog'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def list_news_alerts(request):
    """News and alerts feed."""
    alerts = NewsAlert.objects.order_by('-published_at')
    return Response(NewsAlertSerializer(alerts, many=True).data)
