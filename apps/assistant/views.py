from rest_framework import status, serializers as drf_serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from django.utils import timezone
from drf_spectacular.utils import extend_schema
from .serializers import (
    PostMessageSerializer,
    ChatMessageSerializer,
    ConversationSerializer,
    StockAlertSerializer,
)
from .services import (
    get_conversation,
    start_conversation,
    post_message,
    get_transcript,
    pending_alerts,
    close_conversation,
    ConversationNotFoundError,
    ConversationClosedError,
    EmptyMessageError,
)


# Response serializers for API documentation
class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


class ConversationResponseSerializer(drf_serializers.Serializer):
    conversation = ConversationSerializer()
    messages = ChatMessageSerializer(many=True)


class PostMessageResponseSerializer(drf_serializers.Serializer):
    message = ChatMessageSerializer()
    reply_due_at = drf_serializers.DateTimeField()


def _transcript_response(conversation, messages, status_code=status.HTTP_200_OK):
    return Response({
        'conversation': ConversationSerializer(conversation).data,
        'messages': ChatMessageSerializer(messages, many=True).data,
    }, status=status_code)


@extend_schema(
    request=None,
    responses={201: ConversationResponseSerializer},
    description="Open an assistant conversation; the greeting is delivered immediately.",
    tags=['assistant'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def create_conversation(request):
    """Start a new assistant conversation."""
    now = timezone.now()
    conversation = start_conversation(user=request.user, now=now)
    messages = get_transcript(conversation_id=conversation.id, user=request.user, now=now)
    return _transcript_response(conversation, messages, status.HTTP_201_CREATED)


@extend_schema(
    methods=['GET'],
    responses={200: ConversationResponseSerializer, 404: ErrorResponseSerializer},
    description="Delivered messages of a conversation in order.",
    tags=['assistant'],
)
@extend_schema(
    methods=['POST'],
    request=PostMessageSerializer,
    responses={
        201: PostMessageResponseSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
        409: ErrorResponseSerializer,
    },
    description="Send a message; the reply appears in the transcript after the reply delay.",
    tags=['assistant'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def conversation_messages(request, pk):
    """Read the transcript or post a new message."""
    if request.method == 'GET':
        try:
            conversation = get_conversation(conversation_id=pk, user=request.user)
        except ConversationNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        messages = get_transcript(conversation_id=pk, user=request.user)
        return _transcript_response(conversation, messages)

    serializer = PostMessageSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user_message, reply_message = post_message(
            conversation_id=pk,
            user=request.user,
            text=serializer.validated_data['text'],
        )
    except EmptyMessageError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except ConversationNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except ConversationClosedError as e:
        return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

    return Response({
        'message': ChatMessageSerializer(user_message).data,
        'reply_due_at': reply_message.deliver_at,
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    request=None,
    responses={200: ConversationSerializer, 404: ErrorResponseSerializer},
    description="Close a conversation and cancel replies and alerts not yet delivered.",
    tags=['assistant'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def close(request, pk):
    """Close an assistant conversation."""
    try:
        conversation = close_conversation(conversation_id=pk, user=request.user)
    except ConversationNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    return Response(ConversationSerializer(conversation).data)


@extend_schema(
    responses={200: StockAlertSerializer(many=True)},
    description="Stock alerts that have come due for the current user.",
    tags=['assistant'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def alerts(request):
    """List delivered stock alerts."""
    return Response(StockAlertSerializer(pending_alerts(user=request.user), many=True).data)
