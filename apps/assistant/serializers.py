from rest_framework import serializers
from .models import Conversation, ChatMessage, StockAlert


class PostMessageSerializer(serializers.Serializer):
    """Validate a user message; surrounding whitespace is kept for the assistant."""

    text = serializers.CharField(max_length=1000, trim_whitespace=False)


class ChatMessageSerializer(serializers.ModelSerializer):

    class Meta:
        model = ChatMessage
        fields = [
            'id',
            'position',
            'sender',
            'text',
            'intent',
            'action',
            'call_targets',
            'deliver_at',
        ]
        read_only_fields = fields


class ConversationSerializer(serializers.ModelSerializer):

    class Meta:
        model = Conversation
        fields = ['id', 'created_at', 'closed_at']
        read_only_fields = fields


class StockAlertSerializer(serializers.ModelSerializer):
    title = serializers.SerializerMethodField()

    class Meta:
        model = StockAlert
        fields = ['id', 'title', 'medicine_name', 'message', 'deliver_at']
        read_only_fields = fields

    def get_title(self, obj) -> str:
        return 'Stock Alert'
