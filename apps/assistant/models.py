from django.db import models
from django.conf import settings
import uuid


class Conversation(models.Model):
    """One assistant chat session. Closed conversations accept no messages."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='assistant_conversations'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    closed_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'assistant_conversations'
        ordering = ['-created_at']

    def __str__(self):
        return f"Conversation {self.id} ({self.user})"

    @property
    def is_open(self):
        return self.closed_at is None


class MessageSender(models.TextChoices):
    USER = 'user', 'User'
    BOT = 'bot', 'Bot'


class ChatMessage(models.Model):
    """
    Transcript entry.

    Replies are stored with a future deliver_at and only become visible in
    the transcript once that moment has passed.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    conversation = models.ForeignKey(
        Conversation,
        on_delete=models.CASCADE,
        related_name='messages'
    )
    position = models.PositiveIntegerField()
    sender = models.CharField(max_length=10, choices=MessageSender.choices)
    text = models.TextField()
    intent = models.CharField(max_length=20, blank=True)
    action = models.CharField(max_length=10, blank=True)
    call_targets = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    deliver_at = models.DateTimeField()

    class Meta:
        db_table = 'assistant_messages'
        ordering = ['position']
        constraints = [
            models.UniqueConstraint(
                fields=['conversation', 'position'],
                name='unique_message_position'
            )
        ]

    def __str__(self):
        return f"{self.sender} #{self.position}: {self.text[:40]}"


class StockAlert(models.Model):
    """Out-of-stock notification raised by an assistant reply."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='stock_alerts'
    )
    conversation = models.ForeignKey(
        Conversation,
        on_delete=models.CASCADE,
        related_name='stock_alerts'
    )
    medicine_name = models.CharField(max_length=200)
    message = models.CharField(max_length=300)
    deliver_at = models.DateTimeField()
    # Set when the alert is handed to the user; each alert is shown once
    delivered_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'assistant_stock_alerts'
        ordering = ['-deliver_at']
        indexes = [
            models.Index(fields=['user', 'deliver_at'], name='stock_alert_user_idx'),
        ]

    def __str__(self):
        return f"Stock alert: {self.medicine_name}"
