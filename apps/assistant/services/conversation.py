"""
Assistant conversation transcript.

A posted message is stored immediately; the assistant's reply is stored at
the same time but with ``deliver_at`` pushed out by ASSISTANT_REPLY_DELAY_MS,
so the transcript shows it only once that moment has passed. Out-of-stock
replies also schedule a StockAlert STOCK_ALERT_DELAY_MS after the reply.
Closing a conversation drops whatever has not been delivered yet.
"""

from datetime import datetime, timedelta
from typing import List, Optional, Tuple
from uuid import UUID
import logging

from django.conf import settings
from django.db import transaction
from django.db.models import Max
from django.utils import timezone

from apps.catalog.services import get_default_catalog
from ..models import Conversation, ChatMessage, MessageSender, StockAlert
from .exceptions import (
    ConversationNotFoundError,
    ConversationClosedError,
    EmptyMessageError,
)
from .intents import GREETING_TEXT, IntentAssistant, stock_alert_text

logger = logging.getLogger(__name__)


def get_default_assistant() -> IntentAssistant:
    """Assistant over the reference catalog with the configured helplines."""
    return IntentAssistant(get_default_catalog(), settings.ASSISTANT_HELPLINE_NUMBERS)


def _delay(setting_name: str) -> timedelta:
    return timedelta(milliseconds=getattr(settings, setting_name))


def get_conversation(*, conversation_id: UUID, user, for_update: bool = False) -> Conversation:
    """
    Fetch a conversation owned by user.

    Raises:
        ConversationNotFoundError: If the conversation is missing or not owned
    """
    queryset = Conversation.objects.all()
    if for_update:
        queryset = queryset.select_for_update()
    try:
        return queryset.get(id=conversation_id, user=user)
    except Conversation.DoesNotExist:
        raise ConversationNotFoundError(f"Conversation {conversation_id} not found")


@transaction.atomic
def start_conversation(*, user, now: Optional[datetime] = None) -> Conversation:
    """
    Open a conversation with the greeting already delivered.

    Args:
        user: Conversation owner
        now: Current time; defaults to timezone.now()

    Returns:
        Created Conversation
    """
    now = now or timezone.now()
    conversation = Conversation.objects.create(user=user)
    ChatMessage.objects.create(
        conversation=conversation,
        position=1,
        sender=MessageSender.BOT,
        text=GREETING_TEXT,
        deliver_at=now,
    )
    return conversation


@transaction.atomic
def post_message(
    *,
    conversation_id: UUID,
    user,
    text: str,
    now: Optional[datetime] = None,
    assistant: Optional[IntentAssistant] = None
) -> Tuple[ChatMessage, ChatMessage]:
    """
    Append a user message and schedule the assistant's reply.

    The user message always gets a lower position than its reply.

    Args:
        conversation_id: Target conversation
        user: Conversation owner
        text: Message text; blank text is rejected
        now: Current time; defaults to timezone.now()
        assistant: Assistant to answer with; defaults to get_default_assistant()

    Returns:
        Tuple of (user message, reply message)

    Raises:
        EmptyMessageError: If text is blank
        ConversationNotFoundError: If the conversation is missing or not owned
        ConversationClosedError: If the conversation was closed
    """
    if not text or not text.strip():
        raise EmptyMessageError("Message text is required")

    now = now or timezone.now()
    assistant = assistant or get_default_assistant()

    conversation = get_conversation(conversation_id=conversation_id, user=user, for_update=True)
    if not conversation.is_open:
        raise ConversationClosedError("Conversation is closed")

    last_position = conversation.messages.aggregate(last=Max('position'))['last'] or 0

    user_message = ChatMessage.objects.create(
        conversation=conversation,
        position=last_position + 1,
        sender=MessageSender.USER,
        text=text,
        deliver_at=now,
    )

    reply = assistant.respond(text)
    reply_at = now + _delay('ASSISTANT_REPLY_DELAY_MS')
    reply_message = ChatMessage.objects.create(
        conversation=conversation,
        position=last_position + 2,
        sender=MessageSender.BOT,
        text=reply.text,
        intent=reply.intent,
        action=reply.action or '',
        call_targets=list(reply.call_targets),
        deliver_at=reply_at,
    )

    if reply.stock_alert:
        StockAlert.objects.create(
            user=user,
            conversation=conversation,
            medicine_name=reply.stock_alert,
            message=stock_alert_text(reply.stock_alert),
            deliver_at=reply_at + _delay('STOCK_ALERT_DELAY_MS'),
        )
        logger.info("Stock alert scheduled for %s", reply.stock_alert)

    return user_message, reply_message


def get_transcript(*, conversation_id: UUID, user, now: Optional[datetime] = None) -> List[ChatMessage]:
    """
    Delivered messages in transcript order.

    Raises:
        ConversationNotFoundError: If the conversation is missing or not owned
    """
    now = now or timezone.now()
    conversation = get_conversation(conversation_id=conversation_id, user=user)
    return list(conversation.messages.filter(deliver_at__lte=now).order_by('position'))


@transaction.atomic
def pending_alerts(*, user, now: Optional[datetime] = None) -> List[StockAlert]:
    """
    Hand out the user's stock alerts that have come due, newest first.

    Each alert is returned by exactly one call; returned alerts are stamped
    with delivered_at and skipped afterwards.
    """
    now = now or timezone.now()
    alerts = list(
        StockAlert.objects
        .select_for_update()
        .filter(user=user, deliver_at__lte=now, delivered_at__isnull=True)
    )
    if alerts:
        StockAlert.objects.filter(id__in=[alert.id for alert in alerts]).update(delivered_at=now)
        for alert in alerts:
            alert.delivered_at = now
    return alerts


@transaction.atomic
def close_conversation(*, conversation_id: UUID, user, now: Optional[datetime] = None) -> Conversation:
    """
    Close a conversation and cancel its undelivered replies and alerts.

    Closing an already closed conversation changes nothing.

    Raises:
        ConversationNotFoundError: If the conversation is missing or not owned
    """
    now = now or timezone.now()
    conversation = get_conversation(conversation_id=conversation_id, user=user, for_update=True)
    if not conversation.is_open:
        return conversation

    cancelled_messages, _ = conversation.messages.filter(deliver_at__gt=now).delete()
    cancelled_alerts, _ = conversation.stock_alerts.filter(deliver_at__gt=now).delete()

    conversation.closed_at = now
    conversation.save(update_fields=['closed_at'])

    logger.info(
        "Conversation %s closed, cancelled %d replies and %d alerts",
        conversation.id, cancelled_messages, cancelled_alerts
    )
    return conversation
