"""Services for assistant business logic."""

from .exceptions import (
    AssistantServiceError,
    ConversationNotFoundError,
    ConversationClosedError,
    EmptyMessageError,
)
from .intents import Intent, ReplyAction, AssistantReply, IntentAssistant
from .conversation import (
    get_default_assistant,
    get_conversation,
    start_conversation,
    post_message,
    get_transcript,
    pending_alerts,
    close_conversation,
)

__all__ = [
    # Exceptions
    'AssistantServiceError',
    'ConversationNotFoundError',
    'ConversationClosedError',
    'EmptyMessageError',
    # Intents
    'Intent',
    'ReplyAction',
    'AssistantReply',
    'IntentAssistant',
    # Conversation
    'get_default_assistant',
    'get_conversation',
    'start_conversation',
    'post_message',
    'get_transcript',
    'pending_alerts',
    'close_conversation',
]
