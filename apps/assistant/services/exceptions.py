"""Domain-specific exceptions for assistant services."""


class AssistantServiceError(Exception):
    """Base exception for assistant services."""
    pass


class ConversationNotFoundError(AssistantServiceError):
    """Raised when a conversation does not exist or belongs to another user."""
    pass


class ConversationClosedError(AssistantServiceError):
    """Raised when posting to a closed conversation."""
    pass


class EmptyMessageError(AssistantServiceError):
    """Raised when a message has no text."""
    pass
