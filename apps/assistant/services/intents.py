"""
Rule-based assistant for stock questions and counterfeit reports.

Rules are checked in a fixed order and the first match answers:
stock, counterfeit, help, then a fallback that tries the raw text as a
medicine name. Keywords are substring matches on the lowercased input.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from django.db import models

from apps.catalog.services import StockCatalog, StockLookupResult


STOCK_KEYWORDS = ('stock', 'available', 'availability')
COUNTERFEIT_KEYWORDS = ('wrong', 'fake', 'counterfeit', 'suspicious', 'report')
HELP_KEYWORDS = ('help', 'how', 'what')

# Tokens this short are dropped when building a stock search term
MIN_TERM_LENGTH = 4

DEFAULT_HELPLINE_NUMBERS = ('1800-11-4000', '1915')

GREETING_TEXT = (
    "Hello! I'm MediCheck AI Assistant. Ask me about medicine availability, "
    "quality checks, or any help you need."
)
COUNTERFEIT_TEXT = (
    "⚠️ If you suspect a wrong, counterfeit, or low-quality medicine, please "
    "contact the Government Medicine Call Centre immediately."
)
HELP_TEXT = (
    "I can help you with:\n"
    "• Check medicine stock availability\n"
    "• Report suspicious or wrong medicines\n"
    "• Contact government helpline\n"
    "• Navigate the system\n"
    "\n"
    "Just ask me anything!"
)
FALLBACK_TEXT = (
    "I'm here to help! You can ask me about medicine stock, report issues, "
    "or get help with the system."
)
STOCK_ALERT_TITLE = 'Stock Alert'


class Intent(models.TextChoices):
    STOCK = 'stock', 'Stock'
    COUNTERFEIT = 'counterfeit', 'Counterfeit'
    HELP = 'help', 'Help'
    FALLBACK = 'fallback', 'Fallback'


class ReplyAction(models.TextChoices):
    CALL = 'call', 'Call'
    ALERT = 'alert', 'Alert'


@dataclass(frozen=True)
class AssistantReply:
    intent: str
    text: str
    action: Optional[str] = None
    call_targets: Tuple[str, ...] = ()
    stock_alert: Optional[str] = None
    lookup: Optional[StockLookupResult] = None


def stock_search_term(text: str) -> str:
    """Join the space-separated tokens of at least MIN_TERM_LENGTH characters."""
    return ' '.join(word for word in text.split(' ') if len(word) >= MIN_TERM_LENGTH)


def stock_alert_text(medicine_name: str) -> str:
    return f'{medicine_name} has finished! Please reorder immediately.'


class IntentAssistant:
    """Answers free-text questions against a stock catalog."""

    def __init__(self, catalog: StockCatalog, helpline_numbers: Sequence[str] = DEFAULT_HELPLINE_NUMBERS):
        self.catalog = catalog
        self.helpline_numbers = tuple(helpline_numbers)

    def respond(self, text: str) -> AssistantReply:
        lowered = text.lower()

        if any(keyword in lowered for keyword in STOCK_KEYWORDS):
            term = stock_search_term(text)
            result = self.catalog.lookup(term)
            if result.found:
                return self._stock_reply(Intent.STOCK, result)
            return AssistantReply(
                intent=Intent.STOCK,
                text=f'Medicine "{term}" not found in our database.',
                lookup=result,
            )

        if any(keyword in lowered for keyword in COUNTERFEIT_KEYWORDS):
            return AssistantReply(
                intent=Intent.COUNTERFEIT,
                text=COUNTERFEIT_TEXT,
                action=ReplyAction.CALL,
                call_targets=self.helpline_numbers,
            )

        if any(keyword in lowered for keyword in HELP_KEYWORDS):
            return AssistantReply(intent=Intent.HELP, text=HELP_TEXT)

        result = self.catalog.lookup(text)
        if result.found:
            return self._stock_reply(Intent.FALLBACK, result)
        return AssistantReply(intent=Intent.FALLBACK, text=FALLBACK_TEXT, lookup=result)

    def _stock_reply(self, intent: str, result: StockLookupResult) -> AssistantReply:
        medicine = result.medicine
        if result.in_stock:
            return AssistantReply(
                intent=intent,
                text=f'✓ {medicine.name} is available in stock. Quantity: {medicine.stock} units.',
                lookup=result,
            )
        return AssistantReply(
            intent=intent,
            text=f'⚠️ {medicine.name} is OUT OF STOCK! Stock quantity: {medicine.stock} units.',
            action=ReplyAction.ALERT,
            stock_alert=medicine.name,
            lookup=result,
        )
