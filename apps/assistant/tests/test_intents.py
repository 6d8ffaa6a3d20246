import pytest
from apps.assistant.services import Intent, IntentAssistant, ReplyAction
from apps.assistant.services.intents import FALLBACK_TEXT, HELP_TEXT, stock_search_term


class TestStockSearchTerm:

    def test_drops_short_tokens(self):
        assert stock_search_term('is the med in stock now') == 'stock'

    def test_keeps_trigger_keyword(self):
        assert stock_search_term('Paracetamol stock') == 'Paracetamol stock'

    def test_splits_on_single_spaces(self):
        assert stock_search_term('Amoxicillin  stock') == 'Amoxicillin stock'


class TestStockRule:

    def test_keyword_in_term_prevents_match(self, assistant):
        """The trigger keyword stays in the search term, so a real name alone is not enough."""
        reply = assistant.respond('Is Amoxicillin in stock')

        assert reply.intent == Intent.STOCK
        assert reply.text == 'Medicine "Amoxicillin stock" not found in our database.'
        assert reply.action is None
        assert reply.stock_alert is None

    def test_found_in_stock(self, keyword_catalog):
        reply = IntentAssistant(keyword_catalog).respond('stock')

        assert reply.intent == Intent.STOCK
        assert reply.text == '✓ Stock Syrup is available in stock. Quantity: 12 units.'
        assert reply.action is None
        assert reply.lookup.found

    def test_found_out_of_stock(self, keyword_catalog):
        reply = IntentAssistant(keyword_catalog).respond('availability')

        assert reply.intent == Intent.STOCK
        assert reply.text == '⚠️ Availability Drops is OUT OF STOCK! Stock quantity: 0 units.'
        assert reply.action == ReplyAction.ALERT
        assert reply.stock_alert == 'Availability Drops'


class TestCounterfeitRule:

    @pytest.mark.parametrize('text', [
        'I got the wrong tablets',
        'this looks FAKE',
        'possible counterfeit',
        'suspicious packaging',
        'I want to report a batch',
    ])
    def test_keywords(self, assistant, text):
        reply = assistant.respond(text)

        assert reply.intent == Intent.COUNTERFEIT
        assert reply.action == ReplyAction.CALL
        assert reply.call_targets == ('1800-11-4000', '1915')
        assert 'Government Medicine Call Centre' in reply.text

    def test_checked_before_help(self, assistant):
        assert assistant.respond('is this fake, what should I do').intent == Intent.COUNTERFEIT

    def test_checked_after_stock(self, assistant):
        assert assistant.respond('is this fake, what is stock').intent == Intent.STOCK


class TestHelpRule:

    def test_help(self, assistant):
        reply = assistant.respond('How does this work?')

        assert reply.intent == Intent.HELP
        assert reply.text == HELP_TEXT
        assert reply.action is None

    def test_checked_after_stock(self, assistant):
        assert assistant.respond('what is available').intent == Intent.STOCK


class TestFallbackRule:

    def test_raw_input_lookup_out_of_stock(self, assistant):
        reply = assistant.respond('omeprazole')

        assert reply.intent == Intent.FALLBACK
        assert reply.action == ReplyAction.ALERT
        assert reply.stock_alert == 'Omeprazole'

    def test_raw_input_lookup_in_stock(self, assistant):
        reply = assistant.respond('Paracetamol')

        assert reply.intent == Intent.FALLBACK
        assert reply.text == '✓ Paracetamol is available in stock. Quantity: 450 units.'

    def test_generic_fallback(self, assistant):
        reply = assistant.respond('hello there')

        assert reply.intent == Intent.FALLBACK
        assert reply.text == FALLBACK_TEXT
        assert not reply.lookup.found
