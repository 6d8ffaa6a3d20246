import pytest
from django.urls import reverse
from rest_framework import status
from apps.assistant.models import Conversation


# =============================================================================
# Conversation Tests
# =============================================================================

@pytest.mark.django_db
class TestConversationAPI:

    def test_requires_authentication(self, api_client):
        response = api_client.post(reverse('assistant:conversation-create'))
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_create(self, authenticated_client, user):
        response = authenticated_client.post(reverse('assistant:conversation-create'))

        assert response.status_code == status.HTTP_201_CREATED
        assert len(response.data['messages']) == 1
        assert Conversation.objects.filter(user=user).count() == 1

    def test_post_and_read(self, authenticated_client, settings):
        settings.ASSISTANT_REPLY_DELAY_MS = 0
        created = authenticated_client.post(reverse('assistant:conversation-create'))
        conversation_id = created.data['conversation']['id']
        url = reverse('assistant:conversation-messages', args=[conversation_id])

        response = authenticated_client.post(url, {'text': 'I think this is fake'}, format='json')
        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['message']['sender'] == 'user'

        response = authenticated_client.get(url)
        assert response.status_code == status.HTTP_200_OK
        assert [m['sender'] for m in response.data['messages']] == ['bot', 'user', 'bot']
        assert response.data['messages'][-1]['action'] == 'call'

    def test_blank_message(self, authenticated_client):
        created = authenticated_client.post(reverse('assistant:conversation-create'))
        url = reverse('assistant:conversation-messages', args=[created.data['conversation']['id']])

        response = authenticated_client.post(url, {'text': '   '}, format='json')
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_post_to_closed(self, authenticated_client):
        created = authenticated_client.post(reverse('assistant:conversation-create'))
        conversation_id = created.data['conversation']['id']

        response = authenticated_client.post(reverse('assistant:conversation-close', args=[conversation_id]))
        assert response.status_code == status.HTTP_200_OK
        assert response.data['closed_at'] is not None

        response = authenticated_client.post(
            reverse('assistant:conversation-messages', args=[conversation_id]),
            {'text': 'help'},
            format='json',
        )
        assert response.status_code == status.HTTP_409_CONFLICT

    def test_other_users_conversation(self, authenticated_client, other_user):
        conversation = Conversation.objects.create(user=other_user)
        response = authenticated_client.get(
            reverse('assistant:conversation-messages', args=[conversation.id])
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Stock Alert Tests
# =============================================================================

@pytest.mark.django_db
class TestAlertsAPI:

    def test_due_alert_listed(self, authenticated_client, settings):
        settings.ASSISTANT_REPLY_DELAY_MS = 0
        settings.STOCK_ALERT_DELAY_MS = 0
        created = authenticated_client.post(reverse('assistant:conversation-create'))
        authenticated_client.post(
            reverse('assistant:conversation-messages', args=[created.data['conversation']['id']]),
            {'text': 'amoxicillin'},
            format='json',
        )

        response = authenticated_client.get(reverse('assistant:alert-list'))

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        assert response.data[0]['title'] == 'Stock Alert'
        assert response.data[0]['medicine_name'] == 'Amoxicillin'

        response = authenticated_client.get(reverse('assistant:alert-list'))
        assert response.data == []
