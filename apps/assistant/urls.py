from django.urls import path
from . import views

app_name = 'assistant'

urlpatterns = [
    # Conversations
    path('conversations/', views.create_conversation, name='conversation-create'),
    path('conversations/<uuid:pk>/messages/', views.conversation_messages, name='conversation-messages'),
    path('conversations/<uuid:pk>/close/', views.close, name='conversation-close'),

    # Stock alerts
    path('alerts/', views.alerts, name='alert-list'),
]
