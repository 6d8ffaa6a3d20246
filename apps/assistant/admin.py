from django.contrib import admin
from .models import Conversation, ChatMessage, StockAlert


class ChatMessageInline(admin.TabularInline):
    model = ChatMessage
    extra = 0
    fields = ['position', 'sender', 'text', 'intent', 'action', 'deliver_at']
    readonly_fields = fields


@admin.register(Conversation)
class ConversationAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'created_at', 'closed_at']
    list_filter = ['created_at']
    search_fields = ['user__email']
    inlines = [ChatMessageInline]


@admin.register(StockAlert)
class StockAlertAdmin(admin.ModelAdmin):
    list_display = ['medicine_name', 'user', 'deliver_at']
    search_fields = ['medicine_name', 'user__email']
