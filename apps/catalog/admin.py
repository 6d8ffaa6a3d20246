from django.contrib import admin
from .models import NewsAlert


@admin.register(NewsAlert)
class NewsAlertAdmin(admin.ModelAdmin):
    list_display = ['title', 'category', 'severity', 'source', 'published_at']
    list_filter = ['severity', 'category']
    search_fields = ['title', 'description', 'source']
    ordering = ['-published_at']
