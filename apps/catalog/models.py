from django.db import models
from django.utils import timezone
import uuid


class AlertSeverity(models.TextChoices):
    HIGH = 'high', 'High'
    MEDIUM = 'medium', 'Medium'
    LOW = 'low', 'Low'


class NewsAlert(models.Model):
    """Published notice about counterfeit medicines or quality issues."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    description = models.TextField()
    source = models.CharField(max_length=255)
    published_at = models.DateTimeField(default=timezone.now)
    category = models.CharField(max_length=100)
    severity = models.CharField(
        max_length=10,
        choices=AlertSeverity.choices,
        default=AlertSeverity.LOW,
    )

    class Meta:
        db_table = 'news_alerts'
        ordering = ['-published_at']
        indexes = [
            models.Index(fields=['-published_at'], name='news_alert_published_idx'),
        ]

    def __str__(self):
        return self.title
