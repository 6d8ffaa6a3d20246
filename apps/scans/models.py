from django.db import models
from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator
from django.utils import timezone
import uuid


class ScanRecord(models.Model):
    """
    One submitted medicine quality scan.

    The derived status (passed / warning / failed) is never stored; it is
    always recomputed from quality_score and is_approved.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='scan_records'
    )

    # Descriptive fields, all optional
    medicine_name = models.CharField(max_length=200, blank=True)
    batch_number = models.CharField(max_length=100, blank=True)
    manufacturer = models.CharField(max_length=200, blank=True)
    dosage = models.CharField(max_length=100, blank=True)
    expiry_date = models.DateField(null=True, blank=True)

    scan_date = models.DateTimeField(default=timezone.now, editable=False, db_index=True)

    # Analysis outcome
    quality_score = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        validators=[MinValueValidator(0), MaxValueValidator(100)]
    )
    is_approved = models.BooleanField(null=True, blank=True)
    analysis_details = models.JSONField(default=dict, blank=True)

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'scan_records'
        ordering = ['-scan_date']
        indexes = [
            models.Index(fields=['owner', '-scan_date'], name='scan_owner_date_idx'),
        ]

    def __str__(self):
        return f"{self.medicine_name or 'Unknown'} ({self.batch_number or 'N/A'})"
