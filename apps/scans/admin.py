from django.contrib import admin
from .models import ScanRecord
from .services import classify_record


@admin.register(ScanRecord)
class ScanRecordAdmin(admin.ModelAdmin):
    list_display = [
        'medicine_name',
        'batch_number',
        'manufacturer',
        'owner',
        'quality_score',
        'is_approved',
        'derived_status',
        'scan_date',
    ]
    list_filter = ['is_approved', 'scan_date']
    search_fields = ['medicine_name', 'batch_number', 'manufacturer', 'owner__email']
    readonly_fields = ['id', 'scan_date', 'updated_at', 'quality_score', 'analysis_details']
    date_hierarchy = 'scan_date'

    @admin.display(description='Status')
    def derived_status(self, obj):
        return classify_record(obj).label
