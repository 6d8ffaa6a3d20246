from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'scans'

router = SimpleRouter()
router.register(r'', views.ScanRecordViewSet, basename='scan')

urlpatterns = [
    # GET    /api/scans/                     - List reports (date_from, date_to, search, status)
    # POST   /api/scans/                     - Submit scan
    # GET    /api/scans/{id}/                - Report detail
    # PATCH  /api/scans/{id}/                - Edit descriptive fields
    # DELETE /api/scans/{id}/                - Delete report
    # POST   /api/scans/{id}/mark_reviewed/  - Approve after review
    # GET    /api/scans/{id}/snapshot/       - JSON snapshot download
    # GET    /api/scans/export/              - CSV download
    # GET    /api/scans/dashboard/           - Dashboard payload
    path('', include(router.urls)),
]
