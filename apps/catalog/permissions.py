"""Permission classes for the medicine database."""
from rest_framework.permissions import BasePermission

from .services import is_unlocked


class IsCatalogUnlocked(BasePermission):
    """
    Allow access once the daily access code was entered in this session.

    Usage:
        @permission_classes([IsAuthenticated, IsCatalogUnlocked])
        def list_medicines(request):
            ...
    """

    message = 'Enter the 8-digit daily access code to view the medicine database.'

    def has_permission(self, request, view):
        return is_unlocked(request.session)
