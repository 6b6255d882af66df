from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from ats.permission.permission_classes import AnyRolePermission
from ats.recruitment.utils.stats import (
    get_admin_stats, get_hiring_manager_stats, get_recruiter_stats
)
from ats.users.constants import ADMIN, HIRING_MANAGER, RECRUITER


class StatsViewSet(ViewSet):
    """
    list:
    Dashboard counters for the requesting user's role.
    """
    permission_classes = [AnyRolePermission]

    def list(self, request):
        user = request.user
        if user.role == ADMIN:
            stats = get_admin_stats()
        elif user.role == HIRING_MANAGER:
            stats = get_hiring_manager_stats(user)
        elif user.role == RECRUITER:
            stats = get_recruiter_stats(user)
        else:
            stats = {}
        return Response(stats)
