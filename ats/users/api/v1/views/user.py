import logging

from django.contrib.auth import get_user_model
from django.db.models import ProtectedError
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.viewsets import ModelViewSet

from ats.users.constants import ADMIN, HIRING_MANAGER
from ..permissions import UserPermission
from ..serializers.user import UserSerializer

USER = get_user_model()

logger = logging.getLogger(__name__)


class UserViewSet(ModelViewSet):
    """
    list:
    Admins see every user, hiring managers see the recruiters they can
    assign to their jobs.

    create:
    Create a user. Connected clients are told about the new user.

    update:
    Partial update; a given password replaces the current one.

    destroy:
    Delete a user other than yourself.
    """
    serializer_class = UserSerializer
    permission_classes = [UserPermission]
    filterset_fields = ['role', 'is_active']

    def get_queryset(self):
        queryset = USER.objects.all().order_by('first_name')
        role = self.request.user.role
        if role == HIRING_MANAGER:
            return queryset.recruiters()
        if role == ADMIN:
            return queryset
        return queryset.none()

    def update(self, request, *args, **kwargs):
        kwargs['partial'] = True
        return super().update(request, *args, **kwargs)

    def perform_destroy(self, instance):
        if instance == self.request.user:
            raise ValidationError("Cannot delete your own account")
        try:
            super().perform_destroy(instance)
        except ProtectedError:
            raise ValidationError("User still manages job requisitions")
        logger.info(f"User {instance.username} deleted by {self.request.user.username}")

    def destroy(self, request, *args, **kwargs):
        self.perform_destroy(self.get_object())
        return Response(
            {'message': 'User deleted successfully'},
            status=status.HTTP_200_OK
        )
