import logging

from django.contrib.auth import login, logout
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from ..serializers.auth import LoginSerializer
from ..serializers.user import UserSerializer

logger = logging.getLogger(__name__)


class AuthViewSet(ViewSet):
    permission_classes = [IsAuthenticated]

    @action(methods=['post'], detail=False, permission_classes=[AllowAny])
    def login(self, request):
        serializer = LoginSerializer(
            data=request.data, context={'request': request}
        )
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data['user']
        login(request, user)
        logger.info(f"{user.username} logged in")
        return Response(UserSerializer(user).data)

    @action(methods=['post'], detail=False)
    def logout(self, request):
        username = request.user.username
        logout(request)
        logger.info(f"{username} logged out")
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(methods=['get'], detail=False)
    def me(self, request):
        return Response(UserSerializer(request.user).data)
