"""
Accounts Views - credential exchange endpoints.

POST /api/auth/login       administrator login  -> {token, role}
POST /api/auth/hero-login  hero login           -> {token, role, heroId}
"""

import logging

from rest_framework import permissions, views
from rest_framework.response import Response

from api.exceptions import InvalidCredentials
from heroes.models import Hero

from .authentication import RoleAccessToken
from .models import AdminAccount, Role
from .serializers import LoginSerializer

logger = logging.getLogger(__name__)


class AdminLoginView(views.APIView):
    """
    Administrator login endpoint.

    POST: Check credentials and return an administrator access token.
    """
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        username = serializer.validated_data['username']

        admin = AdminAccount.objects.filter(username=username).first()
        if admin is None or not admin.check_password(serializer.validated_data['password']):
            logger.warning(f"Failed admin login for '{username}'")
            raise InvalidCredentials()

        token = RoleAccessToken.for_admin(admin)
        logger.info(f"Admin '{username}' logged in")

        return Response({'token': str(token), 'role': Role.ADMIN.value})


class HeroLoginView(views.APIView):
    """
    Hero login endpoint.

    POST: Check credentials and return a hero access token plus the hero id.
    """
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        username = serializer.validated_data['username']

        hero = Hero.objects.filter(username=username).first()
        if hero is None or not hero.check_password(serializer.validated_data['password']):
            logger.warning(f"Failed hero login for '{username}'")
            raise InvalidCredentials(detail="Incorrect username or password.")

        token = RoleAccessToken.for_hero(hero)
        logger.info(f"Hero '{username}' logged in")

        return Response({
            'token': str(token),
            'role': Role.HERO.value,
            'heroId': str(hero.pk),
        })
