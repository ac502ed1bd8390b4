"""
Accounts Authentication - Role-carrying JWT tokens for SuperFix

This module implements:
- Access token issuance for administrators and heroes
- A stateless verify-and-decode step yielding a Principal
- Error mapping: missing credential -> 401, bad/expired credential -> 403

The guard never touches the database: everything it needs is in the token.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from django.conf import settings

from rest_framework.exceptions import AuthenticationFailed
from rest_framework.request import Request
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken

from api.exceptions import AuthenticationInvalid

from .models import Role

logger = logging.getLogger(__name__)


# =============================================================================
# PRINCIPAL
# =============================================================================

@dataclass(frozen=True)
class Principal:
    """Decoded identity of an authenticated caller."""
    subject_id: str
    role: str
    alias: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return True

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @property
    def is_hero(self) -> bool:
        return self.role == Role.HERO


# =============================================================================
# TOKENS
# =============================================================================

class RoleAccessToken(AccessToken):
    """
    Access token carrying the subject id, its role and, for heroes, the alias.
    Admin and hero tokens have different lifetimes (SUPERFIX settings).
    """

    @classmethod
    def for_subject(cls, subject_id, role: str, lifetime, **claims) -> 'RoleAccessToken':
        token = cls()
        token.set_exp(lifetime=lifetime)
        token[api_settings.USER_ID_CLAIM] = str(subject_id)
        token['role'] = str(role)
        for claim, value in claims.items():
            token[claim] = value
        return token

    @classmethod
    def for_admin(cls, admin) -> 'RoleAccessToken':
        return cls.for_subject(
            admin.pk,
            Role.ADMIN.value,
            settings.SUPERFIX['ADMIN_TOKEN_LIFETIME'],
        )

    @classmethod
    def for_hero(cls, hero) -> 'RoleAccessToken':
        return cls.for_subject(
            hero.pk,
            Role.HERO.value,
            settings.SUPERFIX['HERO_TOKEN_LIFETIME'],
            alias=hero.alias,
        )


# =============================================================================
# AUTHENTICATION
# =============================================================================

class RoleTokenAuthentication(JWTAuthentication):
    """
    Bearer-token authentication that yields a Principal instead of a user row.

    Returns None when no Authorization header is present, so protected views
    can answer "unauthenticated"; any header that fails to verify raises
    AuthenticationInvalid.
    """

    def authenticate(self, request: Request) -> Optional[Tuple[Principal, RoleAccessToken]]:
        header = self.get_header(request)
        if header is None:
            return None

        try:
            raw_token = self.get_raw_token(header)
        except AuthenticationFailed:
            raise AuthenticationInvalid()

        if raw_token is None:
            raise AuthenticationInvalid()

        try:
            validated_token = RoleAccessToken(raw_token)
        except TokenError as e:
            logger.info(f"Rejected bearer token: {e}")
            raise AuthenticationInvalid()

        return self.get_principal(validated_token), validated_token

    def get_principal(self, validated_token) -> Principal:
        subject_id = validated_token.get(api_settings.USER_ID_CLAIM)
        role = validated_token.get('role')

        if not subject_id or role not in Role.values:
            raise AuthenticationInvalid()

        return Principal(
            subject_id=str(subject_id),
            role=role,
            alias=validated_token.get('alias'),
        )
