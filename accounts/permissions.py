"""
Accounts Permissions - Role gates for protected endpoints.

A missing principal is reported as AuthenticationMissing (401) and a
principal with another role as AuthorizationDenied (403), so the two
failure modes stay distinguishable for clients.
"""

from rest_framework import permissions

from api.exceptions import AuthenticationMissing, AuthorizationDenied

from .authentication import Principal
from .models import Role


class HasRole(permissions.BasePermission):
    """
    Permission check for callers holding a token with `required_role`.
    """
    required_role = None

    def has_permission(self, request, view):
        principal = request.user
        if not isinstance(principal, Principal):
            raise AuthenticationMissing()

        if principal.role != self.required_role:
            raise AuthorizationDenied(required_role=self.required_role)

        return True


class IsAdminRole(HasRole):
    """Administrators only."""
    required_role = Role.ADMIN.value


class IsHeroRole(HasRole):
    """Heroes only; the hero id is the principal's subject id."""
    required_role = Role.HERO.value


class MethodScopedAccessMixin:
    """
    View mixin for endpoints that are public for some HTTP methods and
    role-gated for the rest.

    Authentication is deferred for public methods, so a stale token sent
    to a public read is ignored rather than rejected.
    """
    public_methods = ('GET', 'HEAD', 'OPTIONS')
    protected_permission_classes = [IsAdminRole]

    def perform_authentication(self, request):
        if request.method not in self.public_methods:
            request.user

    def get_permissions(self):
        if self.request.method in self.public_methods:
            return [permissions.AllowAny()]
        return [permission() for permission in self.protected_permission_classes]
