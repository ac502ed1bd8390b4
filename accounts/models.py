"""
Accounts Models - Principals that can hold a SuperFix access token.

Two principal kinds exist:
- ADMIN: an AdminAccount row (a small fixed set, provisioned by seed_admin)
- HERO: a heroes.Hero row (one per registered service provider)
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from core.models import CredentialModel


class Role(models.TextChoices):
    ADMIN = 'ADMIN', _('Administrator')
    HERO = 'HERO', _('Hero')


class AdminAccount(CredentialModel):
    """
    Privileged back-office account.

    Admin accounts are never created through the API; use
    `manage.py seed_admin`.
    """
    username = models.CharField(max_length=150, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Admin Account")
        verbose_name_plural = _("Admin Accounts")
        ordering = ['username']

    def __str__(self):
        return self.username
