"""
Core Models - Base classes for all apps

This module provides reusable abstract model classes:
- TimestampedModel: Adds created_at/updated_at timestamps
- CredentialModel: Adds a hashed password with set/check helpers
"""

from django.contrib.auth.hashers import check_password, make_password
from django.db import models


class TimestampedModel(models.Model):
    """
    Abstract base class that adds timestamp fields.

    Provides:
    - created_at: Automatically set on creation
    - updated_at: Automatically updated on save
    """

    created_at = models.DateTimeField(
        auto_now_add=True,
        db_index=True,
        help_text='Timestamp when record was created'
    )

    updated_at = models.DateTimeField(
        auto_now=True,
        help_text='Timestamp when record was last updated'
    )

    class Meta:
        abstract = True
        get_latest_by = 'created_at'
        ordering = ['-created_at']


class CredentialModel(models.Model):
    """
    Abstract base class for accounts that log in with a username and password.

    Stores hashed passwords only (never plaintext), using Django's configured
    PASSWORD_HASHERS.
    """

    password = models.CharField(
        max_length=255,
        help_text='Hashed password (NEVER plaintext)'
    )

    class Meta:
        abstract = True

    def set_password(self, raw_password: str) -> None:
        self.password = make_password(raw_password)

    def check_password(self, raw_password: str) -> bool:
        if not raw_password or not self.password:
            return False
        return check_password(raw_password, self.password)
