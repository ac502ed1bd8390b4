"""
Moderation App Configuration.
"""

from django.apps import AppConfig


class ModerationConfig(AppConfig):
    """Administrator review of hero profile changes."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'moderation'
    verbose_name = 'Profile Moderation'
