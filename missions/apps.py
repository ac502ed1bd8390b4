"""
Missions App Configuration.
"""

from django.apps import AppConfig


class MissionsConfig(AppConfig):
    """Service requests and their lifecycle."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'missions'
    verbose_name = 'Missions'
