"""
API App Configuration.
"""

from django.apps import AppConfig


class ApiConfig(AppConfig):
    """JSON API routing and the shared error taxonomy."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'api'
    verbose_name = 'API'
