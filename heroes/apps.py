"""
Heroes App Configuration.
"""

from django.apps import AppConfig


class HeroesConfig(AppConfig):
    """Hero directory, reviews and reputation ledger."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'heroes'
    verbose_name = 'Heroes'
