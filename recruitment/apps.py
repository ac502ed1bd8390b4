"""
Recruitment App Configuration.
"""

from django.apps import AppConfig


class RecruitmentConfig(AppConfig):
    """Public hero applications."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'recruitment'
    verbose_name = 'Recruitment'
