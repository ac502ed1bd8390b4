"""
SEO App Configuration.
"""

from django.apps import AppConfig


class SeoConfig(AppConfig):
    """Sitemap and social-preview pages for the public frontend."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'seo'
    verbose_name = 'SEO'
