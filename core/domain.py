"""
Centralized Frontend URL Configuration

Every link placed in an email or a sitemap points at the single-page frontend,
never at this API. Build those links through this module instead of
formatting FRONTEND_URL by hand.

Usage:
    from core.domain import frontend_url, hero_public_url

    frontend_url('/portal')        # https://superfix.ro/portal
    hero_public_url(hero)          # https://superfix.ro/hero/gigel-vip
"""

import logging

from django.conf import settings

logger = logging.getLogger(__name__)


def get_frontend_url() -> str:
    """
    Get the frontend base URL without a trailing slash.

    Setting: FRONTEND_URL (environment variable of the same name)
    """
    return getattr(settings, 'FRONTEND_URL', 'http://localhost:3000').rstrip('/')


def frontend_url(path: str = '') -> str:
    """Build an absolute frontend URL for a path such as '/portal'."""
    if path and not path.startswith('/'):
        path = f'/{path}'
    return f"{get_frontend_url()}{path}"


def hero_public_url(hero) -> str:
    """Public profile URL of a hero, preferring the slug over the id."""
    return frontend_url(f"/hero/{hero.slug or hero.pk}")


def onboarding_url(hero) -> str:
    """Personalised onboarding link; it identifies the hero without a login."""
    return frontend_url(f"/onboarding?id={hero.pk}")
