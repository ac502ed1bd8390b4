"""
Heroes Services - Hero administration, directory lookups and reviews.

Views call into these functions; they raise api.exceptions errors and
never return HTTP responses themselves.
"""

import logging
from typing import Any, Dict, Optional

from django.conf import settings
from django.db import IntegrityError, transaction

from api.exceptions import ConflictError, NotFoundError
from core.domain import frontend_url, onboarding_url
from core.lookups import get_or_not_found, is_uuid
from notifications.catalog import Theme
from notifications.dispatcher import NotificationDispatcher, get_dispatcher

from .models import Hero, Review
from .reputation import credit_top_rating
from .slugs import slugify_alias

logger = logging.getLogger(__name__)

PROFILE_FIELDS = (
    'email', 'phone', 'category', 'hourly_rate', 'description',
    'avatar_url', 'video_url', 'action_areas',
)


# =============================================================================
# LOOKUPS
# =============================================================================

def directory_queryset():
    return Hero.objects.prefetch_related('reviews')


def get_hero(hero_id) -> Hero:
    return get_or_not_found(directory_queryset(), hero_id, 'Hero')


def find_hero_by_slug(value: str) -> Hero:
    """Slug lookup, falling back to an id lookup for UUID-shaped values."""
    hero = directory_queryset().filter(slug=value).first()
    if hero is None and is_uuid(value):
        hero = directory_queryset().filter(pk=value).first()
    if hero is None:
        raise NotFoundError(resource_type='Hero', resource_id=value)
    return hero


def ensure_identity_available(
    *,
    username: Optional[str] = None,
    email: Optional[str] = None,
    alias: Optional[str] = None,
    exclude_pk=None,
) -> None:
    """
    Raise ConflictError if another hero already holds one of the given
    identity values. The alias is checked both verbatim and by slug.
    """
    others = Hero.objects.all()
    if exclude_pk is not None:
        others = others.exclude(pk=exclude_pk)

    if username and others.filter(username=username).exists():
        raise ConflictError(field_name='username')

    if email and others.filter(email=email).exists():
        raise ConflictError(field_name='email')

    if alias:
        if others.filter(alias=alias).exists():
            raise ConflictError(field_name='alias')
        slug = slugify_alias(alias)
        if slug and others.filter(slug=slug).exists():
            raise ConflictError(field_name='alias', detail='The alias is too close to an existing hero name.')


def _save_identity(hero: Hero, **save_kwargs) -> None:
    """Save a hero, reporting a lost uniqueness race as ConflictError."""
    try:
        with transaction.atomic():
            hero.save(**save_kwargs)
    except IntegrityError as e:
        logger.warning(f"Unique constraint hit while saving hero '{hero.username}': {e}")
        ensure_identity_available(
            username=hero.username,
            email=hero.email,
            alias=hero.alias,
            exclude_pk=None if save_kwargs.get('force_insert') else hero.pk,
        )
        raise ConflictError()


# =============================================================================
# ADMINISTRATION
# =============================================================================

def create_hero(data: Dict[str, Any], dispatcher: NotificationDispatcher = None) -> Hero:
    """
    Register a new hero and send the welcome and onboarding emails.

    Args:
        data: validated HeroCreateSerializer data
        dispatcher: notification dispatcher (defaults to the process-wide one)

    Raises:
        ConflictError: username, email or alias already taken
    """
    username = data['username']
    alias = data['alias']
    email = data.get('email') or ''

    ensure_identity_available(username=username, email=email, alias=alias)

    password = data.get('password') or settings.SUPERFIX['HERO_DEFAULT_PASSWORD']
    trust_score = data.get('trust_score')

    hero = Hero(
        username=username,
        trust_score=settings.SUPERFIX['DEFAULT_TRUST_SCORE'] if trust_score is None else trust_score,
        missions_completed=0,
    )
    for name in PROFILE_FIELDS:
        if name in data and data[name] is not None:
            setattr(hero, name, data[name])
    hero.email = email
    hero.set_alias(alias)
    hero.set_password(password)

    _save_identity(hero, force_insert=True)
    logger.info(f"Hero '{hero.username}' created as '{hero.alias}' ({hero.pk})")

    if hero.email:
        dispatcher = dispatcher or get_dispatcher()
        portal = frontend_url('/portal')
        dispatcher.dispatch(
            Theme.WELCOME,
            hero.email,
            context={'alias': hero.alias},
            fields=[('Username', hero.username), ('Password', password), ('Portal', portal)],
            cta_url=portal,
        )
        video_url = settings.SUPERFIX['ONBOARDING_VIDEO_URL']
        dispatcher.dispatch(
            Theme.ONBOARDING,
            hero.email,
            context={'alias': hero.alias},
            fields=[('Step 1: walkthrough video', video_url)] if video_url else [],
            cta_url=onboarding_url(hero),
        )

    return hero


def update_hero(hero_id, data: Dict[str, Any]) -> Hero:
    """
    Administrator direct edit, bypassing moderation.

    A new alias re-derives the slug; a new password is hashed.
    """
    hero = get_or_not_found(Hero.objects.all(), hero_id, 'Hero')

    alias = data.get('alias')
    ensure_identity_available(
        username=data.get('username'),
        email=data.get('email'),
        alias=alias if alias and alias != hero.alias else None,
        exclude_pk=hero.pk,
    )

    if data.get('username'):
        hero.username = data['username']
    if alias:
        hero.set_alias(alias)
    if data.get('password'):
        hero.set_password(data['password'])
    for name in PROFILE_FIELDS + ('trust_score', 'missions_completed'):
        if name in data:
            setattr(hero, name, data[name])

    _save_identity(hero)
    logger.info(f"Hero {hero.pk} edited by an administrator")
    return hero


def delete_hero(hero_id) -> None:
    """Delete a hero with its missions, reviews and pending changes."""
    hero = get_or_not_found(Hero.objects.all(), hero_id, 'Hero')
    hero.delete()
    logger.info(f"Hero {hero_id} deleted")


# =============================================================================
# REVIEWS
# =============================================================================

def submit_review(hero_id, client_name: str, rating: int, comment: str = '') -> Review:
    """
    Store a review; a maximal rating also credits the hero's trust score.
    """
    hero = get_or_not_found(Hero.objects.all(), hero_id, 'Hero')

    with transaction.atomic():
        review = Review.objects.create(
            hero=hero,
            client_name=client_name,
            rating=rating,
            comment=comment or '',
        )
        if rating == settings.SUPERFIX['MAX_RATING']:
            credit_top_rating(hero.pk)

    logger.info(f"Review {review.pk} ({rating}/5) stored for hero {hero.pk}")
    return review
