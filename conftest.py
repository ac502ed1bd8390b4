"""
SuperFix Test Configuration - pytest fixtures and factories

This module provides:
- pytest-django configuration (settings module in pyproject.toml)
- factory_boy factories for every model
- API clients carrying administrator and hero bearer tokens
- A recording notification dispatcher for asserting on dispatches

RUNNING TESTS:
# Run all tests
pytest -v

# Run one app
pytest missions -v

# Run by marker
pytest -m workflow -v
"""

import uuid
from decimal import Decimal

import pytest

import factory
from factory import fuzzy
from factory.django import DjangoModelFactory

from django.contrib.auth.hashers import make_password

HERO_PASSWORD = 'Hero123!'
ADMIN_PASSWORD = 'Admin123!'


# ============================================================================
# ACCOUNT FACTORIES
# ============================================================================

class AdminAccountFactory(DjangoModelFactory):
    """Factory for AdminAccount model."""

    class Meta:
        model = 'accounts.AdminAccount'
        django_get_or_create = ('username',)

    username = factory.Sequence(lambda n: f"admin_{n}")
    password = factory.LazyFunction(lambda: make_password(ADMIN_PASSWORD))


# ============================================================================
# HERO FACTORIES
# ============================================================================

class HeroFactory(DjangoModelFactory):
    """Factory for Hero model."""

    class Meta:
        model = 'heroes.Hero'

    username = factory.LazyAttribute(lambda o: f"hero_{uuid.uuid4().hex[:8]}")
    alias = factory.Sequence(lambda n: f"Captain Fix {n}")
    slug = factory.LazyAttribute(lambda o: _slug(o.alias))
    email = factory.LazyAttribute(lambda o: f"{o.username}@heroes.test")
    phone = factory.Sequence(lambda n: f"07{n:08d}")
    category = fuzzy.FuzzyChoice(['Plumber', 'Electrician', 'Locksmith', 'Carpenter'])
    hourly_rate = Decimal('80.00')
    description = factory.Faker('sentence')
    action_areas = factory.LazyFunction(lambda: ['Sector 1', 'Sector 2'])
    trust_score = 50
    missions_completed = 0
    password = factory.LazyFunction(lambda: make_password(HERO_PASSWORD))


def _slug(alias):
    from heroes.slugs import slugify_alias
    return slugify_alias(alias)


class ReviewFactory(DjangoModelFactory):
    """Factory for Review model."""

    class Meta:
        model = 'heroes.Review'

    hero = factory.SubFactory(HeroFactory)
    client_name = factory.Faker('name')
    rating = 4
    comment = factory.Faker('sentence')


# ============================================================================
# MISSION FACTORIES
# ============================================================================

class ServiceRequestFactory(DjangoModelFactory):
    """Factory for ServiceRequest model."""

    class Meta:
        model = 'missions.ServiceRequest'

    hero = factory.SubFactory(HeroFactory)
    client_name = factory.Faker('name')
    client_phone = factory.Sequence(lambda n: f"07{n:08d}")
    client_email = factory.Sequence(lambda n: f"client{n}@example.com")
    description = factory.Faker('sentence')
    status = 'PENDING'


# ============================================================================
# MODERATION & RECRUITMENT FACTORIES
# ============================================================================

class ProfileChangeRequestFactory(DjangoModelFactory):
    """Factory for ProfileChangeRequest model."""

    class Meta:
        model = 'moderation.ProfileChangeRequest'

    hero = factory.SubFactory(HeroFactory)
    description = factory.Faker('sentence')


class HeroApplicationFactory(DjangoModelFactory):
    """Factory for HeroApplication model."""

    class Meta:
        model = 'recruitment.HeroApplication'

    name = factory.Faker('name')
    email = factory.Sequence(lambda n: f"applicant{n}@example.com")
    phone = factory.Sequence(lambda n: f"07{n:08d}")
    category = 'Plumber'
    message = factory.Faker('sentence')


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def hero_factory(db):
    return HeroFactory


@pytest.fixture
def review_factory(db):
    return ReviewFactory


@pytest.fixture
def mission_factory(db):
    return ServiceRequestFactory


@pytest.fixture
def change_request_factory(db):
    return ProfileChangeRequestFactory


@pytest.fixture
def application_factory(db):
    return HeroApplicationFactory


@pytest.fixture
def hero(db):
    return HeroFactory()


@pytest.fixture
def admin_account(db):
    return AdminAccountFactory(username='admin')


@pytest.fixture
def api_client(db):
    """Provide a DRF API test client."""
    from rest_framework.test import APIClient
    return APIClient()


def _bearer_client(token):
    from rest_framework.test import APIClient
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
    return client


@pytest.fixture
def admin_token(admin_account):
    from accounts.authentication import RoleAccessToken
    return str(RoleAccessToken.for_admin(admin_account))


@pytest.fixture
def hero_token(hero):
    from accounts.authentication import RoleAccessToken
    return str(RoleAccessToken.for_hero(hero))


@pytest.fixture
def admin_client(db, admin_token):
    """API client authenticated as an administrator."""
    return _bearer_client(admin_token)


@pytest.fixture
def hero_client(db, hero_token):
    """API client authenticated as the `hero` fixture."""
    return _bearer_client(hero_token)


@pytest.fixture
def delivered():
    """Payloads handed to the recording dispatcher, in order."""
    return []


@pytest.fixture
def recording_dispatcher(delivered):
    """A dispatcher that records payloads instead of sending email."""
    import random

    from notifications.dispatcher import NotificationDispatcher

    return NotificationDispatcher(deliver=delivered.append, rng=random.Random(7))


@pytest.fixture
def spa_index(tmp_path, settings):
    """A minimal SPA index.html wired into SUPERFIX['SPA_INDEX_PATH']."""
    index = tmp_path / 'index.html'
    index.write_text(
        '<html><head>'
        '<title>__META_TITLE__</title>'
        '<meta property="og:description" content="__META_DESCRIPTION__">'
        '<meta property="og:image" content="__META_IMAGE__">'
        '</head><body><div id="root"></div></body></html>',
        encoding='utf-8',
    )
    settings.SUPERFIX = {**settings.SUPERFIX, 'SPA_INDEX_PATH': str(index)}
    return index
