"""
Heroes Models - The hero directory and client reviews.

Hero is the long-lived aggregate: missions, reviews and pending profile
changes reference it and are removed with it.
"""

import uuid

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.db.models import Q

from core.models import CredentialModel, TimestampedModel

from .slugs import slugify_alias


def default_trust_score():
    return settings.SUPERFIX['DEFAULT_TRUST_SCORE']


class Hero(CredentialModel, TimestampedModel):
    """
    A registered service provider.

    The public identity is the alias and its derived slug; the username and
    password are only used to log into the hero portal.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    username = models.CharField(max_length=150, unique=True)
    alias = models.CharField(max_length=150, unique=True)
    slug = models.SlugField(max_length=160, unique=True, null=True, blank=True)

    email = models.EmailField(blank=True, default='')
    phone = models.CharField(max_length=40, blank=True, default='')
    category = models.CharField(max_length=100, blank=True, default='')
    hourly_rate = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    description = models.TextField(blank=True, default='')
    avatar_url = models.TextField(blank=True, default='')
    video_url = models.TextField(blank=True, default='')
    action_areas = models.JSONField(default=list, blank=True)

    trust_score = models.PositiveIntegerField(default=default_trust_score)
    missions_completed = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ['-created_at']
        verbose_name = 'Hero'
        verbose_name_plural = 'Heroes'
        constraints = [
            models.UniqueConstraint(
                fields=['email'],
                condition=~Q(email=''),
                name='heroes_hero_unique_email',
            ),
        ]

    def __str__(self):
        return self.alias

    def set_alias(self, alias: str) -> None:
        """Set the alias and re-derive the slug from it."""
        self.alias = alias
        self.slug = slugify_alias(alias) or None


class Review(models.Model):
    """A client's rating of a hero. Never edited once written."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    hero = models.ForeignKey(Hero, on_delete=models.CASCADE, related_name='reviews')
    client_name = models.CharField(max_length=150)
    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(5)],
    )
    comment = models.TextField(blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.client_name} -> {self.hero_id} ({self.rating})"
