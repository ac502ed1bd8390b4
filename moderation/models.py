"""
Moderation Models - Pending hero profile changes.
"""

import uuid

from django.db import models

from heroes.models import Hero

PROPOSABLE_FIELDS = (
    'alias', 'avatar_url', 'video_url', 'description', 'hourly_rate', 'action_areas',
)


class ProfileChangeRequest(models.Model):
    """
    A proposed edit of a hero's public profile.

    Pending for as long as the row exists: approval merges the proposed
    fields into the hero and deletes the row, rejection just deletes it.
    Null fields were not proposed.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    hero = models.ForeignKey(Hero, on_delete=models.CASCADE, related_name='change_requests')

    alias = models.CharField(max_length=150, null=True, blank=True)
    avatar_url = models.TextField(null=True, blank=True)
    video_url = models.TextField(null=True, blank=True)
    description = models.TextField(null=True, blank=True)
    hourly_rate = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    action_areas = models.JSONField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        ordering = ['-created_at']
        verbose_name = 'Profile Change Request'
        verbose_name_plural = 'Profile Change Requests'

    def __str__(self):
        return f"Change request {self.pk} for hero {self.hero_id}"

    def proposed_fields(self) -> dict:
        """The proposed values that are present and non-empty."""
        return {
            name: getattr(self, name)
            for name in PROPOSABLE_FIELDS
            if getattr(self, name) not in (None, '', [])
        }
