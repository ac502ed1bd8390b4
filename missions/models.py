"""
Missions Models - Client service requests ("missions").
"""

import uuid

from django.db import models

from heroes.models import Hero


class MissionStatus(models.TextChoices):
    PENDING = 'PENDING', 'Pending'
    ACCEPTED = 'ACCEPTED', 'Accepted'
    REJECTED = 'REJECTED', 'Rejected'
    IN_PROGRESS = 'IN_PROGRESS', 'In progress'
    COMPLETED = 'COMPLETED', 'Completed'


class ServiceRequest(models.Model):
    """
    A client's request for help, addressed to one hero.

    The hero and client details are fixed at creation; only the status and
    the before/after photos change afterwards.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    hero = models.ForeignKey(Hero, on_delete=models.CASCADE, related_name='missions')

    client_name = models.CharField(max_length=150)
    client_phone = models.CharField(max_length=40)
    client_email = models.EmailField(blank=True, default='')
    description = models.TextField()

    status = models.CharField(
        max_length=20,
        choices=MissionStatus.choices,
        default=MissionStatus.PENDING,
        db_index=True,
    )
    photo_before = models.TextField(blank=True, default='')
    photo_after = models.TextField(blank=True, default='')

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        ordering = ['-created_at']
        verbose_name = 'Service Request'
        verbose_name_plural = 'Service Requests'

    def __str__(self):
        return f"{self.client_name} -> {self.hero_id} [{self.status}]"
