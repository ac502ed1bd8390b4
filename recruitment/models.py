"""
Recruitment Models - Applications from would-be heroes.
"""

import uuid

from django.db import models


class HeroApplication(models.Model):
    """An application submitted through the public recruitment form."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=150)
    email = models.EmailField()
    phone = models.CharField(max_length=40)
    category = models.CharField(max_length=100)
    message = models.TextField(blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        ordering = ['-created_at']
        verbose_name = 'Hero Application'
        verbose_name_plural = 'Hero Applications'

    def __str__(self):
        return f"{self.name} <{self.email}> ({self.category})"
