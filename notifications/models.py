"""
Notification Models - Delivery audit trail.
"""

from django.db import models

from .catalog import Theme


class DeliveryLog(models.Model):
    """
    One row per email delivery attempt, successful or not.
    """

    class Status(models.TextChoices):
        SENT = 'sent', 'Sent'
        FAILED = 'failed', 'Failed'

    theme = models.CharField(max_length=32, choices=Theme.choices, db_index=True)
    recipient = models.CharField(max_length=254)
    subject = models.CharField(max_length=255, blank=True)
    status = models.CharField(max_length=10, choices=Status.choices)
    error_type = models.CharField(max_length=100, blank=True)
    error_message = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        ordering = ['-created_at']
        verbose_name = 'Delivery Log'
        verbose_name_plural = 'Delivery Logs'

    def __str__(self):
        return f"{self.theme} -> {self.recipient} ({self.status})"
