"""
Recruitment Services - Application intake and rejection.
"""

import logging
from typing import Any, Dict

from django.conf import settings
from django.core.exceptions import ValidationError

from core.domain import frontend_url
from heroes.models import Hero
from notifications.catalog import Theme
from notifications.dispatcher import NotificationDispatcher, get_dispatcher

from .models import HeroApplication

logger = logging.getLogger(__name__)


def submit_application(data: Dict[str, Any], dispatcher: NotificationDispatcher = None) -> HeroApplication:
    """Store an application and notify headquarters and the applicant."""
    application = HeroApplication.objects.create(
        name=data['name'],
        email=data['email'],
        phone=data['phone'],
        category=data['category'],
        message=data.get('message') or '',
    )
    logger.info(f"Application {application.pk} received from {application.email}")

    dispatcher = dispatcher or get_dispatcher()
    dispatcher.dispatch(
        Theme.APPLICATION_ADMIN,
        settings.SUPERFIX['ADMIN_NOTIFICATION_EMAIL'],
        context={'message': application.message or 'No message'},
        fields=[
            ('Candidate', application.name),
            ('Category', application.category),
            ('Phone', application.phone),
            ('Email', application.email),
        ],
        cta_url=frontend_url('/admin'),
    )
    dispatcher.dispatch(
        Theme.APPLICATION_RECEIVED,
        application.email,
        fields=[('Status', 'Pending review'), ('Category', application.category)],
    )

    return application


def list_applications():
    return HeroApplication.objects.order_by('-created_at')


def reject_application(application_id, dispatcher: NotificationDispatcher = None) -> bool:
    """
    Delete an application, telling the applicant unless they already became
    a hero (matched by email). An unknown id is a no-op.

    Returns:
        True if an application was deleted
    """
    try:
        application = HeroApplication.objects.filter(pk=application_id).first()
    except ValidationError:
        application = None

    if application is None:
        logger.info(f"Application {application_id} already gone")
        return False

    if not Hero.objects.filter(email=application.email).exists():
        (dispatcher or get_dispatcher()).dispatch(
            Theme.APPLICATION_REJECTED,
            application.email,
            context={'name': application.name},
            fields=[('Status', 'Rejected'), ('Reason', 'Competitive selection')],
            cta_url=frontend_url('/'),
        )

    application.delete()
    logger.info(f"Application {application_id} rejected")
    return True
