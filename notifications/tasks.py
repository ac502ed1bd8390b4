"""
Celery Tasks for the Notification System.

deliver_notification renders a composed message into the dossier email
templates, sends it and records the attempt in DeliveryLog.
"""

import logging
from typing import Any, Dict

from celery import shared_task
from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string

from api.exceptions import NotificationError

logger = logging.getLogger(__name__)


@shared_task(name='notifications.tasks.deliver_notification', queue='notifications')
def deliver_notification(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Send one composed notification by email.

    Args:
        payload: OutboundMessage.as_payload() output

    Returns:
        Dict with the delivery outcome

    Raises:
        NotificationError: when rendering or sending fails
    """
    from .models import DeliveryLog

    theme = payload['theme']
    recipient = payload['recipient']
    subject = payload['subject']

    context = {
        'title': payload.get('title', ''),
        'message': payload.get('message', ''),
        'fields': payload.get('fields') or [],
        'cta_url': payload.get('cta_url', ''),
        'cta_text': payload.get('cta_text', ''),
    }

    try:
        text_content = render_to_string('notifications/email/dossier.txt', context)
        html_content = render_to_string('notifications/email/dossier.html', context)

        email = EmailMultiAlternatives(
            subject=subject,
            body=text_content,
            from_email=settings.DEFAULT_FROM_EMAIL,
            to=[recipient],
            headers={'X-Notification-Theme': theme},
        )
        email.attach_alternative(html_content, 'text/html')
        email.send(fail_silently=False)

    except Exception as e:
        error_msg = str(e)
        logger.error(f"Email '{theme}' to {recipient} failed: {error_msg}")
        DeliveryLog.objects.create(
            theme=theme,
            recipient=recipient,
            subject=subject,
            status=DeliveryLog.Status.FAILED,
            error_type=type(e).__name__,
            error_message=error_msg,
        )
        raise NotificationError(detail=error_msg) from e

    DeliveryLog.objects.create(
        theme=theme,
        recipient=recipient,
        subject=subject,
        status=DeliveryLog.Status.SENT,
    )
    logger.info(f"Email '{theme}' sent to {recipient}")

    return {'success': True, 'theme': theme, 'recipient': recipient}
