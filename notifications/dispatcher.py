"""
Notification Dispatcher - Fire-and-forget themed email notifications.

The dispatcher composes an OutboundMessage from the catalog and hands its
payload to a delivery callable (by default the Celery delivery task).
A failed delivery is logged and reported in the DispatchResult; it never
propagates to the caller, so the write that triggered it stands.

Usage:
    from notifications.dispatcher import get_dispatcher
    from notifications.catalog import Theme

    get_dispatcher().dispatch(
        Theme.ACCEPTED,
        recipient='client@example.com',
        fields=[('Hero', 'Captain Fix')],
    )
"""

import logging
import random
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Sequence, Tuple

from .catalog import DEFAULT_FLAVOR_TEXT, DEFAULT_TEMPLATES, MessageTemplate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutboundMessage:
    """A fully composed message, ready for delivery."""
    theme: str
    recipient: str
    subject: str
    title: str
    message: str
    fields: Tuple[Tuple[str, str], ...] = ()
    cta_url: str = ''
    cta_text: str = ''

    def as_payload(self) -> Dict[str, Any]:
        """JSON-serializable form handed to the delivery task."""
        return {
            'theme': self.theme,
            'recipient': self.recipient,
            'subject': self.subject,
            'title': self.title,
            'message': self.message,
            'fields': [[label, value] for label, value in self.fields],
            'cta_url': self.cta_url,
            'cta_text': self.cta_text,
        }


@dataclass
class DispatchResult:
    """Result of a dispatch attempt."""
    success: bool
    theme: str
    recipient: Optional[str] = None
    skipped: bool = False
    error_message: Optional[str] = None
    message: Optional[OutboundMessage] = field(default=None, repr=False)


def _enqueue_delivery(payload: Dict[str, Any]) -> None:
    from .tasks import deliver_notification
    deliver_notification.delay(payload)


class NotificationDispatcher:
    """
    Composes and delivers themed notifications.

    Args:
        templates: theme -> MessageTemplate mapping (frozen on construction)
        flavor_text: theme -> sequence of interchangeable body lines
        deliver: callable receiving the message payload dict
        rng: random.Random used to pick flavor text
    """

    def __init__(
        self,
        templates: Optional[Mapping[str, MessageTemplate]] = None,
        flavor_text: Optional[Mapping[str, Sequence[str]]] = None,
        deliver: Optional[Callable[[Dict[str, Any]], None]] = None,
        rng: Optional[random.Random] = None,
    ):
        self.templates = MappingProxyType(dict(
            DEFAULT_TEMPLATES if templates is None else templates
        ))
        self.flavor_text = MappingProxyType({
            theme: tuple(lines)
            for theme, lines in (DEFAULT_FLAVOR_TEXT if flavor_text is None else flavor_text).items()
        })
        self._deliver = deliver or _enqueue_delivery
        self._rng = rng or random.Random()

    def pick_flavor(self, theme: str) -> str:
        pool = self.flavor_text.get(theme)
        if not pool:
            raise KeyError(f"No flavor text for theme '{theme}'")
        return self._rng.choice(pool)

    def compose(
        self,
        theme: str,
        recipient: str,
        context: Optional[Dict[str, Any]] = None,
        fields: Iterable[Tuple[str, Any]] = (),
        cta_url: str = '',
    ) -> OutboundMessage:
        template = self.templates[theme]
        if template.body:
            message = template.body.format(**(context or {}))
        else:
            message = self.pick_flavor(theme)

        return OutboundMessage(
            theme=str(theme),
            recipient=recipient,
            subject=template.subject,
            title=template.title,
            message=message,
            fields=tuple((str(label), '' if value is None else str(value)) for label, value in fields),
            cta_url=cta_url or '',
            cta_text=template.cta_text if cta_url else '',
        )

    def dispatch(
        self,
        theme: str,
        recipient: Optional[str],
        context: Optional[Dict[str, Any]] = None,
        fields: Iterable[Tuple[str, Any]] = (),
        cta_url: str = '',
    ) -> DispatchResult:
        """
        Compose and deliver one notification.

        An empty recipient is skipped silently. Any failure while composing
        or delivering is logged and returned as an unsuccessful result.
        """
        theme = str(theme)

        if not recipient:
            logger.debug(f"Skipping '{theme}' notification: no recipient")
            return DispatchResult(success=False, theme=theme, skipped=True)

        try:
            message = self.compose(theme, recipient, context=context, fields=fields, cta_url=cta_url)
            self._deliver(message.as_payload())
        except Exception as e:
            logger.error(f"Notification '{theme}' to {recipient} failed: {e}")
            return DispatchResult(
                success=False,
                theme=theme,
                recipient=recipient,
                error_message=str(e),
            )

        logger.info(f"Notification '{theme}' queued for {recipient}")
        return DispatchResult(success=True, theme=theme, recipient=recipient, message=message)


@lru_cache(maxsize=1)
def get_dispatcher() -> NotificationDispatcher:
    """Process-wide dispatcher with the default catalog and Celery delivery."""
    return NotificationDispatcher()
