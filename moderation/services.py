"""
Moderation Services - Propose, approve and reject hero profile changes.

Proposals never touch the hero. Approval and rejection lock the change
request row, so two administrators resolving the same request cannot both
succeed; the second one gets NotFoundError.
"""

import logging
from typing import Any, Dict

from django.conf import settings
from django.db import transaction

from api.exceptions import ConflictError
from core.domain import frontend_url, hero_public_url
from core.lookups import get_or_not_found
from heroes.models import Hero
from heroes.services import ensure_identity_available
from notifications.catalog import Theme
from notifications.dispatcher import NotificationDispatcher, get_dispatcher

from .models import PROPOSABLE_FIELDS, ProfileChangeRequest

logger = logging.getLogger(__name__)


def _is_present(value) -> bool:
    return value not in (None, '', [])


def propose_update(
    hero_id,
    fields: Dict[str, Any],
    is_public_submission: bool,
    dispatcher: NotificationDispatcher = None,
) -> ProfileChangeRequest:
    """
    Queue a profile change for administrator approval.

    Only the public path may propose an alias; it is rejected up front when
    another hero already holds exactly that alias.

    Raises:
        NotFoundError: the hero does not exist
        ConflictError: the proposed alias belongs to another hero
    """
    hero = get_or_not_found(Hero.objects.all(), hero_id, 'Hero')

    proposed = {
        name: fields[name]
        for name in PROPOSABLE_FIELDS
        if _is_present(fields.get(name))
    }
    if not is_public_submission:
        proposed.pop('alias', None)

    alias = proposed.get('alias')
    if alias and Hero.objects.filter(alias=alias).exclude(pk=hero.pk).exists():
        logger.info(f"Proposal for hero {hero.pk} rejected: alias '{alias}' is taken")
        raise ConflictError(field_name='alias', detail='This hero name is already taken.')

    change = ProfileChangeRequest.objects.create(hero=hero, **proposed)
    logger.info(
        f"Change request {change.pk} queued for hero {hero.pk} "
        f"({'public' if is_public_submission else 'portal'}): {sorted(proposed)}"
    )

    (dispatcher or get_dispatcher()).dispatch(
        Theme.PROFILE_UPDATE,
        settings.SUPERFIX['ADMIN_NOTIFICATION_EMAIL'],
        context={'alias': hero.alias},
        fields=[
            ('Proposed alias', alias or 'Not specified'),
            ('Current alias', hero.alias),
            ('Hero page', hero_public_url(hero) if hero.slug else 'No link generated yet'),
        ],
        cta_url=frontend_url('/admin'),
    )

    return change


def list_pending_updates():
    return ProfileChangeRequest.objects.select_related('hero').order_by('-created_at')


def approve_update(change_request_id) -> Hero:
    """
    Merge a change request into its hero and delete it.

    Raises:
        NotFoundError: the change request no longer exists
        ConflictError: the alias was taken since the proposal was made
    """
    with transaction.atomic():
        change = get_or_not_found(
            ProfileChangeRequest.objects.select_for_update(),
            change_request_id,
            'Change request',
        )
        hero = Hero.objects.select_for_update().get(pk=change.hero_id)
        changes = change.proposed_fields()

        alias = changes.pop('alias', None)
        if alias:
            ensure_identity_available(alias=alias, exclude_pk=hero.pk)
            hero.set_alias(alias)

        for name, value in changes.items():
            setattr(hero, name, value)

        hero.save()
        change.delete()

    logger.info(f"Change request {change_request_id} approved for hero {hero.pk}")
    return hero


def reject_update(change_request_id) -> None:
    """
    Discard a change request. The hero is not notified.

    Raises:
        NotFoundError: the change request no longer exists
    """
    with transaction.atomic():
        change = get_or_not_found(
            ProfileChangeRequest.objects.select_for_update(),
            change_request_id,
            'Change request',
        )
        change.delete()

    logger.info(f"Change request {change_request_id} rejected")
