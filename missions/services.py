"""
Missions Services - Request intake and status transitions.

Writes happen first and are committed on their own; notifications follow
and never undo a write.
"""

import logging
from typing import Optional

from django.db import transaction

from accounts.authentication import Principal
from core.domain import frontend_url, hero_public_url
from core.lookups import get_or_not_found
from heroes.models import Hero
from heroes.reputation import credit_completed_mission
from notifications.catalog import Theme
from notifications.dispatcher import NotificationDispatcher, get_dispatcher

from .lifecycle import effect_for, is_on_table
from .models import MissionStatus, ServiceRequest

logger = logging.getLogger(__name__)


def submit_request(
    hero_id,
    client_name: str,
    client_phone: str,
    description: str,
    client_email: str = '',
    dispatcher: NotificationDispatcher = None,
) -> ServiceRequest:
    """
    Create a PENDING mission for a hero and alert both parties.

    Raises:
        NotFoundError: the hero does not exist
    """
    hero = get_or_not_found(Hero.objects.all(), hero_id, 'Hero')

    mission = ServiceRequest.objects.create(
        hero=hero,
        client_name=client_name,
        client_phone=client_phone,
        client_email=client_email or '',
        description=description,
        status=MissionStatus.PENDING,
    )
    logger.info(f"Mission {mission.pk} submitted for hero {hero.pk}")

    dispatcher = dispatcher or get_dispatcher()
    dispatcher.dispatch(
        Theme.ALERT,
        hero.email,
        fields=[('Client', client_name), ('Phone', client_phone), ('Problem', description)],
        cta_url=frontend_url('/portal'),
    )
    dispatcher.dispatch(
        Theme.WAITING,
        mission.client_email,
        fields=[('Hero', hero.alias), ('Status', 'Awaiting confirmation')],
    )

    return mission


def missions_for_hero(hero_id):
    return ServiceRequest.objects.filter(hero_id=hero_id).order_by('-created_at')


def update_mission_status(
    mission_id,
    principal: Principal,
    status: str,
    photo: Optional[str] = None,
    dispatcher: NotificationDispatcher = None,
) -> ServiceRequest:
    """
    Write a new mission status on behalf of a hero.

    The status is stored as given. IN_PROGRESS and COMPLETED also store a
    supplied photo in the before/after slot; without one the slot is left
    as it was. COMPLETED credits the calling hero.
    The client is then notified for ACCEPTED, REJECTED and COMPLETED.

    Raises:
        NotFoundError: the mission does not exist
    """
    effect = effect_for(status)

    with transaction.atomic():
        mission = get_or_not_found(
            ServiceRequest.objects.select_related('hero').select_for_update(),
            mission_id,
            'Mission',
        )
        previous = mission.status

        if not is_on_table(previous, status):
            logger.warning(
                f"Mission {mission.pk}: off-table transition {previous} -> {status} "
                f"by hero {principal.subject_id}"
            )
        if str(mission.hero_id) != principal.subject_id:
            logger.warning(
                f"Mission {mission.pk} belongs to hero {mission.hero_id}, "
                f"updated by hero {principal.subject_id}"
            )

        mission.status = status
        update_fields = ['status']
        if effect.photo_field and photo is not None:
            setattr(mission, effect.photo_field, photo)
            update_fields.append(effect.photo_field)
        mission.save(update_fields=update_fields)

        if effect.credits_completion:
            credit_completed_mission(principal.subject_id)

    logger.info(f"Mission {mission.pk}: {previous} -> {status}")

    if effect.theme:
        _notify_client(mission, effect.theme, dispatcher or get_dispatcher())

    return mission


def _notify_client(mission: ServiceRequest, theme: str, dispatcher: NotificationDispatcher) -> None:
    hero = mission.hero

    if theme == Theme.ACCEPTED:
        fields = [('Assigned hero', hero.alias), ('Status', 'On the way')]
        cta_url = ''
    elif theme == Theme.UNAVAILABLE:
        fields = []
        cta_url = frontend_url('/heroes')
    else:
        fields = [('Result', 'Success'), ('Hero', hero.alias)]
        cta_url = hero_public_url(hero)

    dispatcher.dispatch(theme, mission.client_email, fields=fields, cta_url=cta_url)
