"""
Mission lifecycle: the transition table and the side effects of each status.

PENDING -> ACCEPTED | REJECTED, ACCEPTED -> IN_PROGRESS -> COMPLETED.

Status writes are not blocked when they leave the table; callers log them.
The effects of a write depend only on the status written, never on the
status it replaces.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

from notifications.catalog import Theme

from .models import MissionStatus

TRANSITIONS = MappingProxyType({
    MissionStatus.PENDING: frozenset({MissionStatus.ACCEPTED, MissionStatus.REJECTED}),
    MissionStatus.ACCEPTED: frozenset({MissionStatus.IN_PROGRESS}),
    MissionStatus.REJECTED: frozenset(),
    MissionStatus.IN_PROGRESS: frozenset({MissionStatus.COMPLETED}),
    MissionStatus.COMPLETED: frozenset(),
})


@dataclass(frozen=True)
class StatusEffect:
    photo_field: Optional[str] = None
    credits_completion: bool = False
    theme: Optional[str] = None


NO_EFFECT = StatusEffect()

STATUS_EFFECTS = MappingProxyType({
    MissionStatus.ACCEPTED: StatusEffect(theme=Theme.ACCEPTED),
    MissionStatus.REJECTED: StatusEffect(theme=Theme.UNAVAILABLE),
    MissionStatus.IN_PROGRESS: StatusEffect(photo_field='photo_before'),
    MissionStatus.COMPLETED: StatusEffect(
        photo_field='photo_after',
        credits_completion=True,
        theme=Theme.COMPLETED,
    ),
})


def is_on_table(current: str, requested: str) -> bool:
    return requested in TRANSITIONS.get(current, frozenset())


def effect_for(status: str) -> StatusEffect:
    return STATUS_EFFECTS.get(status, NO_EFFECT)
