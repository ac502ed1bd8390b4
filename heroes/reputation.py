"""
Reputation Ledger - Trust score and completed-mission counters.

Counters only ever grow, and only through the events below. Each credit is
a single UPDATE with F() expressions so concurrent credits compose.
"""

import logging

from django.conf import settings
from django.db.models import F

from .models import Hero

logger = logging.getLogger(__name__)


def _increment(hero_id, **deltas) -> bool:
    updated = Hero.objects.filter(pk=hero_id).update(
        **{name: F(name) + amount for name, amount in deltas.items()}
    )
    if not updated:
        logger.warning(f"Reputation credit {deltas} skipped: hero {hero_id} not found")
    return bool(updated)


def credit_completed_mission(hero_id) -> bool:
    """A completed mission: trust +5, missions completed +1."""
    return _increment(
        hero_id,
        trust_score=settings.SUPERFIX['COMPLETION_TRUST_BONUS'],
        missions_completed=1,
    )


def credit_top_rating(hero_id) -> bool:
    """A maximal review rating: trust +2."""
    return _increment(hero_id, trust_score=settings.SUPERFIX['TOP_RATING_TRUST_BONUS'])
