"""
Mission lifecycle table tests.
"""

import pytest

from missions.lifecycle import STATUS_EFFECTS, TRANSITIONS, effect_for, is_on_table
from missions.models import MissionStatus


@pytest.mark.parametrize('current, requested', [
    ('PENDING', 'ACCEPTED'),
    ('PENDING', 'REJECTED'),
    ('ACCEPTED', 'IN_PROGRESS'),
    ('IN_PROGRESS', 'COMPLETED'),
])
def test_forward_transitions_are_on_table(current, requested):
    assert is_on_table(current, requested)


@pytest.mark.parametrize('current, requested', [
    ('PENDING', 'COMPLETED'),
    ('COMPLETED', 'PENDING'),
    ('REJECTED', 'ACCEPTED'),
    ('IN_PROGRESS', 'ACCEPTED'),
    ('COMPLETED', 'COMPLETED'),
])
def test_skips_and_reversals_are_off_table(current, requested):
    assert not is_on_table(current, requested)


def test_terminal_states_have_no_exits():
    assert TRANSITIONS[MissionStatus.COMPLETED] == frozenset()
    assert TRANSITIONS[MissionStatus.REJECTED] == frozenset()


def test_effects_are_keyed_by_written_status():
    assert effect_for('ACCEPTED').theme == 'accepted'
    assert effect_for('REJECTED').theme == 'unavailable'
    assert effect_for('IN_PROGRESS').photo_field == 'photo_before'
    assert effect_for('IN_PROGRESS').theme is None
    completed = effect_for('COMPLETED')
    assert completed.photo_field == 'photo_after'
    assert completed.credits_completion is True
    assert completed.theme == 'completed'


def test_pending_has_no_effect():
    effect = effect_for('PENDING')
    assert effect.photo_field is None
    assert effect.theme is None
    assert not effect.credits_completion


def test_effect_table_is_read_only():
    with pytest.raises(TypeError):
        STATUS_EFFECTS['PENDING'] = effect_for('COMPLETED')
