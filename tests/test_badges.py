from datetime import datetime

from nexus_unlocks.achievements.badges import (
    NEXUS_BADGES,
    is_badge_unlocked,
    total_points,
    unlocked_badges,
)
from nexus_unlocks.models.progress import EmergencyFund, GrantRecord, ProgressState


def _grant(state, *ids):
    for ach_id in ids:
        state.achievements[ach_id] = GrantRecord(granted_at=datetime(2024, 1, 1))


def test_newbie_is_always_unlocked():
    state = ProgressState()

    assert [b.id for b in unlocked_badges(state)] == ['badge_newbie']
    assert not is_badge_unlocked('badge_unknown', state)


def test_points_come_from_the_catalog():
    state = ProgressState()
    _grant(state, 'first_steps', 'identity_set', 'not_a_real_id')

    assert total_points(state) == 15


def test_level_badges_follow_points():
    state = ProgressState()
    # 137 + 900 points reach level 5 but not level 10
    _grant(state, 'rng_1337', 'rng_9000')

    assert is_badge_unlocked('badge_saver', state)
    assert not is_badge_unlocked('badge_investor', state)


def test_collector_and_guardian():
    state = ProgressState(collected_cards=[f'card_{i}' for i in range(10)])
    state.emergency_fund = EmergencyFund(current_balance=5000, target_amount=5000)

    assert is_badge_unlocked('badge_collector', state)
    assert is_badge_unlocked('badge_guardian', state)

    state.emergency_fund = EmergencyFund(current_balance=0, target_amount=0)
    assert not is_badge_unlocked('badge_guardian', state)


def test_badge_catalog_ids_are_unique():
    assert len({b.id for b in NEXUS_BADGES}) == len(NEXUS_BADGES)
