from datetime import date, datetime

import pytest

from nexus_unlocks.cards.catalog import NEXUS_TRADING_CARDS
from nexus_unlocks.models.progress import ProgressState, Transaction
from nexus_unlocks.models.unlockable import Catalog, UnlockKind


def test_transaction_from_dict_keeps_time_when_present():
    dated = Transaction.from_dict(
        {'id': 1, 'amount': '10.5', 'occurred_at': '2024-05-01', 'kind': 'income'}
    )
    timed = Transaction.from_dict(
        {'id': 2, 'amount': 3, 'occurred_at': '2024-05-01T04:04:00'}
    )

    assert dated.id == '1'
    assert dated.amount == 10.5
    assert not dated.has_time
    assert dated.status == 'paid'
    assert timed.has_time
    assert timed.occurred_at.strftime('%H:%M') == '04:04'
    assert timed.day == date(2024, 5, 1)


def test_identity_needs_a_non_blank_name():
    assert not ProgressState().has_identity
    assert not ProgressState(user_name='  ').has_identity
    assert ProgressState(user_name='Ana').has_identity


def test_record_and_discard_grant(achievement_def, card_def):
    state = ProgressState(user_name='Ana')
    ach = achievement_def('ach')
    card = card_def('card')

    state.record_grant(ach, {'n': 1})
    state.record_grant(card)
    assert state.is_granted('ach') and state.is_granted('card')
    assert isinstance(state.achievements['ach'].granted_at, datetime)

    state.discard_grant(ach)
    state.discard_grant(card)
    state.discard_grant(card)
    assert not state.is_granted('ach')
    assert state.collected_cards == []


def test_state_document_survives_a_reload(make_tx, achievement_def):
    state = ProgressState(user_name='Ana', nexus_score=7)
    state.transactions.append(make_tx(21, occurred_at=datetime(2024, 5, 1, 23, 59)))
    state.record_grant(achievement_def('ach'), {'n': 1})

    restored = ProgressState.from_dict(state.to_dict())

    assert restored.nexus_score == 7
    assert restored.transactions[0].occurred_at == datetime(2024, 5, 1, 23, 59)
    assert restored.achievements['ach'].metadata == {'n': 1}
    assert restored.categories == state.categories


def test_catalog_rejects_duplicates_and_keeps_order(card_def):
    with pytest.raises(ValueError):
        Catalog([card_def('a'), card_def('a')])

    catalog = Catalog(NEXUS_TRADING_CARDS)
    assert catalog.position('card_ancient_coins') == 0
    assert catalog.position('card_ledger') == 1
    assert all(d.kind is UnlockKind.CARD for d in catalog.cards())
    assert catalog.achievements() == []
