from datetime import date

import pytest
from psycopg.types.json import Json

import nexus_unlocks.services.progress_store as store_module
from nexus_unlocks.models.progress import ProgressState
from nexus_unlocks.services.progress_store import ProgressStore


@pytest.fixture()
def db(patch_db):
    return patch_db(store_module)


def test_load_without_row_starts_fresh(db):
    state = ProgressStore('u1').load()

    assert state == ProgressState()
    assert db.last_params == ('u1',)


def test_load_restores_stored_document(db):
    db.fetchone_results.append(
        {
            'state': {
                'user_name': 'Ana',
                'onboarding_complete': True,
                'transactions': [
                    {
                        'id': 't1',
                        'description': 'Mercado',
                        'amount': 42,
                        'occurred_at': '2024-03-10',
                        'category': 'Alimentação',
                        'kind': 'expense',
                    }
                ],
                'achievements': {
                    'first_steps': {
                        'granted_at': '2024-03-10T12:00:00',
                        'metadata': {'x': 1},
                    }
                },
                'collected_cards': ['card_ledger'],
            }
        }
    )

    state = ProgressStore('u1').load()

    assert state.user_name == 'Ana'
    assert state.transactions[0].amount == 42.0
    assert state.transactions[0].day == date(2024, 3, 10)
    assert not state.transactions[0].has_time
    assert state.is_granted('first_steps')
    assert state.is_granted('card_ledger')
    assert state.achievements['first_steps'].metadata == {'x': 1}


def test_save_upserts_the_whole_document(db, named_state):
    named_state.collected_cards.append('card_ledger')

    ProgressStore('u1').save(named_state)

    query, params = db.executed[0]
    assert 'ON CONFLICT (user_id)' in query
    assert params[0] == 'u1'
    assert isinstance(params[1], Json)
    assert params[1].obj['collected_cards'] == ['card_ledger']
    assert params[1].obj['user_name'] == 'Ana'
