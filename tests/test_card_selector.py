from datetime import date

import pytest

from nexus_unlocks.achievements.events import (
    CHECK,
    ONBOARDING,
    SystemSignal,
    TransactionEvent,
)
from nexus_unlocks.cards.selector import CardDropSelector
from nexus_unlocks.cards.triggers import ALWAYS, EXPENSE, INCOME, TriggerFilter
from nexus_unlocks.models.unlockable import Catalog, Rarity

EXPENSE_EVENT = TransactionEvent(
    kind='expense', category='Lazer', amount=50.0, occurred_at=date(2024, 5, 1)
)


class Switchboard:
    '''Card rules whose outcome the test flips by id.'''

    def __init__(self, rules):
        self.on: set[str] = set()
        self.calls: list[str] = []
        self.rules = rules

    def add(self, card_id: str, raises: bool = False) -> None:
        @self.rules.predicate(card_id)
        def _rule(event, state, history):
            self.calls.append(card_id)
            if raises:
                raise RuntimeError('boom')
            return card_id in self.on


@pytest.fixture()
def board(rules):
    return Switchboard(rules)


@pytest.fixture()
def build(boundary_for, card_def, board, rules):
    def _build(specs, triggers=None, welcome=None, raising=()):
        catalog = Catalog([card_def(card_id, rarity) for card_id, rarity in specs])
        for card_id, _ in specs:
            board.add(card_id, raises=card_id in raising)
        return CardDropSelector(
            boundary_for(catalog),
            catalog,
            rules,
            TriggerFilter(triggers or {card_id: [ALWAYS] for card_id, _ in specs}),
            welcome_card_id=welcome,
        )

    return _build


def test_grants_at_most_one_card_per_event(build, board, named_state):
    selector = build([('a', Rarity.COMMON), ('b', Rarity.RARE), ('c', Rarity.EPIC)])
    selector.warm_up(named_state)
    board.on = {'a', 'b', 'c'}

    assert selector.select_grant(EXPENSE_EVENT, named_state, []) == 'c'
    assert named_state.collected_cards == ['c']

    # The rest remain candidates on later events
    assert selector.select_grant(EXPENSE_EVENT, named_state, []) == 'b'
    assert selector.select_grant(EXPENSE_EVENT, named_state, []) == 'a'
    assert selector.select_grant(EXPENSE_EVENT, named_state, []) is None


def test_novel_candidate_beats_rarer_backlog(build, board, named_state):
    selector = build([('legend', Rarity.LEGENDARY), ('plain', Rarity.COMMON)])
    board.on = {'legend'}
    assert selector.warm_up(named_state) == {'legend'}

    board.on = {'legend', 'plain'}
    assert selector.select_grant(EXPENSE_EVENT, named_state, []) == 'plain'
    assert selector.select_grant(EXPENSE_EVENT, named_state, []) == 'legend'


def test_rarity_breaks_ties_among_novel_candidates(build, board, named_state):
    selector = build(
        [('common', Rarity.COMMON), ('rare', Rarity.RARE), ('epic', Rarity.EPIC)]
    )
    selector.warm_up(named_state)
    board.on = {'common', 'rare'}

    assert selector.select_grant(EXPENSE_EVENT, named_state, []) == 'rare'


def test_equal_rarity_backlog_follows_catalog_order(build, board, named_state):
    selector = build([('first', Rarity.RARE), ('second', Rarity.RARE)])
    board.on = {'first', 'second'}
    selector.warm_up(named_state)

    assert selector.select_grant(EXPENSE_EVENT, named_state, []) == 'first'
    assert selector.select_grant(EXPENSE_EVENT, named_state, []) == 'second'


def test_welcome_card_overrides_novelty_and_rarity(build, board, named_state):
    selector = build(
        [('legend', Rarity.LEGENDARY), ('welcome', Rarity.COMMON)],
        welcome='welcome',
    )
    board.on = {'welcome'}
    selector.warm_up(named_state)

    board.on = {'welcome', 'legend'}
    onboarding = SystemSignal(ONBOARDING)
    assert selector.select_grant(onboarding, named_state, []) == 'welcome'
    assert selector.select_grant(onboarding, named_state, []) == 'legend'


def test_irrelevant_card_rule_is_never_evaluated(build, board, named_state):
    selector = build(
        [('salary', Rarity.LEGENDARY), ('spend', Rarity.COMMON)],
        triggers={'salary': [INCOME], 'spend': [EXPENSE]},
        raising=('salary',),
    )
    selector.cache.seed([])
    board.on = {'spend'}

    assert selector.select_grant(EXPENSE_EVENT, named_state, []) == 'spend'
    assert 'salary' not in board.calls
    assert selector.last_errors == []


def test_failing_rule_is_isolated(build, board, named_state):
    selector = build(
        [('broken', Rarity.LEGENDARY), ('fine', Rarity.COMMON)], raising=('broken',)
    )
    selector.cache.seed([])
    board.on = {'broken', 'fine'}

    assert selector.select_grant(EXPENSE_EVENT, named_state, []) == 'fine'
    assert [e.unlockable_id for e in selector.last_errors] == ['broken']
    assert isinstance(selector.last_errors[0].cause, RuntimeError)


def test_no_candidates_leaves_cache_alone(build, board, named_state):
    selector = build([('a', Rarity.COMMON)])
    selector.warm_up(named_state)

    assert selector.select_grant(SystemSignal(CHECK), named_state, []) is None
    assert len(selector.cache) == 0
    assert named_state.collected_cards == []
