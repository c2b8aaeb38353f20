from nexus_unlocks.achievements.events import SystemSignal
from nexus_unlocks.achievements.registry import RuleRegistry
from nexus_unlocks.cards.eligibility import EligibilityCache
from nexus_unlocks.cards.selector import CardDropSelector
from nexus_unlocks.cards.triggers import ALWAYS, TriggerFilter
from nexus_unlocks.models.unlockable import Catalog, Rarity


def test_cache_splits_novel_from_known():
    cache = EligibilityCache()
    assert not cache.seeded

    cache.seed(['a'])
    assert cache.seeded
    assert cache.novel(['a', 'b']) == {'b'}

    cache.absorb(['b'])
    assert cache.novel(['a', 'b']) == set()

    cache.discard('a')
    cache.discard('missing')
    assert 'a' not in cache
    assert sorted(cache) == ['b']


def test_warm_up_keeps_backlog_from_looking_new(boundary_for, card_def, named_state):
    rules = RuleRegistry()
    specs = [('c1', Rarity.COMMON), ('c2', Rarity.EPIC), ('c3', Rarity.RARE)]
    for card_id, _ in specs:
        rules.predicate(card_id)(lambda event, state, history: True)
    catalog = Catalog([card_def(card_id, rarity) for card_id, rarity in specs])
    selector = CardDropSelector(
        boundary_for(catalog),
        catalog,
        rules,
        TriggerFilter({card_id: [ALWAYS] for card_id, _ in specs}),
        welcome_card_id=None,
    )

    backlog = selector.warm_up(named_state)

    assert backlog == {'c1', 'c2', 'c3'}
    assert named_state.collected_cards == []
    assert selector.cache.novel(backlog) == set()
    # Nothing new: the drain follows rarity
    assert selector.select_grant(SystemSignal(), named_state, []) == 'c2'
    assert selector.select_grant(SystemSignal(), named_state, []) == 'c3'
    assert selector.select_grant(SystemSignal(), named_state, []) == 'c1'


def test_warm_up_skips_granted_cards(boundary_for, card_def, named_state):
    rules = RuleRegistry()
    rules.predicate('owned')(lambda event, state, history: True)
    rules.predicate('open')(lambda event, state, history: True)
    catalog = Catalog([card_def('owned'), card_def('open')])
    named_state.collected_cards.append('owned')

    selector = CardDropSelector(
        boundary_for(catalog), catalog, rules, TriggerFilter({})
    )

    assert selector.warm_up(named_state) == {'open'}
