'''Which events a card is worth evaluating on.

Each card carries a set of tags:

* ``income`` / ``expense``: only transactions of that kind
* ``category:<name>``: only transactions in one of the named categories
  (combined with a kind tag when both are present)
* ``always``: state-only rules, evaluated on every event
* ``onboarding``: only on the onboarding signal
* ``manual``: never evaluated automatically

A card without an entry is always relevant, so a newly added card is never
silently skipped.
'''

from __future__ import annotations

from typing import Iterable, Mapping, Optional

from nexus_unlocks.achievements.events import (
    ONBOARDING,
    DomainEvent,
    SystemSignal,
    TransactionEvent,
)

INCOME = 'income'
EXPENSE = 'expense'
ALWAYS = 'always'
ONBOARDING_ONLY = 'onboarding'
MANUAL = 'manual'
CATEGORY_PREFIX = 'category:'

KIND_TAGS = frozenset({INCOME, EXPENSE})


def category(name: str) -> str:
    return f'{CATEGORY_PREFIX}{name}'


CARD_TRIGGERS: dict[str, frozenset[str]] = {
    key: frozenset(tags)
    for key, tags in {
        # Financial Origin
        'card_ancient_coins': [EXPENSE, category('Alimentação'), category('Mercado'), category('Restaurante')],  # noqa: E501
        'card_ledger': [ONBOARDING_ONLY],
        'card_mint': [INCOME],
        'card_banker': [ALWAYS],
        # Cyberpunk Ethos
        'card_data_stream': [ALWAYS],
        'card_subnet': [EXPENSE],
        'card_ai_advisor': [ALWAYS],
        'card_surveillance': [ALWAYS],
        'card_mainframe': [ALWAYS],
        # Crypto Legends
        'card_satoshi': [INCOME, EXPENSE],
        'card_diamond_hands': [INCOME, EXPENSE],
        'card_bull_run': [INCOME, category('Renda Extra')],
        'card_rocket': [INCOME],
        # Luxury Lifestyle
        'card_private_jet': [EXPENSE],
        'card_yacht': [ALWAYS],
        'card_penthouse': [EXPENSE],
        # Artifacts
        'card_golden_calc': [INCOME, EXPENSE],
        'card_abacus': [ALWAYS],
        'card_scroll': [ALWAYS],
        'card_kings_coin': [ALWAYS],
        # Medieval Fortune
        'card_chest': [MANUAL],
        'card_shield': [EXPENSE],
        'card_crown': [INCOME, EXPENSE],
        # Space Odyssey
        'card_alien_artifact': [ALWAYS],
        'card_black_hole': [INCOME, EXPENSE],
        # RPG Class
        'card_hero_sword': [ALWAYS],
        'card_wizard_staff': [INCOME, category('Renda Extra')],
        'card_rogue_dagger': [EXPENSE],
        # Elemental Stones
        'card_ruby': [EXPENSE, category('Lazer')],
        'card_sapphire': [EXPENSE, category('Moradia')],
        'card_emerald': [INCOME, EXPENSE],
        'card_diamond': [EXPENSE],
        # Retro Tech
        'card_floppy': [ALWAYS],
        'card_crt': [ALWAYS],
        'card_cartridge': [MANUAL],
        # Zodiac
        'card_aries': [EXPENSE],
        'card_taurus': [EXPENSE, category('Investimentos')],
        'card_leo': [EXPENSE, category('Beleza')],
    }.items()
}


class TriggerFilter:
    def __init__(self, triggers: Optional[Mapping[str, Iterable[str]]] = None) -> None:
        source = CARD_TRIGGERS if triggers is None else triggers
        self.triggers: dict[str, frozenset[str]] = {
            key: frozenset(tags) for key, tags in source.items()
        }

    def tags(self, card_id: str) -> frozenset[str] | None:
        return self.triggers.get(card_id)

    def is_relevant(self, card_id: str, event: DomainEvent) -> bool:
        tags = self.triggers.get(card_id)
        if tags is None:
            return True
        if MANUAL in tags:
            return False
        if ALWAYS in tags:
            return True

        if isinstance(event, SystemSignal):
            return ONBOARDING_ONLY in tags and event.signal == ONBOARDING
        if not isinstance(event, TransactionEvent):
            return False

        kinds = tags & KIND_TAGS
        categories = {
            t[len(CATEGORY_PREFIX):] for t in tags if t.startswith(CATEGORY_PREFIX)
        }
        if not kinds and not categories:
            # onboarding-only
            return False
        if kinds and event.kind not in kinds:
            return False
        if categories and event.category not in categories:
            return False
        return True
