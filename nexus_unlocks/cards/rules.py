'''Deterministic unlock rules for the trading cards.

Only paid transactions count towards a card. Rules receive the triggering
event, the progress state and the full transaction history.
'''

from __future__ import annotations

from collections import defaultdict
from datetime import date, timedelta
from typing import Iterable, Sequence

from nexus_unlocks.achievements.events import DomainEvent, TransactionEvent
from nexus_unlocks.achievements.registry import card_rules
from nexus_unlocks.models.progress import ProgressState, Transaction
from nexus_unlocks.utils.constants import AMOUNT_EPSILON, EXTRA_INCOME_CATEGORY
from nexus_unlocks.utils.helper import month_key, today

FOOD_CATEGORIES = {'Alimentação', 'Mercado', 'Restaurante', 'Ifood'}
DEFAULT_FIRST_ACCESS = date(2024, 1, 1)


def _paid(history: Iterable[Transaction]) -> list[Transaction]:
    return [t for t in history if t.is_paid]


def _in_month(history: Iterable[Transaction], key: str) -> list[Transaction]:
    return [t for t in history if month_key(t.day) == key]


def _total(
    history: Iterable[Transaction], kind: str, category: str | None = None
) -> float:
    return sum(
        t.amount
        for t in history
        if t.kind == kind and (category is None or t.category == category)
    )


def _days_since(day: date) -> int:
    return (today() - day).days


def _months_since(day: date) -> int:
    now = today()
    months = (now.year - day.year) * 12 + now.month - day.month
    if now.day < day.day:
        months -= 1
    return months


def _oldest(history: Sequence[Transaction]) -> date | None:
    return min((t.day for t in history), default=None)


def _first_access(state: ProgressState) -> date:
    return state.first_access_date or DEFAULT_FIRST_ACCESS


def _paid_event(event: DomainEvent) -> TransactionEvent | None:
    if isinstance(event, TransactionEvent) and event.is_paid:
        return event
    return None


# Financial Origin


@card_rules.predicate('card_ancient_coins')
def ancient_coins(event, state, history) -> bool:
    food = [
        t
        for t in _paid(history)
        if t.kind == 'expense' and t.category in FOOD_CATEGORIES
    ]
    return len(food) >= 5


@card_rules.predicate('card_ledger')
def ledger(event, state, history) -> bool:
    return state.onboarding_complete and state.has_identity


@card_rules.predicate('card_mint')
def mint(event, state, history) -> bool:
    income = [t for t in _paid(history) if t.kind == 'income']
    # The salary entered during setup alone must not mint the card
    return len(income) >= 2 and sum(t.amount for t in income) >= 500


@card_rules.predicate('card_banker')
def banker(event, state, history) -> bool:
    paid = _paid(history)
    if len(paid) < 10:
        return False
    oldest = _oldest(paid)
    if oldest is None or _days_since(oldest) < 30:
        return False

    window_start = today() - timedelta(days=30)
    recent = sorted((t for t in paid if t.day > window_start), key=lambda t: t.day)
    balance = 0.0
    for t in recent:
        balance += t.amount if t.kind == 'income' else -t.amount
        if balance < 0:
            return False
    return bool(recent) and balance > 0


# Cyberpunk Ethos


@card_rules.predicate('card_data_stream')
def data_stream(event, state, history) -> bool:
    return (state.current_streak or 0) >= 3


@card_rules.predicate('card_subnet')
def subnet(event, state, history) -> bool:
    tx = _paid_event(event)
    if tx is None or not tx.has_time:
        return False
    hour = tx.occurred_at.hour  # type: ignore[union-attr]
    return tx.kind == 'expense' and 0 <= hour < 6


@card_rules.predicate('card_ai_advisor')
def ai_advisor(event, state, history) -> bool:
    done = [g for g in state.goals if g.goal_type == 'Saving' and g.is_complete]
    return len(done) >= 3


@card_rules.predicate('card_surveillance')
def surveillance(event, state, history) -> bool:
    return (state.report_view_count or 0) >= 5


@card_rules.predicate('card_mainframe')
def mainframe(event, state, history) -> bool:
    return (state.nexus_score or 0) >= 10


# Crypto Legends


@card_rules.predicate('card_satoshi')
def satoshi(event, state, history) -> bool:
    tx = _paid_event(event)
    return tx is not None and abs(tx.amount - 21.00) < AMOUNT_EPSILON


@card_rules.predicate('card_diamond_hands')
def diamond_hands(event, state, history) -> bool:
    if _days_since(_first_access(state)) < 30:
        return False
    month = _in_month(_paid(history), month_key(today()))
    income = _total(month, 'income')
    expense = _total(month, 'expense')
    return income > 500 and expense > 0 and (income - expense) / income >= 0.20


@card_rules.predicate('card_bull_run')
def bull_run(event, state, history) -> bool:
    paid = _paid(history)
    now = today()
    current = _total(_in_month(paid, month_key(now)), 'income', EXTRA_INCOME_CATEGORY)
    last = _total(_in_month(paid, month_key(now, 1)), 'income', EXTRA_INCOME_CATEGORY)
    return last > 100 and current / last >= 1.5


# Luxury Lifestyle


@card_rules.predicate('card_private_jet')
def private_jet(event, state, history) -> bool:
    tx = _paid_event(event)
    return tx is not None and tx.kind == 'expense' and tx.amount > 5000


@card_rules.predicate('card_yacht')
def yacht(event, state, history) -> bool:
    return state.emergency_fund.current_balance > 10000


@card_rules.predicate('card_penthouse')
def penthouse(event, state, history) -> bool:
    month = _in_month(_paid(history), month_key(today()))
    return len([t for t in month if t.kind == 'expense']) >= 3


# Artifacts


@card_rules.predicate('card_golden_calc')
def golden_calc(event, state, history) -> bool:
    month = _in_month(_paid(history), month_key(today(), 1))
    income = _total(month, 'income')
    return income > 0 and abs(income - _total(month, 'expense')) < AMOUNT_EPSILON


@card_rules.predicate('card_abacus')
def abacus(event, state, history) -> bool:
    return len(_paid(history)) >= 50


@card_rules.predicate('card_scroll')
def scroll(event, state, history) -> bool:
    budgeted = {b.category_id for b in state.budgets}
    return bool(state.categories) and all(c.id in budgeted for c in state.categories)


@card_rules.predicate('card_kings_coin')
def kings_coin(event, state, history) -> bool:
    return (state.nexus_score or 0) // 100 >= 20


# Medieval Fortune


@card_rules.predicate('card_chest')
def chest(event, state, history) -> bool:
    return state.emergency_fund.target_amount > 0


@card_rules.predicate('card_shield')
def shield(event, state, history) -> bool:
    if _days_since(_first_access(state)) < 7:
        return False
    window_start = today() - timedelta(days=7)
    return not any(
        t.kind == 'expense' and t.category == 'Lazer' and t.day > window_start
        for t in _paid(history)
    )


@card_rules.predicate('card_crown')
def crown(event, state, history) -> bool:
    now = today()
    valid = [t for t in _paid(history) if t.day <= now]
    if len(valid) < 20:
        return False
    oldest = _oldest(valid)
    if oldest is None or _days_since(oldest) < 60:
        return False
    return _total(valid, 'income') - _total(valid, 'expense') >= 100000


# Space Odyssey


@card_rules.predicate('card_rocket')
def rocket(event, state, history) -> bool:
    paid = _paid(history)
    now = today()
    current = _total(_in_month(paid, month_key(now)), 'income')
    last = _total(_in_month(paid, month_key(now, 1)), 'income')
    return last > 500 and current / last >= 1.2


@card_rules.predicate('card_alien_artifact')
def alien_artifact(event, state, history) -> bool:
    return len(_paid(history)) >= 100


@card_rules.predicate('card_black_hole')
def black_hole(event, state, history) -> bool:
    month = _in_month(_paid(history), month_key(today()))
    income = _total(month, 'income')
    return income > 0 and _total(month, 'expense') > income


# RPG Class


@card_rules.predicate('card_hero_sword')
def hero_sword(event, state, history) -> bool:
    return any(g.goal_type == 'Debt' and g.is_complete for g in state.goals)


@card_rules.predicate('card_wizard_staff')
def wizard_staff(event, state, history) -> bool:
    paid = _paid(history)
    oldest = _oldest(paid)
    if oldest is None or _months_since(oldest) < 2:
        return False
    now = today()
    for months_ago in range(3):
        key = month_key(now, months_ago)
        if not any(
            t.kind == 'income'
            and t.category == EXTRA_INCOME_CATEGORY
            and month_key(t.day) == key
            for t in paid
        ):
            return False
    return True


@card_rules.predicate('card_rogue_dagger')
def rogue_dagger(event, state, history) -> bool:
    tx = _paid_event(event)
    return (
        tx is not None
        and tx.kind == 'expense'
        and abs(tx.amount - 1.00) < AMOUNT_EPSILON
    )


# Elemental Stones


@card_rules.predicate('card_ruby')
def ruby(event, state, history) -> bool:
    month = _in_month(_paid(history), month_key(today()))
    return _total(month, 'expense', 'Lazer') > 1000


@card_rules.predicate('card_sapphire')
def sapphire(event, state, history) -> bool:
    month = _in_month(_paid(history), month_key(today()))
    income = _total(month, 'income')
    bills = _total(month, 'expense', 'Moradia')
    return income > 100 and bills > 0 and bills / income < 0.5


@card_rules.predicate('card_emerald')
def emerald(event, state, history) -> bool:
    paid = _paid(history)
    if len(paid) < 10:
        return False
    oldest = _oldest(paid)
    if oldest is None or _days_since(oldest) < 30:
        return False
    return _total(paid, 'income') > _total(paid, 'expense')


@card_rules.predicate('card_diamond')
def diamond(event, state, history) -> bool:
    paid = _paid(history)
    for credit_card in state.credit_cards:
        bills: dict[str, float] = defaultdict(float)
        for t in paid:
            if t.card_id == credit_card.id:
                bills[t.payment_month or month_key(t.day)] += t.amount
        if any(total > 2000 for total in bills.values()):
            return True
    return False


# Retro Tech


@card_rules.predicate('card_floppy')
def floppy(event, state, history) -> bool:
    return len(_paid(history)) >= 10


@card_rules.predicate('card_crt')
def crt(event, state, history) -> bool:
    return (state.full_screen_usage_count or 0) >= 1


@card_rules.predicate('card_cartridge')
def cartridge(event, state, history) -> bool:
    # Easter egg, only ever force-granted
    return False


# Zodiac


@card_rules.predicate('card_aries')
def aries(event, state, history) -> bool:
    # Real transactions only, never system checks
    if not isinstance(event, TransactionEvent):
        return False
    same_day = [
        t for t in _paid(history) if t.kind == 'expense' and t.day == event.day
    ]
    return len(same_day) >= 3


@card_rules.predicate('card_taurus')
def taurus(event, state, history) -> bool:
    invested = sum(t.amount for t in _paid(history) if t.category == 'Investimentos')
    return invested >= 500


@card_rules.predicate('card_leo')
def leo(event, state, history) -> bool:
    words = ('beleza', 'salão', 'cabelo')
    return any(
        t.category == 'Beleza' or any(w in t.description.lower() for w in words)
        for t in _paid(history)
    )
