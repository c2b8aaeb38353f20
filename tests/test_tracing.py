import logging

from nexus_unlocks.utils import tracing
from nexus_unlocks.utils.logs import setup_logging
from nexus_unlocks.utils.tracing import (
    add_span_metadata,
    current_span,
    note_grant,
    trace_span,
)


def test_nested_grants_roll_up_to_the_root():
    with trace_span('engine.state_changed') as root:
        with trace_span('achievements.sweep') as child:
            assert current_span() is child
            note_grant('first_steps')
        add_span_metadata('card', 'card_ledger')
        note_grant('card_ledger')

    assert current_span() is None
    assert child.granted == ['first_steps']
    assert root.granted == ['first_steps', 'card_ledger']
    assert root.metadata == {'card': 'card_ledger'}
    assert root.elapsed_ms is not None


def test_grants_outside_a_span_are_ignored():
    note_grant('first_steps')
    add_span_metadata('k', 'v')
    assert current_span() is None


def test_slow_root_span_logs_warning(monkeypatch, caplog):
    monkeypatch.setattr(tracing, 'SLOW_SPAN_MS', -1.0)

    with caplog.at_level(logging.INFO, logger=tracing.__name__):
        with trace_span('cards.warm_up'):
            pass

    assert any(
        r.levelno == logging.WARNING and 'cards.warm_up slow' in r.getMessage()
        for r in caplog.records
    )


def test_setup_logging_quiets_the_pool_logger():
    setup_logging('info')

    assert logging.getLogger('psycopg.pool').level == logging.WARNING
