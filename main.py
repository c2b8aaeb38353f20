import argparse
import logging

from nexus_unlocks.achievements.badges import unlocked_badges
from nexus_unlocks.achievements.events import ONBOARDING, SystemSignal
from nexus_unlocks.database.db_manager import DBManager
from nexus_unlocks.database.schema import ensure_schema
from nexus_unlocks.models.progress import ProgressState
from nexus_unlocks.models.unlockable import UnlockableDefinition
from nexus_unlocks.services.event_bus import EventBus
from nexus_unlocks.services.progress_store import ProgressStore
from nexus_unlocks.services.unlock_engine import UnlockEngine
from nexus_unlocks.utils.constants import STATE_CHANGED, UNLOCK_GRANTED
from nexus_unlocks.utils.env import load_env, load_settings
from nexus_unlocks.utils.logs import setup_logging

logger = logging.getLogger(__name__)


def _announce(definition: UnlockableDefinition) -> None:
    logger.info(
        f'UNLOCKED {definition.kind.value}: {definition.name} '
        f'[{definition.rarity.label}]'
    )


def _report_badges(state: ProgressState) -> None:
    badges = unlocked_badges(state)
    logger.info(f'{len(badges)} badges unlocked')
    for badge in badges:
        logger.info(f'BADGE {badge.name}: {badge.description}')


def main() -> None:
    parser = argparse.ArgumentParser(description='Re-check unlocks for a user')
    parser.add_argument('--user', help='User id (defaults to NEXUS_USER_ID)')
    parser.add_argument(
        '--onboarding',
        action='store_true',
        help='Send the onboarding signal instead of a plain check',
    )
    parser.add_argument('--force', metavar='ID', help='Force-grant an unlockable')
    parser.add_argument(
        '--badges', action='store_true', help='List badges after the check'
    )
    args = parser.parse_args()

    load_env()
    settings = load_settings()
    setup_logging(settings.log_level)

    DBManager.init_pool(settings.database_url)
    try:
        with DBManager() as db:
            ensure_schema(db)

        store = ProgressStore(args.user or settings.user_id)
        state = store.load()

        bus = EventBus()
        bus.subscribe(UNLOCK_GRANTED, _announce)
        engine = UnlockEngine(
            lambda: state,
            store.save,
            bus,
            welcome_card_id=settings.welcome_card_id,
        )
        engine.start()

        if args.force:
            engine.force_grant(args.force)
        elif args.onboarding:
            bus.publish(STATE_CHANGED, state, SystemSignal(ONBOARDING))
        else:
            engine.recheck()

        if args.badges:
            _report_badges(state)
    finally:
        DBManager.close_pool()


if __name__ == '__main__':
    main()
