import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_WELCOME_CARD = 'card_ledger'
ROOT_MARKERS = ('pyproject.toml', '.git')


@dataclass(frozen=True)
class EngineSettings:
    database_url: Optional[str]
    welcome_card_id: str
    log_level: str
    user_id: str


def project_root(start: Optional[Path] = None) -> Path:
    '''Nearest ancestor holding a root marker, else the start directory.'''
    here = (start or Path(__file__)).resolve()
    if not here.is_dir():
        here = here.parent
    for candidate in (here, *here.parents):
        if any((candidate / marker).exists() for marker in ROOT_MARKERS):
            return candidate
    return here


def _candidate_files(root: Path) -> Iterator[Path]:
    explicit = os.getenv('ENV_FILE')
    if explicit:
        path = Path(explicit)
        yield path if path.is_absolute() else root / path

    stage = (os.getenv('NEXUS_ENV') or os.getenv('ENV') or 'local').lower()
    yield root / ('.env.prod' if stage in {'prod', 'production'} else '.env.local')
    yield root / '.env'


def load_env(override: bool = False) -> Optional[Path]:
    '''Load the first env file found; returns its path, or None if none exist.'''
    for path in _candidate_files(project_root()):
        if path.exists():
            load_dotenv(dotenv_path=path, override=override)
            logger.debug(f'Loaded environment from {path}')
            return path
    return None


def load_settings() -> EngineSettings:
    '''Read engine settings from the (already loaded) environment.'''
    return EngineSettings(
        database_url=os.getenv('DATABASE_URL') or None,
        welcome_card_id=os.getenv('NEXUS_WELCOME_CARD') or DEFAULT_WELCOME_CARD,
        log_level=(os.getenv('LOG_LEVEL') or 'INFO').upper(),
        user_id=os.getenv('NEXUS_USER_ID') or 'default',
    )
