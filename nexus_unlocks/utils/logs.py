import logging
import sys

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

# Connection pool chatter is only useful when debugging the store
NOISY_LOGGERS = ('psycopg.pool',)


def setup_logging(level: int | str = logging.INFO) -> None:
    '''Configure the root logger once for the CLI and any embedding host.'''
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    if level > logging.DEBUG:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
