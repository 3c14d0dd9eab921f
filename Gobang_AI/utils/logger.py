"""Match logging: timestamped event lines plus a standard `logging` setup helper."""

import datetime
import logging


MATCH_LOGGER = logging.getLogger("Gobang_AI.match")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def log_event(message):
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {message}")
    MATCH_LOGGER.debug(message)


def configure_logging(verbose=False):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)
