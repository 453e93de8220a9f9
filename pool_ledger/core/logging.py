import logging
from pool_ledger.core.config import settings

LOGGER_NAME = "pool_ledger"
LOG_FORMAT = "Pool Ledger : %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Hook for the embedding application.

    Every module logs through a child of the ``pool_ledger`` logger and never
    installs handlers itself; call this once at startup to get the package's
    warnings (e.g. ids missing from the roster) on stderr. ``level`` falls
    back to ``settings.LOG_LEVEL``. Calling it again only changes the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel((level or settings.LOG_LEVEL).upper())

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
