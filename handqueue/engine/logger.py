import logging
import os

LOG_LEVEL_ENV = "HANDQUEUE_LOG_LEVEL"


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.level:
        logger.setLevel(_level_from_env())
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def _level_from_env() -> int:
    """Level named by HANDQUEUE_LOG_LEVEL, WARNING when unset or unknown."""
    level = logging.getLevelName(os.environ.get(LOG_LEVEL_ENV, "WARNING").upper())
    return level if isinstance(level, int) else logging.WARNING


def set_level(level: int) -> None:
    """Set the level of every handqueue logger created so far."""
    for name in list(logging.root.manager.loggerDict):
        if name.startswith("handqueue"):
            logging.getLogger(name).setLevel(level)
