import logging
from logging import Logger
from typing import Union

DEFAULT_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"
ENGINE_LOGGERS = ("rules", "core")

def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown logging level {level!r}")
    return resolved

def setup_logging(level: Union[int, str] = logging.INFO, *, engine_level: Union[int, str, None] = None) -> Logger:
    """Configure the root handler; ``engine_level`` tunes the engine loggers separately.

    Per-rule tracing of the dispatch loop is logged at ``DEBUG``.
    """
    level = _resolve_level(level)
    logging.basicConfig(level=level, format=DEFAULT_FORMAT, datefmt=DEFAULT_DATEFMT)
    if engine_level is not None:
        engine_level = _resolve_level(engine_level)
        for name in ENGINE_LOGGERS:
            logging.getLogger(name).setLevel(engine_level)
    logger = logging.getLogger("ruleflow")
    logger.debug("Logging initialized.")
    return logger
