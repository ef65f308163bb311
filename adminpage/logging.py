from typing import Optional

from loguru import logger
from adminpage.config import get_config

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)

_handler_id: Optional[int] = None
_handler_level: Optional[str] = None


def configure_logging(level: Optional[str] = None) -> None:
    """Route loguru to stdout at `level` (default: get_config().log_level).

    The sink is only replaced when the level changes, so repeated calls
    from each controller and store do not stack handlers.
    """
    global _handler_id, _handler_level
    level = (level or get_config().log_level).upper()
    if _handler_id is not None and level == _handler_level:
        return
    if _handler_id is None:
        # Drop loguru's default stderr handler on first use
        logger.remove()
    else:
        logger.remove(_handler_id)
    _handler_id = logger.add(sink=lambda msg: print(msg, end=""), level=level, format=LOG_FORMAT)
    _handler_level = level


def get_logger(name: str = None):
    """Logger bound to `name`, configured from the latest AppConfig."""
    configure_logging()
    if name:
        return logger.bind(name=name)
    return logger
