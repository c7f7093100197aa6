import logging
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def _normalise_level(level: Optional[Union[str, int]]) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        value = level.strip().upper()
        if value.isdigit():
            return int(value)
        mapped = logging.getLevelName(value)
        if isinstance(mapped, int):
            return mapped
    return logging.INFO


def configure_logging(level: Optional[Union[str, int]] = None) -> int:
    # Console uniquement, le conteneur collecte stdout
    log_level = _normalise_level(level)
    logging.basicConfig(level=log_level, format=LOG_FORMAT, force=True)
    logging.getLogger(__name__).info(f"Logging initialised at level {logging.getLevelName(log_level)}")
    return log_level
