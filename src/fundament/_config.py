"""Package configuration: Config dataclass and initialization."""

from __future__ import annotations

import os
from dataclasses import dataclass

from fundament._logging import configure_logging, get_logger

__all__ = [
    'Config',
    'get_config',
    'init',
]

logger = get_logger(__name__)

LOG_LEVEL_ENV = 'FUNDAMENT_LOG_LEVEL'
LOG_FORMAT_ENV = 'FUNDAMENT_LOG_FORMAT'


@dataclass(frozen=True)
class Config:
    """Configuration for fundament.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Emit JSON logs when True, console logs otherwise.
    """

    log_level: str | None = None
    json_logs: bool = True


# Global configuration (set by init())
_config: Config | None = None


def _detect_log_level() -> str | None:
    """Read the log level from FUNDAMENT_LOG_LEVEL, if set."""
    level = os.environ.get(LOG_LEVEL_ENV, '').strip()
    return level.upper() or None


def _detect_json_logs() -> bool:
    """Read the log format from FUNDAMENT_LOG_FORMAT.

    Priority:
    1. "json" -> True, "console" -> False
    2. Unknown values log a warning and fall back to JSON
    3. Default to JSON
    """
    env_format = os.environ.get(LOG_FORMAT_ENV, '').strip().lower()
    if env_format == 'console':
        return False
    if env_format and env_format != 'json':
        logger.warning('unknown log format, defaulting to json', env=LOG_FORMAT_ENV, value=env_format)
    return True


def init(
    log_level: str | None = None,
    json_logs: bool | None = None,
) -> Config:
    """Initialize fundament with the specified configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from the
            environment if None; None there too means silent.
        json_logs: JSON or console log rendering. Read from the
            environment if None.

    Returns:
        The Config that was set.

    Example:
        ```python
        import fundament

        # Environment driven
        fundament.init()

        # Explicit configuration
        fundament.init(log_level='DEBUG', json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    _config = Config(
        log_level=log_level.upper() if log_level is not None else _detect_log_level(),
        json_logs=json_logs if json_logs is not None else _detect_json_logs(),
    )

    # Configure logging if level specified
    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_logs)
        logger.debug('fundament initialized', log_level=_config.log_level, json_logs=_config.json_logs)

    return _config


def get_config() -> Config:
    """Get the current configuration.

    Returns:
        The current Config.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'fundament not initialized. Call fundament.init() first.'
        raise RuntimeError(msg)
    return _config
