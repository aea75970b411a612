"""
Logger configuration.

Provides configured console logging and loggers that prefix every message
with the application tag (``[Sparkbase] ...``).

Dependencies: logging (stdlib), sparkbase.configs
System role: Centralized logging configuration
"""

import logging
import sys
from typing import Any, MutableMapping

from sparkbase.configs import get_settings


class TaggedLogger(logging.LoggerAdapter):
    """
    Logger adapter prefixing messages with an application tag.

    When no tag is given, the tag is read from settings on first use.
    """

    def __init__(self, logger: logging.Logger, app_tag: str | None = None) -> None:
        super().__init__(logger, {})
        self._app_tag = app_tag

    @property
    def app_tag(self) -> str:
        if self._app_tag is None:
            self._app_tag = get_settings().app_tag
        return self._app_tag

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        return f"[{self.app_tag}] {msg}", kwargs


def configure_logging(level: str | int | None = None) -> None:
    """
    Configure Python logging with ISO timestamp and structured format.

    Args:
        level: Root level; defaults to the configured log_level setting
    """
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    # Remove any existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    # Reduce noise from the driver's own loggers
    logging.getLogger("pymongo").setLevel(logging.WARNING)


def get_logger(name: str, app_tag: str | None = None) -> TaggedLogger:
    """
    Get a tagged logger.

    Args:
        name: Logger name (usually __name__)
        app_tag: Prefix tag; defaults to the configured app_tag setting

    Returns:
        TaggedLogger: Adapter around logging.getLogger(name)
    """
    return TaggedLogger(logging.getLogger(name), app_tag)
