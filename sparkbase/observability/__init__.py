"""
Observability module.

Provides logging configuration, tagged loggers and structured context helpers.
"""

from sparkbase.observability.logger import TaggedLogger, configure_logging, get_logger

__all__ = ["TaggedLogger", "configure_logging", "get_logger"]
