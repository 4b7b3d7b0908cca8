"""
Base service for the business logic layer.
Services orchestrate operations over repositories and adapters and log
events as ``event key=value ...`` lines.
"""

from abc import ABC
import logging


class BaseService(ABC):
    """Common logging helpers shared by service classes."""

    def __init__(self, logger_name: str):
        self.logger = logging.getLogger(logger_name)

    def _log(self, level: int, event: str, **fields):
        if not self.logger.isEnabledFor(level):
            return
        pairs = " ".join(f"{k}={v}" for k, v in fields.items())
        if pairs:
            self.logger.log(level, "%s %s", event, pairs)
        else:
            self.logger.log(level, event)

    def log_info(self, event: str, **fields):
        self._log(logging.INFO, event, **fields)

    def log_warning(self, event: str, **fields):
        self._log(logging.WARNING, event, **fields)

    def log_error(self, event: str, **fields):
        self._log(logging.ERROR, event, **fields)
