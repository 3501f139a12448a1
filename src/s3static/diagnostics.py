"""
Diagnostic sink for errors that reach the end of the pipeline.

The pipeline hands every surviving error to a ``DiagnosticSink`` and ignores
what happens next; ``LoggingSink`` is the production implementation and emits
through the standard logging module.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Protocol

from .errors import EffError, describe


PACKAGE_LOGGER = "s3static"

Level = Literal["debug", "info", "warning", "error", "critical"]


class DiagnosticSink(Protocol):
    """Receives errors for diagnostics. Must not be relied on to succeed."""

    def write(self, error: EffError) -> None:
        """Record ``error``."""
        ...


@dataclass(frozen=True)
class LoggingSink:
    """Sink that logs each error as one record.

    Attributes:
        logger_name: Logger to emit on.
        level: Level used for every record.
    """

    logger_name: str = PACKAGE_LOGGER
    level: Level = "error"

    def write(self, error: EffError) -> None:
        logger = logging.getLogger(self.logger_name)
        message = "Request failed: %s"
        match self.level:
            case "debug":
                logger.debug(message, describe(error))
            case "info":
                logger.info(message, describe(error))
            case "warning":
                logger.warning(message, describe(error))
            case "error":
                logger.error(message, describe(error))
            case "critical":
                logger.critical(message, describe(error))


def configure_logging(level: str) -> None:
    """Set the package logger level.

    Handlers are left alone; the Lambda runtime installs its own on the root logger.
    """
    logging.getLogger(PACKAGE_LOGGER).setLevel(level.upper())
