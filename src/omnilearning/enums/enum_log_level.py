# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Log level enum for runtime configuration."""

import logging
from enum import StrEnum


class EnumLogLevel(StrEnum):
    """Log level enumeration for runtime configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_logging_level(self) -> int:
        """Return the numeric level understood by the logging module."""
        return logging.getLevelNamesMapping()[self.value]


__all__ = ["EnumLogLevel"]
