"""
Log levels for logz.

Five ordered severities. Every threshold comparison in the package is
``level >= cutoff``, so the numeric order below is part of the contract.
"""

import logging
from enum import IntEnum

from logz.constants import FAULT_MAPPING, LEVEL_NAMES, LEVEL_PREFIXES

logger = logging.getLogger(__name__)


class LogLevel(IntEnum):
    """Ordered severities: TRACE < INFO < WARNING < ERROR < CRITICAL"""

    TRACE = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4


def get_log_level(name: str) -> LogLevel:
    """
    Map a configuration literal to a LogLevel.

    Recognized names are case-sensitive: ``trace``, ``info``, ``information``,
    ``warning``, ``warn``, ``error`` and ``fatal``. Anything else is reported
    on the bootstrap logger and falls back to TRACE, the most verbose level.

    Args:
        name: Level name as found in configuration

    Returns:
        Matching LogLevel, or LogLevel.TRACE for unknown names

    Example:
        get_log_level("warn")   # LogLevel.WARNING
        get_log_level("fatal")  # LogLevel.CRITICAL
    """
    member = LEVEL_NAMES.get(name)
    if member is None:
        logger.warning(FAULT_MAPPING["invalid_log_level"], name)
        return LogLevel.TRACE
    return LogLevel[member]


def get_log_prefix(level) -> str:
    """Return the fixed 6-character prefix for ``level``, or an empty string"""
    try:
        return LEVEL_PREFIXES[LogLevel(level).name]
    except ValueError:
        return ""
