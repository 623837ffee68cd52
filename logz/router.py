"""
Level routing for logz

Resolves, once at initialization time, which destinations each severity is
written to, and wraps the result in a LineWriter that renders one text line
per record.

For every level L:
- L goes to stdout when L >= std_level
- L goes to the configured output when L >= out_level and that output is not
  the stdout object itself
- L is suppressed (no writer at all) when neither applies
"""

import logging
import os
import sys
from dataclasses import dataclass, field
from datetime import datetime
from threading import Lock
from typing import Any, Dict, Optional

from logz.constants import TIMESTAMP_FORMAT
from logz.levels import LogLevel, get_log_prefix
from logz.multiwriter import multi_writer

logger = logging.getLogger(__name__)


class LineWriter:
    """
    Line-oriented text writer over a single destination.

    Renders ``<timestamp> <prefix><file:line> <message>`` and writes it with
    one ``write`` call under a lock, so concurrent records never interleave
    within a line.

    Example:
        writer = LineWriter(sys.stdout, " INFO|", include_location=False)
        writer.output(1, "Service started")
        # 2026/10/16 10:15:30  INFO| Service started
    """

    def __init__(self, out: Any, prefix: str, include_location: bool = False):
        """
        Args:
            out: Destination (anything with write())
            prefix: Severity prefix placed after the timestamp
            include_location: Add the caller's file:line to every line
        """
        self.out = out
        self.prefix = prefix
        self.include_location = include_location
        self._lock = Lock()

    def format_line(self, message: str, location: str = "") -> str:
        timestamp = datetime.now().strftime(TIMESTAMP_FORMAT)
        line = f"{timestamp} {self.prefix}{location} {message}"
        if not line.endswith("\n"):
            line += "\n"
        return line

    def output(self, calldepth: int, message: str):
        """
        Write one record.

        Args:
            calldepth: Frames to skip when computing file:line. 1 is the
                direct caller of output().
            message: Already formatted message text
        """
        location = ""
        if self.include_location:
            frame = sys._getframe(calldepth)
            location = f"{os.path.basename(frame.f_code.co_filename)}:{frame.f_lineno}"

        line = self.format_line(message, location)

        with self._lock:
            try:
                self.out.write(line)
                flush = getattr(self.out, "flush", None)
                if flush is not None:
                    flush()
            except Exception:
                logger.warning("Logging error: failed to write to output stream")


@dataclass(frozen=True)
class RoutingTable:
    """Per-level writers resolved at initialization. None means suppressed."""

    writers: Dict[LogLevel, Optional[LineWriter]] = field(default_factory=dict)
    include_location: bool = False

    def get(self, level: LogLevel) -> Optional[LineWriter]:
        return self.writers.get(level)


def new_level_writer(
    level: LogLevel,
    out: Any,
    std_level: LogLevel,
    out_level: LogLevel,
    include_location: bool,
    stdout: Any,
) -> Optional[LineWriter]:
    """
    Resolve the writer for a single level.

    Args:
        level: Level being resolved
        out: Configured output
        std_level: Minimum level written to stdout
        out_level: Minimum level written to the configured output
        include_location: Include caller file:line
        stdout: Standard output destination

    Returns:
        LineWriter over stdout, out, or both; None if the level is suppressed
    """
    writer = None
    if level >= std_level:
        writer = stdout
    # Identity check: the configured output may be stdout itself
    if level >= out_level and out is not None and out is not writer:
        if writer is not None:
            writer = multi_writer(writer, out)
        else:
            writer = out
    if writer is None:
        return None
    return LineWriter(writer, get_log_prefix(level), include_location)


def build_routing_table(
    out: Any,
    std_level: LogLevel,
    out_level: LogLevel,
    include_location: bool = False,
    stdout: Any = None,
) -> RoutingTable:
    """
    Resolve writers for all five levels.

    Args:
        out: Configured output
        std_level: Minimum level written to stdout
        out_level: Minimum level written to out
        include_location: Include caller file:line
        stdout: Standard output destination (default: sys.stdout)

    Returns:
        RoutingTable covering every LogLevel
    """
    if stdout is None:
        stdout = sys.stdout
    writers = {
        level: new_level_writer(level, out, std_level, out_level, include_location, stdout) for level in LogLevel
    }
    return RoutingTable(writers=writers, include_location=include_location)
