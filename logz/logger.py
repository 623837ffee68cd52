"""
Logz - Leveled logger with independent stdout and output thresholds

A Logz instance owns the whole logging state of a process: the per-level
routing resolved at ``init``, the stack dump threshold and the configured
output. The package exposes one default instance through module level
functions (``logz.init``, ``logz.info``, ...); separate instances are useful
for tests or embedding.

Features:
- Five ordered levels (TRACE, INFO, WARNING, ERROR, CRITICAL)
- Separate cutoffs for stdout and the configured output
- Optional caller file:line on every line
- Stack trace appended to the configured output at or above a cutoff
- ``critical``/``criticalf`` terminate the process with exit status 1

Usage:
    import logz
    from logz import LogLevel

    logz.init(log_file, LogLevel.INFO, LogLevel.WARNING, LogLevel.ERROR)
    logz.info("Service started")              # stdout only
    logz.warningf("Retrying %s (%d)", url, n) # stdout and log_file
    logz.close()

Thread safety:
    Emitting from many threads after a single ``init`` is safe; routing is
    read-only once built. ``init`` and ``close`` must not race with each
    other or with emits.
"""

import logging
import os
import sys
import threading
import traceback
from typing import Any

from logz.constants import FAULT_MAPPING
from logz.levels import LogLevel
from logz.router import RoutingTable, build_routing_table

logger = logging.getLogger(__name__)

# Emit entry points call _emit directly, so the user's frame sits three
# frames above LineWriter.output: output <- _emit <- entry point <- caller.
CALLER_DEPTH = 3


class LogzError(Exception):
    """Base class for logger lifecycle errors"""


class NotInitializedError(LogzError):
    """Raised when an operation needs an initialized logger"""

    def __init__(self):
        super().__init__(FAULT_MAPPING["not_initialized"])


class AlreadyInitializedError(LogzError):
    """Raised when init is called twice without close"""

    def __init__(self):
        super().__init__(FAULT_MAPPING["already_initialized"])


def _sprint(values) -> str:
    return " ".join(str(value) for value in values)


def _sprintf(fmt: str, values) -> str:
    if not values:
        return fmt
    try:
        return fmt % values
    except (TypeError, ValueError) as e:
        return f"{fmt} {values!r} (formatting error: {e})"


def _is_standard_stream(out: Any) -> bool:
    return any(out is stream for stream in (sys.stdout, sys.stderr, sys.__stdout__, sys.__stderr__))


class Logz:
    """
    Process-wide leveled logger.

    Example:
        log = Logz()
        log.init(output, LogLevel.INFO, LogLevel.WARNING, LogLevel.ERROR, log_file_name=True)
        log.warning("Disk almost full:", usage, "%")
        log.close()

        # Or, closing automatically and logging any escaping exception:
        with Logz().init(output, LogLevel.INFO, LogLevel.WARNING, LogLevel.ERROR) as log:
            log.info("Working")
    """

    def __init__(self, stdout: Any = None):
        """
        Args:
            stdout: Standard output destination. Resolved to sys.stdout at
                init time when omitted.
        """
        self._stdout = stdout
        self.initialized = False
        self.routing = RoutingTable()
        self.stack_level = LogLevel.CRITICAL
        self.out = None

    def init(
        self,
        out: Any,
        std_level: LogLevel,
        out_level: LogLevel,
        stack_level: LogLevel,
        log_file_name: bool = False,
    ) -> "Logz":
        """
        Configure routing and mark the logger initialized.

        Args:
            out: Configured output (anything with write(); closed by close()
                if it has close())
            std_level: Minimum level written to stdout
            out_level: Minimum level written to out
            stack_level: Minimum level that appends a stack trace to out
            log_file_name: Include the caller's file:line in every line

        Returns:
            self, so the result can be used as a context manager

        Raises:
            AlreadyInitializedError: init was already called without close.
                The existing configuration stays active.
        """
        if self.initialized:
            raise AlreadyInitializedError()

        stdout = self._stdout if self._stdout is not None else sys.stdout
        self.routing = build_routing_table(
            out, LogLevel(std_level), LogLevel(out_level), include_location=log_file_name, stdout=stdout
        )
        self.stack_level = LogLevel(stack_level)
        self.out = out
        self.initialized = True
        return self

    def close(self):
        """
        Tear the logger down and close the configured output.

        When called while an exception is being handled (from an ``except``
        or ``finally`` block), that exception is logged at CRITICAL, teardown
        completes, and the exception is raised again.

        Raises:
            NotInitializedError: init was never called
        """
        self._teardown(sys.exc_info()[1], reraise=True)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._teardown(exc_val, reraise=False)
        return False

    def _teardown(self, exc, reraise: bool):
        if not self.initialized:
            raise NotInitializedError()

        # sys.exit is a deliberate shutdown, not a fatal condition
        if isinstance(exc, SystemExit):
            exc = None
        if exc is not None:
            self._emit(LogLevel.CRITICAL, str(exc) or type(exc).__name__, CALLER_DEPTH + 1)

        self.initialized = False
        close = getattr(self.out, "close", None)
        if close is not None and not _is_standard_stream(self.out):
            try:
                close()
            except Exception:
                pass

        if exc is not None and reraise:
            raise exc

    def _emit(self, level, message: str, calldepth: int = CALLER_DEPTH) -> bool:
        if not self.initialized:
            logger.warning(FAULT_MAPPING["not_initialized"])
            return False

        level = LogLevel(level)
        writer = self.routing.get(level)
        if writer is not None:
            writer.output(calldepth, message)

        if level >= self.stack_level and self.out is not None:
            stack = "".join(traceback.format_stack(sys._getframe(calldepth - 1)))
            try:
                self.out.write(stack + "\n")
            except Exception:
                logger.warning("Logging error: failed to write stack trace to output stream")
        return True

    def _exit(self):
        # SystemExit only ends the calling thread
        if threading.current_thread() is threading.main_thread():
            sys.exit(1)
        for stream in (self.out, self._stdout, sys.stdout, sys.stderr):
            flush = getattr(stream, "flush", None)
            if flush is None:
                continue
            try:
                flush()
            except Exception:
                pass
        os._exit(1)

    def log(self, level: LogLevel, *values):
        """
        Log values at an explicit level.

        Unlike ``critical``, logging at LogLevel.CRITICAL here does not exit.
        An uninitialized logger only reports the not-initialized diagnostic,
        whatever ``level`` is.

        Raises:
            ValueError: level is not a LogLevel value (initialized logger only)
        """
        self._emit(level, _sprint(values))

    def logf(self, level: LogLevel, fmt: str, *values):
        """Log a %-style formatted message at an explicit level"""
        self._emit(level, _sprintf(fmt, values))

    def trace(self, *values):
        self._emit(LogLevel.TRACE, _sprint(values))

    def tracef(self, fmt: str, *values):
        self._emit(LogLevel.TRACE, _sprintf(fmt, values))

    def info(self, *values):
        self._emit(LogLevel.INFO, _sprint(values))

    def infof(self, fmt: str, *values):
        self._emit(LogLevel.INFO, _sprintf(fmt, values))

    def warning(self, *values):
        self._emit(LogLevel.WARNING, _sprint(values))

    def warningf(self, fmt: str, *values):
        self._emit(LogLevel.WARNING, _sprintf(fmt, values))

    def error(self, *values):
        self._emit(LogLevel.ERROR, _sprint(values))

    def errorf(self, fmt: str, *values):
        self._emit(LogLevel.ERROR, _sprintf(fmt, values))

    def critical(self, *values):
        """
        Log at CRITICAL and terminate the process with exit status 1.

        Never returns once the logger is initialized. On the main thread this
        raises SystemExit(1); from any other thread the outputs are flushed
        and the process ends immediately through os._exit(1), without
        running cleanup handlers. Do not call it on paths where a single
        failure is acceptable, such as request handling.
        """
        if self._emit(LogLevel.CRITICAL, _sprint(values)):
            self._exit()

    def criticalf(self, fmt: str, *values):
        """Formatted variant of ``critical``; also terminates the process."""
        if self._emit(LogLevel.CRITICAL, _sprintf(fmt, values)):
            self._exit()
