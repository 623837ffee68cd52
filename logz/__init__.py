"""
logz - Process-wide leveled logging

One logger per process, five severities, separate thresholds for stdout and
a configured output, optional caller file:line and stack dumps.

Usage:
    import logz
    from logz import LogLevel

    logz.init(open("app.log", "a"), LogLevel.INFO, LogLevel.WARNING, LogLevel.ERROR)
    logz.info("Started")
    logz.errorf("Request %s failed", request_id)  # also dumps the stack
    logz.close()

Configuration:
    # Via environment variables
    export LOGZ_STD_LEVEL=info
    export LOGZ_OUTPUT=file
    export LOGZ_FILE=/var/log/app.log

    # Via configuration file
    from logz.config import LoggingConfig
    LoggingConfig.setup_logging(config_path="logz_config.yml")
"""

__version__ = "1.0.0"

from logz.levels import LogLevel, get_log_level, get_log_prefix
from logz.logger import AlreadyInitializedError, Logz, LogzError, NotInitializedError
from logz.multiwriter import MultiWriter, multi_writer

__all__ = [
    "AlreadyInitializedError",
    "LogLevel",
    "Logz",
    "LogzError",
    "MultiWriter",
    "NotInitializedError",
    "close",
    "critical",
    "criticalf",
    "error",
    "errorf",
    "get_default_logger",
    "get_log_level",
    "get_log_prefix",
    "info",
    "infof",
    "init",
    "log",
    "logf",
    "multi_writer",
    "trace",
    "tracef",
    "warning",
    "warningf",
]

_default = Logz()

init = _default.init
close = _default.close
log = _default.log
logf = _default.logf
trace = _default.trace
tracef = _default.tracef
info = _default.info
infof = _default.infof
warning = _default.warning
warningf = _default.warningf
error = _default.error
errorf = _default.errorf
critical = _default.critical
criticalf = _default.criticalf


def get_default_logger() -> Logz:
    """Return the process-wide logger behind the module level functions"""
    return _default
