LEVEL_PREFIXES = dict(
    TRACE="TRACE|",
    INFO=" INFO|",
    WARNING=" WARN|",
    ERROR="ERROR|",
    CRITICAL="FATAL|",
)

LEVEL_NAMES = dict(
    trace="TRACE",
    info="INFO",
    information="INFO",
    warning="WARNING",
    warn="WARNING",
    error="ERROR",
    fatal="CRITICAL",
)

FAULT_MAPPING = dict(
    not_initialized="Logz is not initialized",
    already_initialized="Logz is already initialized",
    invalid_log_level="Invalid LogLevel %s",
    config_file_parse_issue="Error loading config file {file_path}: {error}",
    missing_file_path="Warning: file output selected but no file_path specified, using stderr",
)

TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"

DEFAULT_STD_LEVEL = "info"
DEFAULT_OUT_LEVEL = "warning"
DEFAULT_STACK_LEVEL = "fatal"
