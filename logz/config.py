"""
Configuration System - Logging configuration for logz

Loads settings from a YAML file and environment variables, resolves the
configured output and initializes a logger from them.
"""

import os
import re
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from logz.constants import DEFAULT_OUT_LEVEL, DEFAULT_STACK_LEVEL, DEFAULT_STD_LEVEL, FAULT_MAPPING, LEVEL_NAMES


class LoggingConfig:
    """
    Centralized logging configuration for logz.

    Reads from file, environment variables, or explicit overrides with
    proper precedence handling.

    Example configuration file (logz_config.yml):
        logging:
          std_level: info       # minimum level written to stdout
          out_level: warning    # minimum level written to the output
          stack_level: error    # minimum level that dumps a stack trace
          output: file          # stderr, stdout, file
          file_path: /var/log/app/app.log
          log_file_name: true   # include caller file:line
    """

    DEFAULT_CONFIG = {
        "std_level": DEFAULT_STD_LEVEL,
        "out_level": DEFAULT_OUT_LEVEL,
        "stack_level": DEFAULT_STACK_LEVEL,
        "output": "stderr",  # stderr, stdout, file
        "file_path": None,
        "log_file_name": False,
    }

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> Dict[str, Any]:
        """
        Load configuration from multiple sources.

        Precedence: Overrides > Environment > File > Default

        Args:
            config_path: Path to configuration file

        Returns:
            Configuration dictionary

        Example:
            config = LoggingConfig.load("logz_config.yml")
        """
        config = cls.DEFAULT_CONFIG.copy()

        # 1. Load from file
        if config_path and Path(config_path).exists():
            file_config = cls._load_from_file(config_path)
            if file_config and "logging" in file_config:
                config.update(file_config["logging"])

        # 2. Override with environment variables
        config = cls._apply_env_overrides(config)

        # 3. Substitute environment variables in values
        config = cls._substitute_env_vars(config)

        return config

    @classmethod
    def _load_from_file(cls, config_path: str) -> Optional[Dict[str, Any]]:
        """
        Load configuration from YAML file.

        Returns:
            Configuration dictionary or None if the file can't be parsed
        """
        try:
            with open(config_path) as f:
                return yaml.safe_load(f)
        except (yaml.YAMLError, OSError) as e:
            sys.stderr.write(FAULT_MAPPING["config_file_parse_issue"].format(file_path=config_path, error=e) + "\n")
            return None

    @classmethod
    def _apply_env_overrides(cls, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides.

        Environment variables:
            LOGZ_STD_LEVEL: Minimum level for stdout (trace, info, warning, error, fatal)
            LOGZ_OUT_LEVEL: Minimum level for the configured output
            LOGZ_STACK_LEVEL: Minimum level that dumps a stack trace
            LOGZ_OUTPUT: Output destination (stderr, stdout, file)
            LOGZ_FILE: Log file path
            LOGZ_LOG_FILE_NAME: Include caller file:line (true, false, yes, no, 1, 0)
        """
        env_mappings = {
            "LOGZ_STD_LEVEL": "std_level",
            "LOGZ_OUT_LEVEL": "out_level",
            "LOGZ_STACK_LEVEL": "stack_level",
            "LOGZ_OUTPUT": "output",
            "LOGZ_FILE": "file_path",
        }

        for env_var, config_key in env_mappings.items():
            if env_var in os.environ:
                config[config_key] = os.environ[env_var]

        if "LOGZ_LOG_FILE_NAME" in os.environ:
            config["log_file_name"] = cls.parse_bool(os.environ["LOGZ_LOG_FILE_NAME"])

        return config

    @classmethod
    def _substitute_env_vars(cls, config: Any) -> Any:
        """
        Recursively substitute environment variables in configuration.

        Supports ${VAR_NAME} syntax. Unknown variables are left as-is.

        Example:
            file_path: /var/log/${ENVIRONMENT}/app.log
            With ENVIRONMENT=production, becomes:
            file_path: /var/log/production/app.log
        """
        if isinstance(config, str):

            def replace_env(match):
                var_name = match.group(1)
                return os.environ.get(var_name, match.group(0))

            return re.sub(r"\$\{([^}]+)\}", replace_env, config)

        elif isinstance(config, dict):
            return {k: cls._substitute_env_vars(v) for k, v in config.items()}

        elif isinstance(config, list):
            return [cls._substitute_env_vars(item) for item in config]

        else:
            return config

    @classmethod
    def parse_bool(cls, value: Any) -> bool:
        """
        Interpret a flag from YAML, the environment or an override.

        Strings are matched case-insensitively against true, yes, 1 and on;
        anything else (including "false" and "no") is False.
        """
        if isinstance(value, str):
            return value.strip().lower() in ("true", "yes", "1", "on")
        return bool(value)

    @classmethod
    def resolve_output(cls, config: Dict[str, Any]):
        """
        Build the configured output destination.

        Returns:
            sys.stdout, sys.stderr or a FileDestination
        """
        from logz.file_handler import FileDestination

        output_type = config.get("output", "stderr")

        if output_type == "stdout":
            return sys.stdout
        if output_type == "file":
            file_path = config.get("file_path")
            if not file_path:
                sys.stderr.write(FAULT_MAPPING["missing_file_path"] + "\n")
                return sys.stderr
            return FileDestination(file_path)
        return sys.stderr

    @classmethod
    def setup_logging(cls, config_path: Optional[str] = None, logger=None, **overrides):
        """
        Initialize a logger based on configuration.

        Level names go through get_log_level, so unknown names fall back to
        trace with a warning.

        Args:
            config_path: Path to configuration file
            logger: Logz instance to initialize (default: the process-wide one)
            **overrides: Configuration overrides (e.g., std_level="trace")

        Returns:
            The initialized Logz instance

        Raises:
            AlreadyInitializedError: the logger is already initialized

        Example:
            LoggingConfig.setup_logging(
                config_path="logz_config.yml",
                output="file",
                file_path="/tmp/app.log",
            )
        """
        import logz
        from logz.levels import get_log_level

        config = cls.load(config_path)
        config.update({key: value for key, value in overrides.items() if value is not None})

        if logger is None:
            logger = logz.get_default_logger()

        return logger.init(
            cls.resolve_output(config),
            get_log_level(config["std_level"]),
            get_log_level(config["out_level"]),
            get_log_level(config["stack_level"]),
            log_file_name=cls.parse_bool(config.get("log_file_name", False)),
        )

    @classmethod
    def validate(cls, config: Dict[str, Any]) -> tuple:
        """
        Validate configuration.

        Returns:
            Tuple of (is_valid, error_message)

        Example:
            is_valid, error = LoggingConfig.validate(config)
            if not is_valid:
                print(f"Invalid configuration: {error}")
        """
        valid_levels = sorted(LEVEL_NAMES)
        for key in ("std_level", "out_level", "stack_level"):
            level = config.get(key, cls.DEFAULT_CONFIG[key])
            if level not in LEVEL_NAMES:
                return False, f"Invalid {key} '{level}'. Must be one of: {', '.join(valid_levels)}"

        valid_outputs = ["stderr", "stdout", "file"]
        output = config.get("output", "stderr")
        if output not in valid_outputs:
            return False, f"Invalid output '{output}'. Must be one of: {', '.join(valid_outputs)}"

        if output == "file" and not config.get("file_path"):
            return False, "file_path required when output is 'file'"

        return True, ""
