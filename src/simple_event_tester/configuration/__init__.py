"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration, resolve_log_level
from .runtime_settings import (
    DEFAULT_TIME_LIMIT_MS,
    ClientIdentity,
    Configuration,
    LoggingSettings,
    WaitingSettings,
)

__all__ = [
    "Configuration",
    "ClientIdentity",
    "LoggingSettings",
    "WaitingSettings",
    "DEFAULT_TIME_LIMIT_MS",
    "ConfigurationError",
    "load_configuration",
    "resolve_log_level",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
