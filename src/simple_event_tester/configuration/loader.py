"""Configuration loader service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_TIME_LIMIT_MS,
    ClientIdentity,
    Configuration,
    LoggingSettings,
    WaitingSettings,
)

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return Configuration(
        path=path,
        waiting=_parse_waiting_section(parsed.get("waiting")),
        identity=_parse_identity_section(parsed.get("identity")),
        logging=_parse_logging_section(parsed.get("logging")),
    )


def _parse_waiting_section(value: Any) -> WaitingSettings:
    section = _optional_mapping(value, "waiting")
    default_time_limit_ms = _require_positive_int(
        section.get("default_time_limit_ms", DEFAULT_TIME_LIMIT_MS),
        "waiting.default_time_limit_ms",
    )
    strict_length = _require_bool(section.get("strict_length", False), "waiting.strict_length")
    return WaitingSettings(
        default_time_limit_ms=default_time_limit_ms,
        strict_length=strict_length,
    )


def _parse_identity_section(value: Any) -> ClientIdentity:
    section = _optional_mapping(value, "identity")
    return ClientIdentity(
        user_id=_optional_identifier(section.get("user_id"), "identity.user_id"),
        channel_id=_optional_identifier(section.get("channel_id"), "identity.channel_id"),
        guild_id=_optional_identifier(section.get("guild_id"), "identity.guild_id"),
    )


def _parse_logging_section(value: Any) -> LoggingSettings:
    section = _optional_mapping(value, "logging")
    level = section.get("level", DEFAULT_LOG_LEVEL)
    if not isinstance(level, str) or level.strip().upper() not in _LOG_LEVELS:
        raise ConfigurationError(f"logging.level must be one of: {', '.join(_LOG_LEVELS)}.")
    return LoggingSettings(level=level.strip().upper())


def resolve_log_level(level: str) -> int:
    """Translate a validated level name into a logging level number."""
    return logging.getLevelName(level.upper())


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _optional_identifier(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, str | int):
        raise ConfigurationError(f"{field_name} must be a string or integer.")
    stripped = str(value).strip()
    if stripped in ("", "<OPTIONAL>"):
        return None
    return stripped


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
