"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_TIME_LIMIT_MS = 5000
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class WaitingSettings:
    """Defaults applied by the convenience waiters."""

    default_time_limit_ms: int = DEFAULT_TIME_LIMIT_MS
    strict_length: bool = False


@dataclass(frozen=True)
class ClientIdentity:
    """Default author, channel and guild filled into message mocks."""

    user_id: str | None = None
    channel_id: str | None = None
    guild_id: str | None = None


@dataclass(frozen=True)
class LoggingSettings:
    """Logging configuration for CLI runs."""

    level: str = DEFAULT_LOG_LEVEL


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None
    waiting: WaitingSettings = field(default_factory=WaitingSettings)
    identity: ClientIdentity = field(default_factory=ClientIdentity)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
