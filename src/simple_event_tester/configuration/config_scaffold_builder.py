"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "event-tester.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for simple-event-tester.
# Every section is optional; the values below are the defaults.
# Replace <OPTIONAL> placeholders only when your setup needs them.

waiting:
  # Time limit used by the message/reaction waiters when none is passed.
  default_time_limit_ms: 5000
  # Require sequences and keyed maps to have exactly the spec's length.
  strict_length: false

identity:
  # Default author, channel and guild filled into message mocks (base mode).
  user_id: "<OPTIONAL>"
  channel_id: "<OPTIONAL>"
  guild_id: "<OPTIONAL>"

logging:
  # One of CRITICAL, ERROR, WARNING, INFO, DEBUG.
  level: "WARNING"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
