"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from simple_event_tester.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from simple_event_tester.configuration.loader import load_configuration


def test_build_placeholder_configuration_contains_all_supported_sections() -> None:
    scaffold = build_placeholder_configuration()

    assert "waiting:" in scaffold
    assert "identity:" in scaffold
    assert "logging:" in scaffold
    assert "<OPTIONAL>" in scaffold


def test_written_scaffold_loads_as_the_default_configuration(tmp_path: Path) -> None:
    output_path = tmp_path / "event-tester.yaml"

    written_path = write_placeholder_configuration(output_path)
    configuration = load_configuration(written_path)

    assert written_path == output_path.resolve()
    assert configuration.waiting.default_time_limit_ms == 5000
    assert configuration.waiting.strict_length is False
    assert configuration.identity.user_id is None
    assert configuration.identity.channel_id is None
    assert configuration.logging.level == "WARNING"


def test_write_placeholder_configuration_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "event-tester.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(output_path)
    assert output_path.read_text(encoding="utf-8") == "existing"
