"""Timeout diagnostic report formatting."""

from __future__ import annotations

from collections.abc import Sequence

from simple_event_tester.spec_matching.spec_models import Spec
from simple_event_tester.spec_matching.spec_rendering import format_spec, render_value

from .wait_outcomes import CheckedOccurrence


def format_timeout_report(
    event_name: str,
    spec: Spec,
    time_limit_ms: float,
    checked: Sequence[CheckedOccurrence],
) -> str:
    """Build the single human-readable report of a timed out wait.

    Every checked occurrence is listed in arrival order with its failure
    message and rendered candidate value.
    """
    lines = [
        f"Matching '{event_name}' event was not found within the time limit "
        f"of {time_limit_ms} ms for:",
        format_spec(spec),
        "",
        f"Checked occurrences ({len(checked)}):",
    ]
    if not checked:
        lines.append("  (none)")
    for position, occurrence in enumerate(checked, start=1):
        lines.append(f"  #{position}: {occurrence.failure_message}")
        lines.append(f"      {render_value(occurrence.candidate)}")
    return "\n".join(lines)
