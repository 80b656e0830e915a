"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from simple_event_tester.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    load_configuration,
    resolve_log_level,
    write_placeholder_configuration,
)
from simple_event_tester.spec_matching import (
    MatchFail,
    SpecDefinitionError,
    SpecDocumentError,
    build_spec,
    load_document,
    match,
)

_LOG_LEVEL_CHOICES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="simple-event-tester")
def cli() -> None:
    """Structural event matching utility for async client tests."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML configuration with defaults and guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="match")
@click.option(
    "--actual",
    "actual_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to a YAML/JSON document holding the actual value",
)
@click.option(
    "--spec",
    "spec_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to a YAML/JSON document holding the partial spec",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML/JSON configuration file",
)
@click.option(
    "--strict-length",
    is_flag=True,
    default=False,
    help="Require sequences and keyed maps to have exactly the spec's length.",
)
@click.option(
    "--log-level",
    "log_level",
    required=False,
    type=click.Choice(_LOG_LEVEL_CHOICES, case_sensitive=False),
    help="Override the configured log level",
)
def match_documents(
    actual_path: str,
    spec_path: str,
    config_path: str | None,
    strict_length: bool,
    log_level: str | None,
) -> None:
    """Match an actual document against a partial spec document."""
    try:
        configuration = (
            load_configuration(config_path) if config_path else Configuration(path=None)
        )
        _configure_logging(log_level or configuration.logging.level)
        actual = load_document(actual_path)
        spec = build_spec(load_document(spec_path))
    except (ConfigurationError, SpecDocumentError, SpecDefinitionError, OSError) as exc:
        raise CliError(str(exc)) from exc

    outcome = match(actual, spec, strict_length or configuration.waiting.strict_length)
    if isinstance(outcome, MatchFail):
        raise CliError(f"mismatch: {outcome.message}")
    click.echo("match")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=resolve_log_level(level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
