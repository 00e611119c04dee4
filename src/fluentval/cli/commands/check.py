"""Click commands for validating values from the shell.

Implements ``fluentval check`` (run rules against one value) and
``fluentval checks`` (list registered checks and their messages).
"""

import json
import sys
from pathlib import Path

import click

from fluentval.checks import available_checks
from fluentval.cli.rules import VALUE_TYPES, coerce_value, parse_rule
from fluentval.config.loader import ConfigLoader
from fluentval.lib.errors import ConfigError, FileNotFoundError, FluentValError
from fluentval.lib.logging_config import get_logger
from fluentval.lib.ui.colors import status_label
from fluentval.messages import FALLBACK_TEMPLATE
from fluentval.validator import Validator

logger = get_logger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def _build_validator(config_file: str | None) -> Validator:
    """Load settings and build a Validator.

    Without --config, a fluentval.yml or fluentval.yaml in the working
    directory is used when present.
    """
    loader = ConfigLoader()
    settings_path: str | Path | None = config_file
    if settings_path is None:
        settings_path = loader.find_settings_file(Path.cwd())
    settings = loader.load_settings(settings_path)
    logger.debug(f"Using default label {settings.default_label!r}")
    return Validator.from_settings(settings)


@click.command(name="check")
@click.argument("value", required=False)
@click.option(
    "--rule",
    "-r",
    "rules",
    multiple=True,
    required=True,
    help="Check to run, as NAME or NAME:ARG (repeatable)",
)
@click.option("--label", "-l", default=None, help="Label used in error messages")
@click.option(
    "--type",
    "value_type",
    type=click.Choice(VALUE_TYPES),
    default="str",
    show_default=True,
    help="Type to convert VALUE to before validating",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(),
    default=None,
    help="Path to a fluentval.yml settings file",
)
@click.option("--json", "as_json", is_flag=True, help="Output the result as JSON")
def check(
    value: str | None,
    rules: tuple[str, ...],
    label: str | None,
    value_type: str,
    config_file: str | None,
    as_json: bool,
) -> None:
    """Validate VALUE against one or more rules.

    Exit code is 0 when the value is valid, 1 when it is not, and 2 for
    bad rules, values or settings.

    \b
    EXAMPLES:

        fluentval check 18 --type int -r min:16 -r max:56 --label age
        fluentval check info@example.com -r required -r isEmail
        fluentval check admin -r noMatch:root,admin --json
    """
    try:
        validator = _build_validator(config_file)
        parsed_rules = [parse_rule(rule) for rule in rules]
        subject = coerce_value(value, value_type)
    except (ConfigError, FileNotFoundError) as e:
        logger.error(f"Configuration error: {e}")
        click.secho("Error: Failed to load settings", fg="red", err=True)
        click.echo(f"  {str(e)}", err=True)
        sys.exit(EXIT_USAGE)
    except FluentValError as e:
        click.secho(f"Error: {str(e)}", fg="red", err=True)
        sys.exit(EXIT_USAGE)
    except ValueError:
        click.secho(
            f"Error: cannot convert {value!r} to {value_type}", fg="red", err=True
        )
        sys.exit(EXIT_USAGE)

    validator.validate(subject, label)
    for rule in parsed_rules:
        validator.check(rule.name, *rule.args)
    valid = validator.is_valid()
    errors = validator.get_errors()

    if as_json:
        click.echo(json.dumps({"valid": valid, "errors": errors}, indent=2))
    else:
        click.echo(status_label(valid))
        for message in errors:
            click.echo(f"  - {message}")

    sys.exit(EXIT_VALID if valid else EXIT_INVALID)


@click.command(name="checks")
@click.option(
    "--config",
    "config_file",
    type=click.Path(),
    default=None,
    help="Path to a fluentval.yml settings file",
)
def list_checks(config_file: str | None) -> None:
    """List the available checks and the messages they record."""
    try:
        validator = _build_validator(config_file)
    except (ConfigError, FileNotFoundError) as e:
        click.secho(f"Error: {str(e)}", fg="red", err=True)
        sys.exit(EXIT_USAGE)

    for name in available_checks():
        template = validator.messages.get(name, FALLBACK_TEMPLATE)
        click.echo(f"{name:<18} {template}")
