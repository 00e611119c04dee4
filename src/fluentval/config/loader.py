"""Settings loader for fluentval.

Reads message overrides and the default label from a YAML file, applies
``FLUENTVAL_*`` environment variables, and validates the result into a
ValidatorSettings instance.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from fluentval.config.defaults import DEFAULT_SETTINGS, ENV_VAR_MAP
from fluentval.config.validator import flatten_settings_errors
from fluentval.lib.errors import ConfigError, FileNotFoundError
from fluentval.models.config import ValidatorSettings

logger = logging.getLogger(__name__)

SETTINGS_FILE_NAMES = ("fluentval.yml", "fluentval.yaml")


def _get_env_value(
    field_name: str, env_vars: os._Environ[str] | dict[str, str]
) -> str | None:
    """Get the environment override for a settings field, if set and non-empty."""
    env_var_name = ENV_VAR_MAP.get(field_name)
    if not env_var_name:
        return None
    value = env_vars.get(env_var_name)
    return value if value else None


class ConfigLoader:
    """Loads ValidatorSettings from YAML files and the environment.

    Settings precedence (highest to lowest):
    1. Explicit overrides passed to load_settings()
    2. The YAML settings file
    3. Environment variables (FLUENTVAL_*)
    4. Built-in defaults
    """

    def __init__(self, env: dict[str, str] | None = None) -> None:
        """Initialize the loader.

        Args:
            env: Environment mapping to read overrides from (defaults to
                os.environ)
        """
        self._env = env if env is not None else os.environ

    def parse_yaml(self, file_path: str | Path) -> dict[str, Any]:
        """Parse a YAML settings file into a dictionary.

        Args:
            file_path: Path to the YAML file

        Returns:
            Parsed mapping, or an empty dict for an empty file

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigError: If parsing fails or the document is not a mapping
        """
        path = Path(file_path)

        try:
            with open(path, encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except OSError as e:
            raise FileNotFoundError(
                str(file_path),
                f"Settings file not found at {file_path}. "
                f"Please ensure the file exists at this path.",
            ) from e
        except yaml.YAMLError as e:
            raise ConfigError(
                "yaml_parse",
                f"Failed to parse YAML file {file_path}: {str(e)}",
            ) from e

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigError(
                "yaml_parse",
                f"Settings file {file_path} must contain a mapping, "
                f"got {type(content).__name__}",
            )
        return content

    def find_settings_file(self, directory: str | Path) -> Path | None:
        """Find fluentval.yml or fluentval.yaml in a directory.

        The .yml file wins when both exist.

        Args:
            directory: Directory to search

        Returns:
            Path to the settings file, or None if neither exists
        """
        base = Path(directory)
        candidates = [base / name for name in SETTINGS_FILE_NAMES]
        existing = [path for path in candidates if path.is_file()]

        if not existing:
            return None
        if len(existing) > 1:
            logger.info(
                f"Both {existing[0]} and {existing[1]} exist. "
                f"Using {existing[0]} (prefer .yml extension)."
            )
        return existing[0]

    def load_settings(
        self,
        file_path: str | Path | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> ValidatorSettings:
        """Resolve settings from defaults, environment, file and overrides.

        Args:
            file_path: YAML settings file. When None, nothing is read from disk
            overrides: Highest-priority values (e.g. from CLI flags); None
                values are ignored

        Returns:
            Validated ValidatorSettings

        Raises:
            FileNotFoundError: If file_path is given but does not exist
            ConfigError: If the file cannot be parsed or fails validation
        """
        resolved: dict[str, Any] = dict(DEFAULT_SETTINGS)
        resolved["messages"] = {}

        for field_name in ENV_VAR_MAP:
            env_value = _get_env_value(field_name, self._env)
            if env_value is not None:
                resolved[field_name] = env_value

        source = "defaults"
        if file_path is not None:
            file_settings = self.parse_yaml(file_path)
            file_messages = file_settings.pop("messages", None) or {}
            if not isinstance(file_messages, dict):
                raise ConfigError(
                    "messages",
                    f"'messages' in {file_path} must be a mapping of "
                    f"message name to template",
                )
            resolved.update(file_settings)
            resolved["messages"].update(file_messages)
            source = str(file_path)

        for key, value in (overrides or {}).items():
            if value is None:
                continue
            if key == "messages":
                resolved["messages"].update(value)
            else:
                resolved[key] = value

        try:
            settings = ValidatorSettings(**resolved)
        except PydanticValidationError as e:
            error_text = "\n".join(flatten_settings_errors(e))
            raise ConfigError(
                "settings_validation",
                f"Invalid settings from {source}:\n{error_text}",
            ) from e

        logger.debug(
            f"Loaded settings from {source} "
            f"({len(settings.messages)} message override(s))"
        )
        return settings


def load_settings(
    file_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> ValidatorSettings:
    """Load settings with a fresh ConfigLoader reading os.environ."""
    return ConfigLoader().load_settings(file_path, overrides)
