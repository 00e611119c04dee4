"""Settings loading for fluentval validators.

Main components:
- ConfigLoader: Load settings from fluentval.yml and FLUENTVAL_* variables
- load_settings: One-call helper using the process environment
- Default values and environment variable names
"""

from fluentval.config.defaults import DEFAULT_LABEL, ENV_VAR_MAP
from fluentval.config.loader import ConfigLoader, load_settings

__all__ = [
    "ConfigLoader",
    "load_settings",
    "DEFAULT_LABEL",
    "ENV_VAR_MAP",
]
