"""Configuration for reportkit: constants, defaults and environment variables."""

from .constants import DEFAULT_SETTINGS, ENV_VAR_DEFINITIONS, NO_MSG
from .settings import parse_bool, settings_from_env, validate_all_env_vars, validate_env_var

__all__ = [
    "DEFAULT_SETTINGS",
    "ENV_VAR_DEFINITIONS",
    "NO_MSG",
    "parse_bool",
    "settings_from_env",
    "validate_all_env_vars",
    "validate_env_var",
]
