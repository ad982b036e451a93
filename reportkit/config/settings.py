"""Environment-variable configuration for reportkit."""

import logging
import os
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .constants import ENV_VAR_DEFINITIONS, FALSE_VALUES, TRUE_VALUES

logger = logging.getLogger(__name__)


def parse_bool(value: str) -> bool:
    """Parse one of the accepted boolean spellings.

    Raises:
        ValueError: If the value is not a recognized spelling.
    """
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ValueError(f"Not a boolean value: {value!r}")


def validate_env_var(name: str, value: Optional[str]) -> Tuple[bool, Optional[str]]:
    """Validate a single environment variable value.

    Args:
        name: The environment variable name.
        value: The current value (or None if not set).

    Returns:
        Tuple of (is_valid, error_message).
    """
    if name not in ENV_VAR_DEFINITIONS:
        return True, None  # Unknown vars are always valid

    if value is None:
        return True, None

    valid_values = ENV_VAR_DEFINITIONS[name].get("valid_values")
    if valid_values is None:
        return True, None

    if value.strip().lower() not in [v.lower() for v in valid_values]:
        return False, f"Invalid value '{value}' for {name}. Valid values: {list(valid_values)}"

    return True, None


def validate_all_env_vars(environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """Validate all reportkit environment variables.

    Returns:
        List of error messages (empty if all valid).
    """
    environ = os.environ if environ is None else environ
    errors = []
    for name in ENV_VAR_DEFINITIONS:
        is_valid, error = validate_env_var(name, environ.get(name))
        if not is_valid:
            errors.append(error)
    return errors


def settings_from_env(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Read reporter settings from the environment.

    Only variables that are set and valid contribute a setting. Invalid
    values are logged and skipped so a bad environment never stops a
    reporter from being built.
    """
    environ = os.environ if environ is None else environ
    settings: Dict[str, Any] = {}
    for name, definition in ENV_VAR_DEFINITIONS.items():
        value = environ.get(name)
        if value is None:
            continue
        is_valid, error = validate_env_var(name, value)
        if not is_valid:
            logger.warning(error)
            continue
        settings[definition["setting"]] = parse_bool(value)
    return settings
