"""
Centralized constants for reportkit.

Default settings, the names the reporter recognizes, and the environment
variables that can seed a reporter's configuration.
"""

# =============================================================================
# REPORT DEFAULTS
# =============================================================================

NO_MSG = "unknown error [no msg]"  # Used when report() is called without a message

# Settings accepted by the constructor and configure()
SETTING_NAMES = ("fatal", "log", "debug", "on_error", "error_class")

# Settings that may be overridden per report() call
OVERRIDABLE_NAMES = ("fatal", "log", "debug", "error_class")

# Boolean-or-resolver settings
FLAG_NAMES = ("fatal", "log", "debug")

DEFAULT_SETTINGS = {
    "fatal": False,
    "log": True,
    "debug": False,
    "on_error": None,
    "error_class": Exception,
}

# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================

TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")

ENV_VAR_DEFINITIONS = {
    "REPORTKIT_FATAL": {
        "setting": "fatal",
        "description": "Raise the configured error class for every report",
        "default": "false",
        "valid_values": TRUE_VALUES + FALSE_VALUES,
    },
    "REPORTKIT_LOG": {
        "setting": "log",
        "description": "Include extra info values in console output",
        "default": "true",
        "valid_values": TRUE_VALUES + FALSE_VALUES,
    },
    "REPORTKIT_DEBUG": {
        "setting": "debug",
        "description": "Append the full report record to console output",
        "default": "false",
        "valid_values": TRUE_VALUES + FALSE_VALUES,
    },
}
