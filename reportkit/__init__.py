"""
reportkit - configurable error reporting helper
"""

from reportkit.channels import ConsoleSink, LoggingSink, MemorySink, OutputSink
from reportkit.config.constants import NO_MSG
from reportkit.exceptions import ReportedError, ReportkitError
from reportkit.record import ReportRecord
from reportkit.reporter import ErrorReporter
from reportkit.types import DynamicSetting, Setting, StaticSetting, is_error_class

__version__ = "0.3.0"

__all__ = [
    "ConsoleSink",
    "DynamicSetting",
    "ErrorReporter",
    "LoggingSink",
    "MemorySink",
    "NO_MSG",
    "OutputSink",
    "ReportRecord",
    "ReportedError",
    "ReportkitError",
    "Setting",
    "StaticSetting",
    "is_error_class",
]
