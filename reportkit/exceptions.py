"""Exception hierarchy for reportkit.

Exception Hierarchy:
    ReportkitError (base)
    └── ReportedError - default fatal error raised from the command line

Usage:
    from reportkit import ErrorReporter, ReportedError

    reporter = ErrorReporter(fatal=True, error_class=ReportedError)
    try:
        reporter.report("disk full", {"path": "/var"})
    except ReportedError as e:
        ...

Configuration mistakes (invalid setting values) are never raised; the
reporter writes a warning and keeps the previous value.
"""

from typing import Any


class ReportkitError(Exception):
    """Base exception for all reportkit errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ReportedError(ReportkitError):
    """An error raised by a fatal report.

    Constructible with the report message alone, so it can be used as a
    reporter's ``error_class``.
    """

    pass
