"""The per-call record produced by ErrorReporter.report()."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Type

if TYPE_CHECKING:
    from reportkit.reporter import ErrorReporter


@dataclass
class ReportRecord:
    """Everything one report() call resolved.

    The reporter builds the record, then hands it to the ``on_error`` hook
    before any output. The hook may change any field; setting ``done`` to
    True suppresses all output and raising for this call.

    Attributes:
        msg: The reported message
        info: Extra values to log, always a list
        opts: The per-call overrides exactly as the caller passed them
        fatal: Raise ``error_class(msg)`` after output?
        log: Include ``info`` in the output?
        debug: Append the record itself to the output?
        error_class: Exception class raised when fatal
        reporter: The reporter that produced this record
        done: Set by a hook to stop dispatch
    """

    msg: str
    info: List[Any] = field(default_factory=list)
    opts: Dict[str, Any] = field(default_factory=dict)
    fatal: bool = False
    log: bool = True
    debug: bool = False
    error_class: Type[Exception] = Exception
    reporter: Optional["ErrorReporter"] = field(default=None, repr=False, compare=False)
    done: bool = False
