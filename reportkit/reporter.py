"""
The ErrorReporter: decides per call whether to log, add debug detail, or raise

A reporter holds default settings that can be changed at any time and
overridden for a single report() call. Each call builds a ReportRecord,
lets an optional hook adjust it, writes to the output sink, raises when
the record is fatal, and otherwise archives the record in ``history``.

Usage:
    reporter = ErrorReporter(log=True)
    reporter.report("cache miss", ["user", 42])

    reporter.configure(fatal=True, error_class=RuntimeError)
    reporter.report("cannot continue")  # raises RuntimeError
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Type

from reportkit.channels import DEBUG, ERROR, TRACE, ConsoleSink, OutputSink
from reportkit.config.constants import (
    DEFAULT_SETTINGS,
    FLAG_NAMES,
    NO_MSG,
    OVERRIDABLE_NAMES,
    SETTING_NAMES,
)
from reportkit.config.settings import settings_from_env
from reportkit.record import ReportRecord
from reportkit.types import Hook, Setting, StaticSetting, as_setting, is_bool, is_error_class

logger = logging.getLogger(__name__)

_OVERRIDE_CHECKS = {
    "fatal": is_bool,
    "log": is_bool,
    "debug": is_bool,
    "error_class": is_error_class,
}


class ErrorReporter:
    """Configurable error reporting helper.

    Args:
        config: Optional mapping of initial settings
        sink: Output sink; defaults to a ConsoleSink on stderr
        **settings: Initial settings, applied over ``config``

    Recognized settings are ``fatal``, ``log``, ``debug``, ``on_error`` and
    ``error_class``; anything else is ignored. Invalid values are rejected
    with a warning on the sink's error channel and the default is kept.
    """

    is_error_class = staticmethod(is_error_class)

    def __init__(
        self,
        config: Optional[Mapping[str, Any]] = None,
        *,
        sink: Optional[OutputSink] = None,
        **settings: Any,
    ):
        self.sink = sink if sink is not None else ConsoleSink()
        self.history: List[ReportRecord] = []

        self._flags: Dict[str, Setting] = {
            name: StaticSetting(DEFAULT_SETTINGS[name]) for name in FLAG_NAMES
        }
        self._on_error: Optional[Hook] = DEFAULT_SETTINGS["on_error"]
        self._error_class: Type[Exception] = DEFAULT_SETTINGS["error_class"]

        options = {**(config or {}), **settings}
        ignored = [str(name) for name in options if name not in SETTING_NAMES]
        if ignored:
            logger.debug(f"Ignoring unknown reporter options: {', '.join(ignored)}")
        self.configure(**{name: value for name, value in options.items() if name in SETTING_NAMES})

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        sink: Optional[OutputSink] = None,
        **settings: Any,
    ) -> "ErrorReporter":
        """Build a reporter from REPORTKIT_* environment variables.

        Keyword settings take precedence over the environment.
        """
        return cls({**settings_from_env(environ), **settings}, sink=sink)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(fatal={self._flags['fatal']!r}, "
            f"log={self._flags['log']!r}, debug={self._flags['debug']!r}, "
            f"error_class={self._error_class.__name__}, "
            f"reported={len(self.history)})"
        )

    # -------------------------------------------------------------------------
    # Settings
    # -------------------------------------------------------------------------

    def _warn_invalid(self, name: str, value: Any) -> None:
        self.sink.error("invalid", name, "value", value)

    def _get_flag(self, name: str) -> bool:
        return self._flags[name].resolve(name, self)

    def _set_flag(self, name: str, value: Any) -> None:
        setting = as_setting(value)
        if setting is None:
            self._warn_invalid(name, value)
            return
        self._flags[name] = setting

    def setting(self, name: str) -> Setting:
        """Return the stored (unresolved) setting for fatal, log or debug."""
        if name not in self._flags:
            raise ValueError(f"Not a boolean setting: {name!r}")
        return self._flags[name]

    def configure(self, **settings: Any) -> "ErrorReporter":
        """Apply several settings at once and return the reporter."""
        for name, value in settings.items():
            if name not in SETTING_NAMES:
                logger.debug(f"Ignoring unknown reporter option: {name}")
                continue
            setattr(self, name, value)
        return self

    @property
    def fatal(self) -> bool:
        """Raise ``error_class`` after output?"""
        return self._get_flag("fatal")

    @fatal.setter
    def fatal(self, value: Any) -> None:
        self._set_flag("fatal", value)

    @property
    def log(self) -> bool:
        """Include the extra info values in output?"""
        return self._get_flag("log")

    @log.setter
    def log(self, value: Any) -> None:
        self._set_flag("log", value)

    @property
    def debug(self) -> bool:
        """Append the full record to output?"""
        return self._get_flag("debug")

    @debug.setter
    def debug(self, value: Any) -> None:
        self._set_flag("debug", value)

    @property
    def on_error(self) -> Optional[Hook]:
        """Hook called with each record before dispatch, or None."""
        return self._on_error

    @on_error.setter
    def on_error(self, value: Any) -> None:
        if value is None or callable(value):
            self._on_error = value
        else:
            self._warn_invalid("on_error", value)

    @property
    def error_class(self) -> Type[Exception]:
        """Exception class raised by fatal reports."""
        return self._error_class

    @error_class.setter
    def error_class(self, value: Any) -> None:
        if is_error_class(value):
            self._error_class = value
        else:
            self._warn_invalid("error_class", value)

    # -------------------------------------------------------------------------
    # Reporting
    # -------------------------------------------------------------------------

    def _resolve_override(self, name: str, opts: Mapping[str, Any]) -> Any:
        if name in opts:
            value = opts[name]
            if _OVERRIDE_CHECKS[name](value):
                return value
            self._warn_invalid(name, value)
        return getattr(self, name)

    def report(
        self,
        msg: str = NO_MSG,
        info: Any = None,
        opts: Optional[Mapping[str, Any]] = None,
    ) -> ReportRecord:
        """Report an error.

        Args:
            msg: The error message
            info: Extra values to log; anything other than a list or tuple
                is wrapped in a single-element list
            opts: Per-call overrides for ``fatal``, ``log``, ``debug`` and
                ``error_class``; invalid overrides are warned about and the
                current setting is used instead

        Returns:
            The record for this call, also appended to ``history``

        Raises:
            The resolved ``error_class`` with ``msg`` when the record is
            fatal. The record of a raising call is not archived.
        """
        if info is None:
            info = []
        opts = {} if opts is None else opts

        record = ReportRecord(
            msg=msg,
            info=list(info) if isinstance(info, (list, tuple)) else [info],
            opts=opts,
            reporter=self,
        )
        for name in OVERRIDABLE_NAMES:
            setattr(record, name, self._resolve_override(name, opts))

        if self._on_error is not None:
            self._on_error(record)

        if record.done:
            logger.debug(f"Report suppressed by hook: {record.msg!r}")
        else:
            self._dispatch(record)

        self.history.append(record)
        return record

    def _dispatch(self, record: ReportRecord) -> None:
        """Write the record to its channel, then raise if it is fatal."""
        # A fatal record raises with its own traceback, so it never traces.
        channel = DEBUG if record.fatal else ERROR
        if record.debug and not record.fatal:
            channel = TRACE

        args: List[Any] = []
        if not record.fatal:
            args.append(record.msg)
        if record.log:
            args.extend(record.info)
        if record.debug:
            args.append(record)

        if args:
            self.sink.write(channel, *args)

        if record.fatal:
            logger.debug(f"Raising {record.error_class.__name__} for report: {record.msg!r}")
            raise record.error_class(record.msg)
