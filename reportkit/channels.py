"""Output sinks for ErrorReporter.

A sink provides the three console-style channels a report can be written to:

- ``error``: the standard error channel, used for non-fatal reports
- ``debug``: plain debug output, used when a fatal report will raise
- ``trace``: debug output followed by the current call stack

The reporter only chooses a channel and assembles the arguments; where the
output ends up is up to the sink.
"""

import logging
import traceback
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List, Optional, Tuple

from rich.console import Console
from rich.text import Text

ERROR = "error"
DEBUG = "debug"
TRACE = "trace"
CHANNELS = (ERROR, DEBUG, TRACE)

_PACKAGE_DIR = str(Path(__file__).resolve().parent)


def _caller_stack() -> List[str]:
    """Format the current stack without reportkit's own frames."""
    frames = [
        frame for frame in traceback.extract_stack()
        if not str(Path(frame.filename).resolve()).startswith(_PACKAGE_DIR)
    ]
    return traceback.format_list(frames)


class OutputSink(ABC):
    """Destination for reporter output."""

    @abstractmethod
    def error(self, *args: Any) -> None:
        """Write to the standard error channel."""
        ...

    @abstractmethod
    def debug(self, *args: Any) -> None:
        """Write debug output without a stack trace."""
        ...

    @abstractmethod
    def trace(self, *args: Any) -> None:
        """Write debug output followed by a stack trace."""
        ...

    def write(self, channel: str, *args: Any) -> None:
        """Write to a channel by name."""
        if channel not in CHANNELS:
            raise ValueError(f"Unknown channel: {channel!r}")
        getattr(self, channel)(*args)


class ConsoleSink(OutputSink):
    """Write reports to a Rich console on stderr."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True, color_system="auto")

    def error(self, *args: Any) -> None:
        self.console.print(*args, style="red", markup=False)

    def debug(self, *args: Any) -> None:
        self.console.print(*args, style="dim", markup=False)

    def trace(self, *args: Any) -> None:
        self.console.print(*args, style="dim", markup=False)
        stack = Text("Trace:\n", style="bold")
        stack.append("".join(_caller_stack()), style="dim")
        self.console.print(stack)


class LoggingSink(OutputSink):
    """Route reports through the standard logging module."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("reportkit.report")

    @staticmethod
    def _format(args: Tuple[Any, ...]) -> str:
        return " ".join(["%s"] * len(args))

    def error(self, *args: Any) -> None:
        self.logger.error(self._format(args), *args)

    def debug(self, *args: Any) -> None:
        self.logger.debug(self._format(args), *args)

    def trace(self, *args: Any) -> None:
        self.logger.debug(self._format(args), *args, stack_info=True)


class MemorySink(OutputSink):
    """Keep every write in memory as ``(channel, args)`` pairs."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []

    def error(self, *args: Any) -> None:
        self.calls.append((ERROR, args))

    def debug(self, *args: Any) -> None:
        self.calls.append((DEBUG, args))

    def trace(self, *args: Any) -> None:
        self.calls.append((TRACE, args))

    def on(self, channel: str) -> List[Tuple[Any, ...]]:
        """Return the argument tuples written to one channel."""
        return [args for name, args in self.calls if name == channel]

    def clear(self) -> None:
        self.calls.clear()
