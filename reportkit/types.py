"""Setting variants and value predicates for reportkit.

The ``fatal``, ``log`` and ``debug`` settings hold either a fixed boolean or
a resolver callable that decides on demand. Both are represented by a
:class:`Setting` with a uniform ``resolve()`` so the reporter never has to
inspect what it stored.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Optional

if TYPE_CHECKING:
    from reportkit.record import ReportRecord
    from reportkit.reporter import ErrorReporter

# Called with the setting name; the result is coerced to bool.
Resolver = Callable[[str], Any]

# Called with the pending record before dispatch; may mutate it in place.
Hook = Callable[["ReportRecord"], None]


def is_bool(value: Any) -> bool:
    """Return True for real booleans only (not ints or truthy strings)."""
    return isinstance(value, bool)


def is_error_class(value: Any) -> bool:
    """Return True if value is Exception or a subclass of it.

    Only classes pass; exception instances are rejected. Use
    ``isinstance(value, Exception)`` to test instances.
    """
    return isinstance(value, type) and issubclass(value, Exception)


class Setting(ABC):
    """A boolean setting that can be resolved for a reporter."""

    @abstractmethod
    def resolve(self, name: str, reporter: "ErrorReporter") -> bool:
        """Return the current boolean value of this setting."""
        ...


@dataclass(frozen=True)
class StaticSetting(Setting):
    """A setting with a fixed value."""

    value: bool

    def resolve(self, name: str, reporter: "ErrorReporter") -> bool:
        return self.value


@dataclass(frozen=True)
class DynamicSetting(Setting):
    """A setting computed by a resolver each time it is read."""

    resolver: Resolver

    def resolve(self, name: str, reporter: "ErrorReporter") -> bool:
        return bool(self.resolver(name))


def as_setting(value: Any) -> Optional[Setting]:
    """Wrap a bool or callable in its Setting variant.

    Returns None when the value is neither, so callers can reject it.
    """
    if isinstance(value, Setting):
        return value
    if is_bool(value):
        return StaticSetting(value)
    if callable(value):
        return DynamicSetting(value)
    return None
