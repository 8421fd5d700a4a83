"""Error taxonomy for speedometer configuration loading."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, Tuple


class ErrorKind(str, Enum):
    OUT_OF_RANGE = "OutOfRange"
    UNKNOWN_ZONE = "UnknownZone"
    INVALID_ENUM = "InvalidEnum"
    INVALID_VALUE = "InvalidValue"
    SLOT_CONFLICT = "SlotConflict"


@dataclass(frozen=True)
class ConfigIssue:
    """One problem found in a declaration.

    ``subject`` names what the issue is about: a telemetry field name, a
    preference key, or a structural key such as ``spdBottomRows``.
    """

    kind: ErrorKind
    subject: str
    message: str

    def __str__(self) -> str:
        return f"{self.kind.value} [{self.subject}]: {self.message}"


class ConfigError(RuntimeError):
    """Raised when a declaration has one or more load-time problems.

    Every issue found in a pass is carried, not just the first one.
    """

    def __init__(self, issues: Iterable[ConfigIssue]) -> None:
        self.issues: Tuple[ConfigIssue, ...] = tuple(issues)
        lines = "\n".join(f"  - {issue}" for issue in self.issues)
        super().__init__(f"{len(self.issues)} configuration issue(s):\n{lines}")

    @property
    def kinds(self) -> FrozenSet[ErrorKind]:
        return frozenset(issue.kind for issue in self.issues)

    def issues_for(self, subject: str) -> Tuple[ConfigIssue, ...]:
        return tuple(issue for issue in self.issues if issue.subject == subject)


class DeclarationError(ConfigError):
    """Raised when a declaration file cannot be read or parsed."""

    def __init__(self, source: str, message: str) -> None:
        self.source = source
        super().__init__([ConfigIssue(ErrorKind.INVALID_VALUE, source, message)])


class FieldNotFound(KeyError):
    """Raised when a telemetry field has no slot assignment."""
