"""Diagnostic model: structured findings about declared style values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about a stylesheet or a token catalog.

    Attributes:
        rule: Identifier for the rule that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        start_offset: Offset of the first reported character in the document,
            or None for findings bound to the whole document.
        end_offset: Offset just past the last reported character.
        line: 1-based line of ``start_offset``, when known.
        column: 1-based column of ``start_offset``, when known.
        prop: The property whose value was inspected, if applicable.
        fix: Suggested replacement text, if available.
    """

    rule: str
    severity: Severity
    message: str
    start_offset: int | None = None
    end_offset: int | None = None
    line: int | None = None
    column: int | None = None
    prop: str | None = None
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def to_dict(self) -> dict[str, object]:
        return {
            "rule": self.rule,
            "severity": self.severity.value,
            "message": self.message,
            "startOffset": self.start_offset,
            "endOffset": self.end_offset,
            "line": self.line,
            "column": self.column,
            "prop": self.prop,
            "fix": self.fix,
        }

    def __str__(self) -> str:
        location = ""
        if self.line is not None:
            location = f"{self.line}:{self.column}: "
        elif self.start_offset is not None:
            location = f"@{self.start_offset}: "
        return f"{location}{self.severity.value}: {self.message} ({self.rule})"
