"""Diagnostic model: structured findings about a variant combination."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"


@dataclass(frozen=True)
class Diagnostic:
    """A single validation finding about a variant combination.

    Attributes:
        rule: Identifier for the validation rule that produced this diagnostic.
        severity: ERROR findings invalidate the combination, warnings do not.
        message: Human-readable description of the problem.
        variants: Names of the variants involved.
        fix: Suggested remediation, if available.
    """

    rule: str
    severity: Severity
    message: str
    variants: tuple[str, ...] = ()
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.variants:
            location = f" [variants={','.join(self.variants)}]"
        return f"{self.severity.value}{location}: {self.message}"
