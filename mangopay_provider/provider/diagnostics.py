"""User-facing diagnostics returned by provider operations."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Any, Dict

SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"


@dataclass
class Diagnostic:
    severity: str
    summary: str
    detail: str = ""
    attribute: Optional[str] = None

    def __str__(self) -> str:
        where = f" ({self.attribute})" if self.attribute else ""
        return f"{self.severity.upper()}: {self.summary}{where}: {self.detail}"


class Diagnostics(list):
    """Ordered collection of diagnostics.

    Operations append to it instead of raising; callers check has_error().
    """

    def add_error(self, summary: str, detail: str = "") -> None:
        self.append(Diagnostic(SEVERITY_ERROR, summary, detail))

    def add_attribute_error(self, attribute: str, summary: str, detail: str = "") -> None:
        self.append(Diagnostic(SEVERITY_ERROR, summary, detail, attribute))

    def add_warning(self, summary: str, detail: str = "") -> None:
        self.append(Diagnostic(SEVERITY_WARNING, summary, detail))

    def has_error(self) -> bool:
        return any(d.severity == SEVERITY_ERROR for d in self)

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self if d.severity == SEVERITY_ERROR]


@dataclass
class Result:
    """State produced by an operation together with its diagnostics.

    ``state`` is None when the operation failed or removed the object.
    """
    state: Optional[Dict[str, Any]]
    diagnostics: Diagnostics

    @property
    def ok(self) -> bool:
        return not self.diagnostics.has_error()
