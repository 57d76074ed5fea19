from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class DependencyStatus(str, Enum):
    UNUSED = "UNUSED"
    UNDECLARED = "UNDECLARED"


class DependencyCategory(str, Enum):
    RUNTIME = "runtime"
    DEVELOPMENT = "development"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Position:
    """A 1-based line/column location inside a file."""

    line: int
    column: int


@dataclass(frozen=True)
class Finding:
    status: DependencyStatus
    category: DependencyCategory
    dependency_name: str
    source_file: str
    dependency_version: str | None = None
    position: Position | None = None
    optional: bool | None = None
    # Presentation-only metadata, e.g. {"link": ..., "icon": ...}
    extra: dict[str, str] | None = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "status": self.status.value,
            "category": self.category.value,
            "dependency": {"name": self.dependency_name},
            "source_file": self.source_file,
        }
        if self.dependency_version is not None:
            d["dependency"]["version"] = self.dependency_version
        if self.position is not None:
            d["position"] = {"line": self.position.line, "column": self.position.column}
        if self.optional is not None:
            d["optional"] = self.optional
        if self.extra:
            d["extra"] = dict(self.extra)
        return d


@dataclass
class CheckResult:
    """Output of a single checker: its findings plus troubleshooting text."""

    findings: list[Finding]
    help_text: str = ""


@dataclass
class AnalysisReport:
    findings: list[Finding] = field(default_factory=list)
    help_text: str = ""

    @property
    def failed(self) -> bool:
        return len(self.findings) > 0

    def summary(self) -> dict[str, Any]:
        by_status = {s.value: 0 for s in DependencyStatus}
        by_category = {c.value: 0 for c in DependencyCategory}
        for f in self.findings:
            by_status[f.status.value] += 1
            by_category[f.category.value] += 1
        return {
            "total": len(self.findings),
            "by_status": by_status,
            "by_category": by_category,
        }
