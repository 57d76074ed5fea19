"""GitHub Actions output: workflow annotations and the job summary."""

from __future__ import annotations

import logging
from pathlib import Path

from depinsight.domain.models import DependencyStatus, Finding

from .console import HEADERS, table_row

logger = logging.getLogger(__name__)


def _escape_data(s: str) -> str:
    return s.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(s: str) -> str:
    return _escape_data(s).replace(":", "%3A").replace(",", "%2C")


def annotation(f: Finding) -> str | None:
    """``::error`` workflow command for a finding, or None without a position."""
    if f.position is None:
        return None
    label = "Unused" if f.status == DependencyStatus.UNUSED else "Undeclared"
    props = {
        "file": f.source_file,
        "line": str(f.position.line),
        "col": str(f.position.column),
        "title": f"{label} {f.category.value} dependency",
    }
    prop_text = ",".join(f"{k}={_escape_property(v)}" for k, v in props.items())
    return f"::error {prop_text}::{_escape_data(f'{label} dependency: {f.dependency_name}')}"


class SummaryFormatter:
    def __init__(self, summary_path: str | None = None):
        self.summary_path = summary_path

    def annotations(self, findings: list[Finding]) -> list[str]:
        return [a for a in (annotation(f) for f in findings) if a]

    def markdown(self, findings: list[Finding], help_text: str) -> str:
        lines = ["## Dependency Analysis Results", ""]
        if findings:
            lines.append("| " + " | ".join(HEADERS) + " |")
            lines.append("|" + "---|" * len(HEADERS))
            for f in findings:
                row = table_row(f)
                row[1] = f"`{row[1]}`"
                lines.append("| " + " | ".join(row) + " |")
            lines.append("")
            lines.append(help_text)
        return "\n".join(lines) + "\n"

    def format(self, findings: list[Finding], help_text: str) -> str:
        """Return the annotation lines and append the summary when configured."""
        if self.summary_path:
            with Path(self.summary_path).open("a", encoding="utf-8") as fh:
                fh.write(self.markdown(findings, help_text))
        else:
            logger.debug("GITHUB_STEP_SUMMARY not set; skipping job summary")
        return "\n".join(self.annotations(findings))
