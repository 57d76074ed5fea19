from __future__ import annotations

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from depinsight.domain.models import DependencyStatus, Finding

HEADERS = ["Status", "Dependency", "Version", "Category", "Optional", "Location"]

STATUS_STYLES = {
    DependencyStatus.UNUSED: "yellow",
    DependencyStatus.UNDECLARED: "red",
}


def location(f: Finding) -> str:
    return f"{f.source_file}:{f.position.line}" if f.position else f.source_file


def table_row(f: Finding) -> list[str]:
    return [
        f.status.value,
        f.dependency_name,
        f.dependency_version or "(n/a)",
        f.category.value,
        "✓" if f.optional else "",
        location(f),
    ]


def build_table(findings: list[Finding]) -> Table:
    table = Table(title="Dependency Analysis Results", box=box.SIMPLE_HEAVY, header_style="bold")
    table.add_column("Status")
    table.add_column("Dependency", style="cyan", overflow="fold")
    table.add_column("Version")
    table.add_column("Category")
    table.add_column("Optional", justify="center")
    table.add_column("Location", style="bright_black", overflow="fold")

    for f in findings:
        status, *rest = table_row(f)
        table.add_row(Text(status, style=STATUS_STYLES[f.status]), *rest)
    return table


class ConsoleFormatter:
    """Colour-coded table of findings for terminal output."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def format(self, findings: list[Finding], help_text: str) -> None:
        if not findings:
            return
        self.console.print(build_table(findings))
        if help_text:
            self.console.print(Text(help_text))
