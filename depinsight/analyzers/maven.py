from __future__ import annotations

from pathlib import Path

from bs4 import BeautifulSoup

from depinsight.core.util import run_cmd
from depinsight.domain.models import DependencyCategory, DependencyStatus, Finding

from .base import DependencyChecker

MAVEN_ICON = "https://raw.githubusercontent.com/mridang/action-dependency-insight/main/res/maven.svg"

REPORT_PATH = Path("target") / "site" / "dependency-analysis.html"

# Heading ids in the analyze-report HTML, in output order
SECTIONS: list[tuple[str, DependencyStatus]] = [
    ("Unused_but_Declared_Dependencies", DependencyStatus.UNUSED),
    ("Used_but_Undeclared_Dependencies", DependencyStatus.UNDECLARED),
]

# groupId, artifactId, version, scope, classifier, type, optional
ROW_CELLS = 7

HELP_TEXT = """
<br />
This report was generated using the **[maven-dependency-plugin](https://maven.apache.org/plugins/maven-dependency-plugin/analyze-report-mojo.html)**.
<br />
<br />
If you believe a dependency has been incorrectly flagged:

1.  **Run Locally:** `mvn dependency:analyze-report`, then open `target/site/dependency-analysis.html` in your browser.
2.  **Check Configuration:** the plugin has options to fine-tune its analysis. See the **[dependency:analyze documentation](https://maven.apache.org/plugins/maven-dependency-plugin/analyze-mojo.html)**.
3.  **Report the Issue:** if the results are also wrong locally, follow the **[Maven issue management page](https://maven.apache.org/issue-management.html)**; otherwise report it against this project.
"""


class MavenChecker(DependencyChecker):
    name = "Maven Dependency Analyzer"
    manifest_file = "pom.xml"
    command = "mvn"
    install_url = "https://maven.apache.org/install.html"
    docs_url = "https://maven.apache.org/plugins/maven-dependency-plugin/analyze-mojo.html"
    help_text = HELP_TEXT

    def default_run(self, project_root: Path) -> str:
        run_cmd(["mvn", "dependency:analyze-report"], cwd=project_root)

        report = project_root / REPORT_PATH
        if not report.is_file():
            raise RuntimeError(f"mvn did not write {REPORT_PATH.as_posix()}")
        return report.read_text(encoding="utf-8")

    def parse_output(self, output: str, project_root: Path) -> list[Finding]:
        soup = BeautifulSoup(output, "html.parser")

        out: list[Finding] = []
        for section_id, status in SECTIONS:
            out.extend(self._parse_section(soup, section_id, status, project_root))
        return out

    def _parse_section(
        self,
        soup: BeautifulSoup,
        section_id: str,
        status: DependencyStatus,
        project_root: Path,
    ) -> list[Finding]:
        heading = soup.find(id=section_id)
        if heading is None or heading.parent is None:
            return []

        manifest = self.manifest_path(project_root)
        out: list[Finding] = []
        for table in heading.parent.find_all("table"):
            for row in table.find_all("tr"):
                cells = [td.get_text(strip=True) for td in row.find_all("td")]
                if len(cells) < ROW_CELLS:
                    continue

                group_id, artifact_id, version, scope = cells[:4]
                name = f"{group_id}:{artifact_id}"
                out.append(
                    Finding(
                        status=status,
                        category=DependencyCategory.DEVELOPMENT if scope == "test" else DependencyCategory.RUNTIME,
                        dependency_name=name,
                        dependency_version=version,
                        source_file=self.manifest_file,
                        optional=cells[6] == "true",
                        position=self.deducer.find_dependency_position(manifest, name),
                        extra={
                            "link": f"https://search.maven.org/artifact/{group_id}/{artifact_id}",
                            "icon": MAVEN_ICON,
                        },
                    )
                )
        return out
