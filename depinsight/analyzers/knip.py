from __future__ import annotations

import json
from pathlib import Path

from depinsight.core.util import run_cmd
from depinsight.domain.models import DependencyCategory, DependencyStatus, Finding, Position

from .base import DependencyChecker

NPM_ICON = "https://raw.githubusercontent.com/mridang/action-dependency-insight/refs/heads/master/res/npm.svg"

# Knip issue bucket key -> (status, category)
ISSUE_TYPES: list[tuple[str, DependencyStatus, DependencyCategory]] = [
    ("dependencies", DependencyStatus.UNUSED, DependencyCategory.RUNTIME),
    ("devDependencies", DependencyStatus.UNUSED, DependencyCategory.DEVELOPMENT),
    ("unlisted", DependencyStatus.UNDECLARED, DependencyCategory.RUNTIME),
    ("unresolved", DependencyStatus.UNDECLARED, DependencyCategory.UNKNOWN),
]

HELP_TEXT = """
<br />
This report was generated using **[Knip](https://knip.dev)**, a tool for identifying unused files, exports, and dependencies in JavaScript/TypeScript projects.
<br />
<br />
If you believe a dependency has been incorrectly flagged:

1.  **Run Locally:** `npx knip`
2.  **Check Configuration:** you may need to define entry points or ignore specific files. See the **[Knip configuration guide](https://knip.dev/overview/configuration)**.
3.  **Report the Issue:** if the results are also wrong locally, open an issue on the **[Knip repository](https://github.com/webpro/knip/issues)**; otherwise report it against this project.
"""


class KnipChecker(DependencyChecker):
    name = "Knip"
    manifest_file = "package.json"
    command = "knip"
    install_url = "https://knip.dev/overview/getting-started#installation"
    docs_url = "https://knip.dev"
    help_text = HELP_TEXT

    def default_run(self, project_root: Path) -> str:
        # --no-exit-code keeps findings from turning into a process failure
        return run_cmd(
            ["npx", "knip", "--no-exit-code", "--no-progress", "--reporter=json"],
            cwd=project_root,
        )

    def parse_output(self, output: str, project_root: Path) -> list[Finding]:
        data = json.loads(output)

        out: list[Finding] = []
        for bucket in data.get("issues") or []:
            for key, status, category in ISSUE_TYPES:
                for dep in bucket.get(key) or []:
                    line, col = dep.get("line"), dep.get("col")
                    out.append(
                        Finding(
                            status=status,
                            category=category,
                            dependency_name=dep["name"],
                            source_file=bucket["file"],
                            position=Position(line=line, column=col) if line and col else None,
                            extra={
                                "link": f"https://www.npmjs.com/package/{dep['name']}",
                                "icon": NPM_ICON,
                            },
                        )
                    )
        return out
