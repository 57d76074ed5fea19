from __future__ import annotations

import json
from pathlib import Path

from depinsight.core.util import run_cmd
from depinsight.domain.models import DependencyCategory, DependencyStatus, Finding

from .base import DependencyChecker

PYPI_ICON = "https://raw.githubusercontent.com/mridang/action-dependency-insight/refs/heads/master/res/pypi.svg"

# FawltyDeps exits non-zero when it reports undeclared/unused deps; it
# always prints its JSON report then, so an empty stdout means it never ran
SOFT_FAILURE_CODES = (0, 1, 2, 3, 4, 5)

UNKNOWN_SOURCE = "unknown"

HELP_TEXT = """
<br />
This report was generated using **[FawltyDeps](https://github.com/trailofbits/fawltydeps)**, a tool for identifying unused and undeclared dependencies in Python projects.
<br />
<br />
If you believe a dependency has been incorrectly flagged:

1.  **Run Locally:** `poetry run fawltydeps`
2.  **Check Configuration:** you may need to ignore dependencies that are used in ways static analysis cannot detect. See the **[FawltyDeps configuration guide](https://github.com/trailofbits/fawltydeps#configuration)**.
3.  **Report the Issue:** if the results are also wrong locally, open an issue on the **[FawltyDeps repository](https://github.com/trailofbits/fawltydeps/issues)**; otherwise report it against this project.
"""


def _first_reference(item: dict) -> str | None:
    refs = item.get("references") or []
    if refs and refs[0].get("path"):
        return refs[0]["path"]
    return None


def _extra(name: str) -> dict[str, str]:
    return {"link": f"https://pypi.org/project/{name}", "icon": PYPI_ICON}


class FawltyDepsChecker(DependencyChecker):
    name = "FawltyDeps"
    manifest_file = "pyproject.toml"
    command = "fawltydeps"
    install_url = "https://github.com/trailofbits/fawltydeps#installation"
    docs_url = "https://github.com/trailofbits/fawltydeps"
    help_text = HELP_TEXT

    def default_run(self, project_root: Path) -> str:
        return run_cmd(
            ["poetry", "run", "fawltydeps", "--json"],
            cwd=project_root,
            accept_codes=SOFT_FAILURE_CODES,
            require_output=True,
        )

    def parse_output(self, output: str, project_root: Path) -> list[Finding]:
        data = json.loads(output)

        unused: list[Finding] = []
        for item in data.get("unused_deps") or []:
            source_file = _first_reference(item) or self.manifest_file
            unused.append(
                Finding(
                    status=DependencyStatus.UNUSED,
                    category=DependencyCategory.RUNTIME,
                    dependency_name=item["name"],
                    source_file=source_file,
                    position=self.deducer.find_dependency_position(project_root / source_file, item["name"]),
                    extra=_extra(item["name"]),
                )
            )

        undeclared = [
            Finding(
                status=DependencyStatus.UNDECLARED,
                category=DependencyCategory.UNKNOWN,
                dependency_name=item["name"],
                source_file=_first_reference(item) or UNKNOWN_SOURCE,
                extra=_extra(item["name"]),
            )
            for item in data.get("undeclared_deps") or []
        ]

        return unused + undeclared
