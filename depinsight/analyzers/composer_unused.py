from __future__ import annotations

import json
from pathlib import Path

from depinsight.core.util import run_cmd
from depinsight.domain.models import DependencyCategory, DependencyStatus, Finding

from .base import DependencyChecker

PACKAGIST_ICON = "https://raw.githubusercontent.com/mridang/action-dependency-insight/refs/heads/master/res/packagist.svg"

# composer-unused lists the PHP runtime requirement as if it were a package
PHP_PLATFORM = "php"

HELP_TEXT = """
<br />
This report was generated using **[composer-unused](https://github.com/icanhazstring/composer-unused)**, a tool for identifying unused dependencies in PHP projects.
<br />
<br />
If you believe a dependency has been incorrectly flagged:

1.  **Run Locally:** `./vendor/bin/composer-unused`
2.  **Check Configuration:** you may need to tell the tool which directories to scan. See the **[composer-unused configuration guide](https://github.com/icanhazstring/composer-unused#configuration)**.
3.  **Report the Issue:** if the results are also wrong locally, open an issue on the **[composer-unused repository](https://github.com/icanhazstring/composer-unused/issues)**; otherwise report it against this project.
"""


class ComposerUnusedChecker(DependencyChecker):
    name = "Composer Unused"
    manifest_file = "composer.json"
    command = "composer-unused"
    install_url = "https://github.com/icanhazstring/composer-unused#installation"
    docs_url = "https://github.com/icanhazstring/composer-unused"
    help_text = HELP_TEXT

    def default_run(self, project_root: Path) -> str:
        return run_cmd(
            [
                "./vendor/bin/composer-unused",
                "--no-progress",
                "--ignore-exit-code",
                "--output-format=json",
            ],
            cwd=project_root,
        )

    def parse_output(self, output: str, project_root: Path) -> list[Finding]:
        data = json.loads(output)
        manifest = self.manifest_path(project_root)

        return [
            Finding(
                status=DependencyStatus.UNUSED,
                category=DependencyCategory.UNKNOWN,
                dependency_name=pkg,
                source_file=self.manifest_file,
                position=self.deducer.find_dependency_position(manifest, pkg),
                extra={
                    "link": f"https://packagist.org/packages/{pkg}",
                    "icon": PACKAGIST_ICON,
                },
            )
            for pkg in data.get("unused-packages") or []
            if pkg != PHP_PLATFORM
        ]
