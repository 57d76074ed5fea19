from __future__ import annotations

import logging
from pathlib import Path

from depinsight.analyzers.registry import CheckerRegistry
from depinsight.domain.errors import NoSupportedProjectError
from depinsight.domain.models import AnalysisReport

logger = logging.getLogger(__name__)


class AnalysisService:
    """
    Orchestrates: detect manifests → run each matching checker → one report.
    """

    def __init__(self, checker_registry: CheckerRegistry):
        self.checkers = checker_registry

    def run(self, project_root: Path | str, debug: bool = False) -> AnalysisReport:
        root = Path(project_root)
        logger.info("Analyzing project at: %s", root, extra={"project_root": str(root)})

        selected = self.checkers.select_applicable(root)
        if not selected:
            raise NoSupportedProjectError()

        report = AnalysisReport()
        for checker in selected:
            logger.info("Running %s ...", checker.name, extra={"checker": checker.name})
            result = checker.run(root, debug)
            report.findings.extend(result.findings)
            report.help_text += result.help_text

        if report.failed:
            logger.info("Found %d unused or undeclared dependencies.", len(report.findings))
        else:
            logger.info("No unused or undeclared dependencies found.")
        return report
