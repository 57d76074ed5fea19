"""Command-line entry point.

Exit codes: 0 when the project is clean, 1 when unused or undeclared
dependencies were found, 2 for configuration problems.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from depinsight.core.config import settings
from depinsight.core.containers import build_checker_registry
from depinsight.core.logging import setup_logging
from depinsight.domain.errors import NoSupportedProjectError, ToolConfigurationError
from depinsight.formatters.console import ConsoleFormatter
from depinsight.formatters.summary import SummaryFormatter
from depinsight.services.analysis_service import AnalysisService

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FINDINGS = 1
EXIT_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="depinsight", description="Report unused and undeclared dependencies.")
    ap.add_argument("path", nargs="?", default=None, help="project root (default: $WORKING_DIRECTORY or cwd)")
    ap.add_argument("--debug", action="store_true", default=settings.DEBUG, help="log raw tool output")
    ap.add_argument("--json", action="store_true", help="print findings as JSON instead of a table")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    # --json keeps stdout for the report alone
    setup_logging(debug=args.debug, stream=sys.stderr if args.json else None)

    project_root = args.path or settings.project_root()
    service = AnalysisService(build_checker_registry())

    try:
        report = service.run(project_root, debug=args.debug)
    except ToolConfigurationError as e:
        logger.error("%s See %s", e, e.help_url)
        return EXIT_CONFIG
    except NoSupportedProjectError as e:
        logger.error(str(e))
        return EXIT_CONFIG

    if args.json:
        print(json.dumps({
            "failed": report.failed,
            "summary": report.summary(),
            "findings": [f.to_dict() for f in report.findings],
        }, indent=2))
    elif report.failed:
        annotations = SummaryFormatter(settings.GITHUB_STEP_SUMMARY).format(report.findings, report.help_text)
        if annotations:
            print(annotations)
        ConsoleFormatter().format(report.findings, report.help_text)

    return EXIT_FINDINGS if report.failed else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
