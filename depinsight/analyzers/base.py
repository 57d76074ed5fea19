"""Common contract for the ecosystem dependency checkers.

Each checker wraps one external tool. The tool invocation is an injectable
``run_fn`` so tests can feed recorded output without installing anything.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable

from depinsight.deducers.base import PositionDeducer
from depinsight.domain.errors import ToolConfigurationError
from depinsight.domain.models import CheckResult, Finding

logger = logging.getLogger(__name__)

RunFunction = Callable[[Path], str]

NOT_FOUND_MARKER = "command not found"


class DependencyChecker(ABC):
    name: str
    manifest_file: str
    command: str
    install_url: str
    docs_url: str
    help_text: str = ""

    def __init__(self, deducer: PositionDeducer, run_fn: RunFunction | None = None):
        self.deducer = deducer
        self.run_fn = run_fn or self.default_run

    @abstractmethod
    def default_run(self, project_root: Path) -> str:
        """Invoke the real tool and return its raw report."""

    @abstractmethod
    def parse_output(self, output: str, project_root: Path) -> list[Finding]: ...

    def run(self, project_root: Path | str, debug: bool = False) -> CheckResult:
        root = Path(project_root)
        try:
            output = self.run_fn(root)
        except Exception as e:
            raise self._classify(e) from e

        if debug:
            logger.debug(
                "raw output from %s (%d bytes)",
                self.command,
                len(output),
                extra={"checker": self.name, "raw_output": output},
            )

        return CheckResult(findings=self.parse_output(output, root), help_text=self.help_text)

    def manifest_path(self, project_root: Path) -> Path:
        return project_root / self.manifest_file

    def _classify(self, error: Exception) -> ToolConfigurationError:
        stderr = getattr(error, "stderr", None) or ""
        if isinstance(stderr, bytes):
            stderr = stderr.decode("utf-8", errors="replace")

        # shells print "command not found", poetry prints "Command not found"
        text = f"{stderr}\n{error}".lower()
        if isinstance(error, FileNotFoundError) or NOT_FOUND_MARKER in text:
            return ToolConfigurationError(f"`{self.command}` is not installed.", self.install_url)
        return ToolConfigurationError(f"Execution failed for {self.name}: {error}", self.docs_url)
