from __future__ import annotations

from pathlib import Path
from typing import Iterable

from .base import DependencyChecker


class CheckerRegistry:
    def __init__(self, checkers: Iterable[DependencyChecker]):
        self._checkers = list(checkers)

    def list(self) -> list[str]:
        return [c.name for c in self._checkers]

    def get(self, name: str) -> DependencyChecker | None:
        for c in self._checkers:
            if c.name == name:
                return c
        return None

    def select_applicable(self, project_root: Path | str) -> list[DependencyChecker]:
        """Checkers whose manifest exists in ``project_root``, in registration order."""
        root = Path(project_root)
        return [c for c in self._checkers if (root / c.manifest_file).exists()]
