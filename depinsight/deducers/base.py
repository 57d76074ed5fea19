"""Position deducers locate a dependency declaration inside a manifest.

They are line-oriented text heuristics, not format parsers: each scan
returns the first structural match in file order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from depinsight.domain.models import Position


class PositionDeducer(ABC):
    @abstractmethod
    def locate(self, text: str, dependency_name: str) -> Position | None:
        """Return the 1-based position of ``dependency_name`` in ``text``."""

    def find_dependency_position(self, manifest_path: Path | str, dependency_name: str) -> Position | None:
        try:
            text = Path(manifest_path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            return None
        return self.locate(text, dependency_name)
