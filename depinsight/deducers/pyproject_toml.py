from __future__ import annotations

from depinsight.domain.models import Position

from .base import PositionDeducer


class PyprojectTomlDeducer(PositionDeducer):
    """Finds the first line of a pyproject.toml that starts with the dependency.

    Only the line is meaningful; the column is always 1. A name that is a
    prefix of another dependency matches whichever comes first.
    """

    def locate(self, text: str, dependency_name: str) -> Position | None:
        for i, raw in enumerate(text.split("\n")):
            line = raw.strip()
            if line.startswith(dependency_name) or line.startswith(f'"{dependency_name}"'):
                return Position(line=i + 1, column=1)
        return None
