from __future__ import annotations

import re

from depinsight.domain.models import Position

from .base import PositionDeducer


class ComposerJsonDeducer(PositionDeducer):
    """Finds ``"vendor/package": ...`` keys in a composer.json file."""

    def locate(self, text: str, dependency_name: str) -> Position | None:
        quoted = f'"{dependency_name}"'
        pattern = re.compile(rf"^\s*{re.escape(quoted)}\s*:")
        for i, line in enumerate(text.split("\n")):
            if pattern.match(line):
                return Position(line=i + 1, column=line.index(quoted) + 1)
        return None
