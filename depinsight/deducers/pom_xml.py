from __future__ import annotations

from depinsight.domain.models import Position

from .base import PositionDeducer

OPEN_TAG = "<dependency>"
CLOSE_TAG = "</dependency>"


class PomXmlDeducer(PositionDeducer):
    """Finds the ``<dependency>`` block declaring ``groupId:artifactId``."""

    def locate(self, text: str, dependency_name: str) -> Position | None:
        group_id, artifact_id = (dependency_name.split(":") + [""])[:2]
        group_tag = f"<groupId>{group_id}</groupId>"
        artifact_tag = f"<artifactId>{artifact_id}</artifactId>"
        lines = text.split("\n")

        for i, line in enumerate(lines):
            if OPEN_TAG not in line:
                continue

            block: list[str] = []
            j = i
            while j < len(lines) and CLOSE_TAG not in lines[j]:
                block.append(lines[j])
                j += 1

            if any(group_tag in b for b in block) and any(artifact_tag in b for b in block):
                return Position(line=i + 1, column=line.index(OPEN_TAG) + 1)
        return None
