"""JSON-lines logging for checker runs.

Each record is one JSON object. Records logged while a checker runs carry
its name under ``checker``; with ``--debug`` the tool's unparsed report is
attached as ``raw_output`` so multi-line HTML/JSON stays a single log line.

Logs go to stdout by default. ``depinsight --json`` reserves stdout for the
report and sends logs to stderr instead.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import TextIO

# Attributes callers attach through ``extra={}`` that are worth keeping
CONTEXT_FIELDS = ("checker", "project_root", "raw_output")


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for name in CONTEXT_FIELDS:
            if hasattr(record, name):
                payload[name] = getattr(record, name)

        if record.exc_info and record.exc_info[0] is not None:
            payload["exc"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def setup_logging(debug: bool = False, stream: TextIO | None = None) -> None:
    """Route all records to ``stream`` (default: the current ``sys.stdout``).

    ``debug`` forces DEBUG so raw tool output is logged; otherwise the
    ``LOG_LEVEL`` env var decides (default ``INFO``).
    """
    level_name = "DEBUG" if debug else os.getenv("LOG_LEVEL", "INFO").upper()

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(JSONFormatter())

    root = logging.getLogger()
    root.setLevel(getattr(logging, level_name, logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)

    logging.getLogger("httpx").setLevel(logging.WARNING)
