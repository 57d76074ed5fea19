import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from depinsight.main import app


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def package_json(tmp_path: Path) -> Path:
    """A package.json pretty-printed the way npm writes it."""
    p = tmp_path / "package.json"
    p.write_text(
        json.dumps(
            {
                "name": "test-project",
                "dependencies": {"express": "^4.17.1"},
                "devDependencies": {"jest": "^27.0.0"},
            },
            indent=2,
        ),
        encoding="utf-8",
    )
    return p
