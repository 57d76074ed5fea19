from pathlib import Path


def fake_run(output: str):
    """Build a run function that returns canned tool output."""

    def run(project_root: Path) -> str:
        return output

    return run


def failing_run(error: Exception):
    def run(project_root: Path) -> str:
        raise error

    return run
