import os

from pydantic import BaseModel


def _default_working_directory() -> str:
    # GitHub Actions exposes `with:` inputs as INPUT_<NAME> (hyphens kept)
    return (
        os.getenv("WORKING_DIRECTORY")
        or os.getenv("INPUT_WORKING-DIRECTORY")
        or os.getenv("INPUT_WORKING_DIRECTORY")
        or ""
    ).strip()


def _default_debug() -> bool:
    return os.getenv("DEBUG", "").lower() in ("1", "true", "yes") or os.getenv("RUNNER_DEBUG") == "1"


class Settings(BaseModel):
    # Project to analyse; empty means the current directory
    WORKING_DIRECTORY: str = _default_working_directory()
    DEBUG: bool = _default_debug()

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Job summary file written by the summary formatter (set by GitHub runners)
    GITHUB_STEP_SUMMARY: str | None = os.getenv("GITHUB_STEP_SUMMARY")

    def project_root(self) -> str:
        return self.WORKING_DIRECTORY or os.getcwd()


settings = Settings()
