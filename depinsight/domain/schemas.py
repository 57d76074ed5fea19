from typing import Any

from pydantic import BaseModel, Field


class AnalyzeRequest(BaseModel):
    """Request body for running the dependency analysis."""

    project_root: str = Field(..., description="Directory containing the project manifest(s).")
    debug: bool = Field(False, description="Log raw tool output at DEBUG level.")


class FindingSummary(BaseModel):
    """Aggregate counts by status and category."""

    total: int
    by_status: dict[str, int]
    by_category: dict[str, int]


class AnalyzeResponse(BaseModel):
    """Result of a full analysis run."""

    project_root: str
    failed: bool = Field(..., description="True when any unused or undeclared dependency was found.")
    summary: FindingSummary
    findings: list[dict[str, Any]]
    help_text: str
