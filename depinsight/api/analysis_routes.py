from __future__ import annotations

from pathlib import Path
from typing import Any

from fastapi import APIRouter, HTTPException

from depinsight.core.containers import build_checker_registry
from depinsight.domain.errors import NoSupportedProjectError, ToolConfigurationError
from depinsight.domain.schemas import AnalyzeRequest, AnalyzeResponse
from depinsight.services.analysis_service import AnalysisService

router = APIRouter(prefix="/api", tags=["analysis"])

# Build once at module level
_analysis_service = AnalysisService(build_checker_registry())


@router.get(
    "/checkers",
    summary="List supported ecosystems",
    response_description="Registered checkers and the manifest that triggers each",
)
def list_checkers() -> list[dict[str, str]]:
    """Return every registered checker in the order they run.

    Checkers: **Knip** (JavaScript/TypeScript), **Composer Unused** (PHP),
    **FawltyDeps** (Python), **Maven Dependency Analyzer** (Java).
    """
    return [
        {"name": name, "manifest_file": _analysis_service.checkers.get(name).manifest_file}
        for name in _analysis_service.checkers.list()
    ]


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    summary="Run dependency analysis",
    response_description="Unified findings report with summary counts",
)
def analyze(req: AnalyzeRequest) -> dict[str, Any]:
    """Run every checker whose manifest exists under ``project_root``.

    **Steps performed:**
    1. Detect manifests (`package.json`, `composer.json`, `pyproject.toml`, `pom.xml`)
    2. Run the matching tools in order
    3. Normalize their output into unified findings with manifest positions
    """
    root = Path(req.project_root)
    if not root.is_dir():
        raise HTTPException(status_code=404, detail="Project root not found")

    try:
        report = _analysis_service.run(root, debug=req.debug)
    except NoSupportedProjectError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ToolConfigurationError as e:
        raise HTTPException(status_code=422, detail={"message": str(e), "help_url": e.help_url})

    return {
        "project_root": str(root),
        "failed": report.failed,
        "summary": report.summary(),
        "findings": [f.to_dict() for f in report.findings],
        "help_text": report.help_text,
    }
