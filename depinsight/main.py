from fastapi import FastAPI

from depinsight.api.analysis_routes import router as analysis_router
from depinsight.core.logging import setup_logging

__version__ = "0.1.0"

setup_logging()

app = FastAPI(
    title="Dependency Insight",
    version=__version__,
    description="Unused and undeclared dependency report across npm, Composer, Python and Maven projects.",
    openapi_tags=[
        {"name": "analysis", "description": "Detect project ecosystems and run their dependency checkers."},
        {"name": "health", "description": "Liveness check for container deployments."},
    ],
)

app.include_router(analysis_router)


@app.get("/health", tags=["health"], summary="Health check")
def health() -> dict[str, str]:
    return {"status": "healthy", "version": __version__}
