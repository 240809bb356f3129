"""WireLang HTTP service.

Stateless wrapper around the library:
  1. Document validation (topology + component rules)
  2. Python source generation from documents
  3. Schematic summaries
  4. Bundled example circuits

Run with ``uvicorn wirelang.main:app``.
"""

from fastapi import FastAPI

from wirelang import __version__
from wirelang.config import get_settings
from wirelang.routers import documents, examples


def create_app() -> FastAPI:
    settings = get_settings()

    application = FastAPI(
        title=settings.app_name,
        version=__version__,
        description="Circuit topology validation and document transforms.",
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.debug,
    )

    # ─── Documents (validate / render / summary) ───
    application.include_router(
        documents.router, prefix="/api/documents", tags=["Documents"]
    )

    # ─── Example circuits ───
    application.include_router(
        examples.router, prefix="/api/examples", tags=["Examples"]
    )

    @application.get("/health")
    async def health_check():
        return {"status": "ok", "service": "wirelang", "version": __version__}

    return application


app = create_app()
