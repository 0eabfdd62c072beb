import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from app.api.routes import autocomplete, health, search
from app.config import Settings, get_settings
from app.services.loader import load_catalog
from app.services.search import CatalogSearcher

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI):
    settings: Settings = application.state.settings
    result = load_catalog(settings.dataset_path, max_line_bytes=settings.max_line_bytes)
    application.state.searcher = CatalogSearcher(result.records)
    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title="Catalog Search",
        version="0.1.0",
        description="In-memory substring search over a gzip JSON-lines catalog.",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.include_router(health.router)
    app.include_router(search.router)
    app.include_router(autocomplete.router)

    # mounted last: "/" would otherwise shadow the API routes
    if settings.static_root.is_dir():
        app.mount("/", StaticFiles(directory=settings.static_root, html=True), name="static")
    else:
        logger.warning("Static directory %s not found; static files are not served", settings.static_root)

    return app


app = create_app()
