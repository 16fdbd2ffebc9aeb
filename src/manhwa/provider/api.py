"""Content provider API application."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, FastAPI, Query, Request
from fastapi.responses import JSONResponse

from manhwa.provider.catalog import Catalog
from manhwa.provider.exceptions import NotFound

log = logging.getLogger(__name__)

SERIES_PATH = "/series"
LEGACY_SERIES_PATH = "/api/get-series"

router = APIRouter(tags=["Series"])


def get_catalog(request: Request) -> Catalog:
    return request.app.state.catalog


@router.get(SERIES_PATH)
@router.get(LEGACY_SERIES_PATH, include_in_schema=False)
async def get_series(
    request: Request, series_id: Optional[str] = Query(None, alias="id")
):
    """List every series, or return one series when ``id`` is given.

    The listing wraps an array (``{"series": [...]}``) while a lookup wraps a
    single object (``{"series": {...}}``). An empty ``id`` counts as absent.
    """
    catalog = get_catalog(request)
    if series_id:
        series = catalog.get_series(series_id)
        if series is None:
            raise NotFound(series_id=series_id)
        return {"series": series.to_dict()}
    return {"series": [s.to_dict() for s in catalog.list_series()]}


def create_app(catalog: Optional[Catalog] = None) -> FastAPI:
    """Create the content provider application.

    Args:
        catalog: Series to serve; defaults to the built-in fixture.

    Returns:
        FastAPI application
    """
    app = FastAPI(
        title="Manhwa Content API",
        description="Read-only series and chapter metadata.",
        version="0.1.0",
    )
    app.state.catalog = catalog if catalog is not None else Catalog()

    @app.exception_handler(NotFound)
    async def not_found_handler(request: Request, exc: NotFound):
        log.info("Series not found: %s", exc.series_id)
        return JSONResponse(status_code=404, content={"error": exc.message})

    app.include_router(router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app
