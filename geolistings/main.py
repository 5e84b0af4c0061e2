import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from sqlalchemy.engine import Engine

from geolistings import deps
from geolistings.routers import listings
from geolistings.sql import listings_select

LOG = logging.getLogger("geolistings")

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Create the engine from DATABASE_URL when none was handed to create_app,
    and fail startup if the listings statement cannot run.
    """
    owned = app.state.engine is None
    if owned:
        engine = deps.make_engine(deps.DATABASE_URL)
        try:
            deps.check_statement(engine, app.state.listings_stmt)
        except Exception:
            engine.dispose()
            raise
        app.state.engine = engine
        LOG.info("Connected; listings statement ready")
    try:
        yield
    finally:
        if owned:
            app.state.engine.dispose()
            app.state.engine = None

def create_app(engine: Optional[Engine] = None) -> FastAPI:
    app = FastAPI(
        title="GeoListings API",
        version="1.0.0",
        description="Real-estate listings as a GeoJSON FeatureCollection.",
        lifespan=lifespan,
    )
    app.state.engine = engine
    app.state.listings_stmt = listings_select()

    app.include_router(listings.router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app

app = create_app()
