from typing import Optional
import logging

from fastapi import FastAPI, Depends, Query

from cookbook.api.session import Session, get_session
from cookbook.api.routes import storage, recipes
from cookbook.utilities.config import SEED_DEMO_DATA

# Logging
logger = logging.getLogger("cookbook_app")


def create_app(seed: Optional[bool] = None) -> FastAPI:
    """Build an app owning its own storage and cookbook session."""
    app = FastAPI(title="Cookbook & Storage API")
    app.state.session = Session(seed=SEED_DEMO_DATA if seed is None else seed)

    # Include routers
    app.include_router(storage.router)
    app.include_router(recipes.router)

    @app.get('/api/events')
    def api_events(since: Optional[int] = Query(default=None), session: Session = Depends(get_session)):
        """Facts reported by the storage and cookbook since the given cursor."""
        return session.events.get_events(since)

    logger.info("Cookbook app created (seeded=%s)", bool(seed if seed is not None else SEED_DEMO_DATA))
    return app
