"""
FastAPI main application
Live event scoreboard - teams, challenges, personal points and hints

Routers in scoreboard/api/:
- session.py: suspense mode and pause (GET /api/state, POST /api/setSuspense, /api/setPause)
- teams.py: teams, personal points, player swaps
- challenges.py: challenges, completion toggle, enable/disable
- hints.py: time-windowed hints (GET /api/tips)
- admin.py: reload seed data (GET /api/reset)
- health.py: health check
- frontend.py: static build + SPA fallback (must stay last)

All routers reach the shared Scoreboard through app.state.
"""
from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from scoreboard.config import Settings, load_settings
from scoreboard.state import build_scoreboard

# Import all API routers
from scoreboard.api import admin, challenges, frontend, health, hints, session, teams


logger = logging.getLogger(__name__)

NO_CACHE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate, proxy-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
    "Surrogate-Control": "no-store",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    settings: Settings = app.state.settings
    # Startup: seed data must load or the server does not start
    try:
        app.state.scoreboard = build_scoreboard(settings)
        counts = app.state.scoreboard.store.counts()
        logger.info(
            f"✅ Server started with {counts['teams']} teams and {counts['challenges']} challenges"
        )
    except Exception as e:
        logger.error(f"❌ Failed to load seed data from {settings.data_dir}: {e}")
        raise

    yield

    # Shutdown
    logger.info("🛑 Server shutting down")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        settings: Server settings, loaded from config/environment when omitted

    Returns:
        FastAPI app; seed data is loaded when its lifespan starts
    """
    settings = settings or load_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    app = FastAPI(
        title="Event Scoreboard",
        description="Scoreboard and game-state server for live events",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.settings = settings

    # CORS middleware (any origin, the boards run on other hosts)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.middleware("http")
    async def disable_caching(request: Request, call_next):
        response = await call_next(request)
        response.headers.update(NO_CACHE_HEADERS)
        return response

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        # unknown routes and wrong methods look the same to clients
        if exc.status_code in (404, 405):
            return JSONResponse({"error": "Not found"}, status_code=404)
        return JSONResponse(
            {"success": False, "error": exc.detail},
            status_code=exc.status_code,
        )

    # ==================== INCLUDE ROUTERS ====================

    app.include_router(session.router)
    app.include_router(teams.router)
    app.include_router(challenges.router)
    app.include_router(hints.router)
    app.include_router(admin.router)
    app.include_router(health.router)

    # Catch-all GET, keep last
    app.include_router(frontend.router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve `app` with uvicorn"""
    import uvicorn

    settings: Settings = app.state.settings
    logger.info(f"Backend server running on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)


# ==================== RUN SERVER ====================

if __name__ == "__main__":
    run()
