"""
Location Agent Backend - FastAPI Application

Location lookup and directions for a conversational assistant:
where am I, where is this place, how far is it from A to B
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from httpx import AsyncClient

from app.core.config import settings
from app.api.v1.router import api_router
from app.middleware.performance_monitoring import PerformanceMonitoringMiddleware

# logging setup
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifecycle

    startup: open the shared outbound HTTP client
    shutdown: close it
    """
    # ========== Startup ==========
    logger.info("=" * 60)
    logger.info(f"{settings.PROJECT_NAME} starting...")

    app.state.http_client = AsyncClient(timeout=settings.HTTP_TIMEOUT_SECONDS)

    logger.info(f"{settings.PROJECT_NAME} started")
    logger.info("=" * 60)

    yield

    # ========== Shutdown ==========
    logger.info("=" * 60)
    logger.info(f"{settings.PROJECT_NAME} shutting down...")

    try:
        await app.state.http_client.aclose()
        logger.info("✓ HTTP client closed")
    except Exception as e:
        logger.error(f"❌ Error during shutdown: {e}", exc_info=True)


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="""
    ## Location assistant backend

    ### Capabilities
    - 📍 Auto-detect the caller's location (IP geolocation, falls back to a default)
    - 🔎 Resolve an address to coordinates
    - 📏 Straight-line distance, driving/walking time, Google Maps link, safety tips
    - 🤖 Tool registry for the external dialogue agent
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS: explicit origins since credentials are allowed
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

if settings.ENABLE_PERFORMANCE_MONITORING:
    app.add_middleware(PerformanceMonitoringMiddleware)
    logger.info("✓ Performance monitoring middleware enabled")

app.include_router(api_router, prefix="/v1")


# ========== Health Check Endpoints ==========


@app.get("/")
async def root():
    """Service information"""
    return {
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "status": "running",
        "features": [
            "IP location detection",
            "Address geocoding",
            "Distance and travel time estimate",
            "Navigation link",
            "Safety tips",
        ],
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """Liveness check for load balancers"""
    client = getattr(app.state, "http_client", None)
    client_status = (
        "healthy" if client is not None and not client.is_closed else "unhealthy"
    )
    status_code = 200 if client_status == "healthy" else 503

    return JSONResponse(
        status_code=status_code,
        content={
            "status": client_status,
            "version": settings.VERSION,
            "components": {"http_client": client_status},
        },
    )


# ========== Exception Handlers ==========


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Unexpected errors"""
    logger.error(f"Unexpected error: {exc}", exc_info=True)

    return JSONResponse(
        status_code=500,
        content={
            "message": "Internal server error",
            "detail": str(exc) if settings.DEBUG else "Internal Server Error",
        },
    )


# ========== Development Server ==========

if __name__ == "__main__":
    import uvicorn

    logger.info("Starting development server...")

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
        access_log=True,
    )
