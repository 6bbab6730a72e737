# Main application entry point
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from redis.exceptions import RedisError

from .api import auth_router, health_router, notes_router, tenants_router
from .config import get_settings
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .core.redis_client import get_redis_client
from .core.schemas.common import ErrorResponse
from .database import create_tables

# Setup logging first
setup_logging()
logger = get_logger("main")

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info(
        f"Starting {settings.app_name}",
        extra={
            "version": settings.app_version,
            "environment": settings.environment,
            "debug": settings.debug,
        },
    )

    # Redis only backs token revocation; run without it if unreachable
    redis_client = get_redis_client()
    try:
        await redis_client.connect()
        logger.info("Redis connection established")
    except (RedisError, OSError) as e:
        logger.warning(f"Redis connection failed: {e}. Continuing without Redis...")

    if settings.create_tables_on_startup:
        try:
            await create_tables()
            logger.info("Database tables created/verified")
        except Exception as e:
            logger.error("Failed to create database tables", exc_info=e)
            raise
    else:
        logger.info("Skipping table creation (create_tables_on_startup is off)")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")
    await redis_client.disconnect()


app = FastAPI(
    title=settings.app_name,
    description="Multi-tenant notes API with per-plan note quotas",
    version=settings.app_version,
    lifespan=lifespan,
)

# Add logging middleware
app.add_middleware(LoggingMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth_router, prefix="/api")
app.include_router(notes_router, prefix="/api")
app.include_router(tenants_router, prefix="/api")
app.include_router(health_router, prefix="/api")


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render unexpected failures opaquely; the traceback only goes to the log."""
    logger.error(
        "Unhandled error",
        exc_info=exc,
        extra={"method": request.method, "path": request.url.path},
    )
    body = ErrorResponse(error="InternalServerError", message="An unexpected error occurred")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body.model_dump(mode="json"),
    )


# Root endpoint
@app.get("/")
async def root():
    return {"message": settings.app_name, "version": settings.app_version}


# API root endpoint for better navigation
@app.get("/api/")
async def api_root():
    return {
        "message": settings.app_name,
        "version": settings.app_version,
        "documentation": {
            "swagger_ui": "/docs",
            "redoc": "/redoc",
            "openapi_json": "/openapi.json",
        },
        "endpoints": {
            "authentication": "/api/auth/",
            "notes": "/api/notes/",
            "tenants": "/api/tenants/{slug}",
            "health": "/api/health/",
        },
    }


# Plain liveness probe
@app.get("/health")
async def basic_health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("tenantnotes.main:app", host=settings.host, port=settings.port, reload=settings.reload)
