"""Main FastAPI application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

from organizer.api.routes import auth, tasks
from organizer.api.routes.frontend import frontend_router
from organizer.config import get_settings
from organizer.core.context import get_context
from organizer.core.errors import OrganizerError
from organizer.core.logging import setup_logging
from organizer.telemetry import TelemetryManager

# Get settings
settings = get_settings()

# Configure logging
setup_logging(settings)
logger = logging.getLogger(__name__)

# Initialize telemetry
telemetry_manager = TelemetryManager(settings)
telemetry_manager.setup()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    context = get_context()
    logger.info(
        f"Starting {context.settings.app_name} in {context.settings.environment} mode "
        f"on port {context.settings.port}"
    )
    logger.info(f"CORS origins: {', '.join(context.settings.cors_origins)}")

    if context.settings.environment == "production":
        for name in context.settings.insecure_secrets():
            logger.error(f"Default {name} in use in production; set it in the environment")

    context.store.create_tables()
    logger.info("Database initialized")

    yield

    context.store.dispose()
    telemetry_manager.shutdown()
    logger.info(f"Shutting down {context.settings.app_name}")


# Create FastAPI application
app = FastAPI(
    title="Organizer",
    description="Task, comment and group organizer",
    version="0.1.0",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Instrument FastAPI with OpenTelemetry
if settings.otel_enabled:
    FastAPIInstrumentor.instrument_app(app)
    logger.info("FastAPI instrumented with OpenTelemetry")

# Include routers
app.include_router(auth.router)
app.include_router(tasks.router)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


# Built frontend; included last so API routes take precedence
if settings.environment == "production" and settings.static_dir:
    app.include_router(frontend_router(settings.static_dir))
    logger.info(f"Serving frontend from {settings.static_dir}")


@app.exception_handler(OrganizerError)
async def organizer_exception_handler(request: Request, exc: OrganizerError):
    """Errors that escaped their route. Details stay in the log."""
    logger.error(f"{request.method} {request.url.path} failed: {exc.message}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "organizer.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )
