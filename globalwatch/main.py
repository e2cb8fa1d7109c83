from contextlib import asynccontextmanager

from fastapi import FastAPI

from globalwatch.api.routes import age_progression, health, people
from globalwatch.core.config import settings
from globalwatch.core.logging import get_logger

log = get_logger("globalwatch")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Log environment mode
    log.info(f"Starting application in {settings.ENV.upper()} mode")
    if settings.is_production:
        log.info("Production mode: Debug disabled, docs disabled, stricter logging")
    else:
        log.info("Development mode: Debug enabled, docs available")

    log.info(f"Record sources: {', '.join(settings.ENABLED_SOURCES) or 'none'}")
    if not settings.AGE_PROGRESSION_URL:
        log.info("Age progression service not configured; /age-progression will answer 503")

    yield

    log.info("Application shutdown complete")


# Configure FastAPI based on environment
app = FastAPI(
    title="Global Watch",
    description="Normalized and classified wanted / missing person records from the FBI and INTERPOL",
    version="1.0.0",
    lifespan=lifespan,
    # Disable docs in production for security
    docs_url="/docs" if settings.docs_enabled else None,
    redoc_url="/redoc" if settings.docs_enabled else None,
    openapi_url="/openapi.json" if settings.docs_enabled else None,
    # Debug mode only in development
    debug=settings.debug_enabled,
)


app.include_router(people.router)
app.include_router(age_progression.router)
app.include_router(health.router)
