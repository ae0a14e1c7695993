import logging
from contextlib import asynccontextmanager

import sentry_sdk
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration

from src.config.database import dispose_engine, init_db
from src.config.logging import setup_logging
from src.config.settings import settings
from src.invitees.routers import router as invitees_router
from src.routers.errors import request_validation_error_handler
from src.routers.healthz.router import router as healthz_router
from src.rsvp.routers import router as rsvp_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    if settings.RUN_MIGRATIONS_ON_STARTUP:
        logger.info("Running database migrations")
        await init_db()
    yield
    await dispose_engine()


if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        profiles_sample_rate=settings.SENTRY_PROFILES_SAMPLE_RATE,
        integrations=[
            StarletteIntegration(transaction_style="endpoint"),
            FastApiIntegration(transaction_style="endpoint"),
        ],
        send_default_pii=False,
    )

app = FastAPI(
    title="Event Invitations API",
    description="API for invitee registration, RSVPs and notification dispatch",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(RequestValidationError, request_validation_error_handler)

# Include routers
app.include_router(healthz_router, prefix="/healthz", tags=["Healthz"])
app.include_router(invitees_router, tags=["Invitees"])
app.include_router(rsvp_router, tags=["RSVP"])


@app.get("/", tags=["Root"])
async def root():
    return {"message": "Welcome to the Event Invitations API"}
