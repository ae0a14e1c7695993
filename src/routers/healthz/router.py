from fastapi import APIRouter
from pydantic import BaseModel

from src.config.settings import settings
from src.notifications import get_dispatcher

router = APIRouter()


class HealthCheckResponse(BaseModel):
    status: str
    version: str = "0.1.0"
    environment: str
    channels: list[str]


@router.get("/", response_model=HealthCheckResponse)
async def health_check() -> HealthCheckResponse:
    """
    Health check endpoint to verify the API is running.

    Also lists the notification channels that have a sender configured.
    """
    return HealthCheckResponse(
        status="healthy",
        environment=settings.ENVIRONMENT,
        channels=sorted(channel.value for channel in get_dispatcher().channels),
    )
