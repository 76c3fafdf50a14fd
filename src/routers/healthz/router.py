from fastapi import APIRouter

from src.config.settings import settings
from src.guests.schemas import CamelModel

router = APIRouter()


class HealthCheckResponse(CamelModel):
    status: str
    version: str = "0.1.0"
    airtable_configured: bool


@router.get("/", response_model=HealthCheckResponse)
async def health_check() -> HealthCheckResponse:
    """
    Health check endpoint to verify the API is running.
    Does not call Airtable, only reports whether credentials are present.
    """
    return HealthCheckResponse(
        status="healthy",
        airtable_configured=bool(settings.airtable_api_key and settings.airtable_base_id),
    )
