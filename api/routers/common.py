"""Common API endpoints router."""

from fastapi import APIRouter

from api.dependencies import SettingsDep
from api.literals import HEALTH_ENDPOINT
from core.log import get_logger
from core.models.api.responses import HealthResponse
from core.utils import get_current_timestamp

logger = get_logger(__name__)

router = APIRouter(tags=["common"])


@router.get(HEALTH_ENDPOINT, response_model=HealthResponse)
async def health_check(settings: SettingsDep) -> HealthResponse:
    """Health check endpoint. Does not require a session."""
    return HealthResponse(
        status="healthy",
        version=settings.api_version,
        timestamp=get_current_timestamp(),
    )
