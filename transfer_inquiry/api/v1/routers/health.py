"""
Health check routes
"""

from urllib.parse import urlparse

from fastapi import APIRouter

from transfer_inquiry.core.config import settings
from transfer_inquiry.models.schemas.base import APIResponse

router = APIRouter()


@router.get("/health")
def health_check() -> APIResponse[dict]:
    """Service liveness plus the bank gateway it is configured to call"""
    gateway_host = urlparse(settings.BANK_GATEWAY_URL).netloc
    return APIResponse(
        success=True,
        data={
            "status": "healthy",
            "version": settings.VERSION,
            "bank_gateway": {
                "host": gateway_host,
                "timeout_seconds": settings.BANK_GATEWAY_TIMEOUT_SECONDS,
                "api_key_configured": bool(settings.BANK_GATEWAY_API_KEY),
            },
        },
        message="API is healthy" if gateway_host else "Bank gateway URL is not configured"
    )
