"""
Health Check API 라우터
"""

from fastapi import APIRouter, Depends

from ....application import InferenceServices
from ..dependencies import get_services
from ..schemas import HealthCheckResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(
    services: InferenceServices = Depends(get_services),
) -> HealthCheckResponse:
    """
    서비스 상태 확인

    Example:
        GET /health
        Response: {"status": "ok", "message": "Service is running", "cacheEnabled": true}
    """
    return HealthCheckResponse(
        status="ok",
        message="Service is running",
        cacheEnabled=services.gateway.enabled,
    )
