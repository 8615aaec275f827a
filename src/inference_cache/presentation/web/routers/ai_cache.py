"""
AI 캐시 관리 API 라우터

대시보드 위젯에서 사용하는 캐시 통계 조회 및 삭제 엔드포인트를 제공합니다.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ....application import InferenceServices
from ....infrastructure.logging import get_logger
from ..dependencies import get_services
from ..schemas import CacheClearResponse, CacheStatsResponse, ErrorResponse

logger = get_logger(__name__)
router = APIRouter(prefix="/api/ai/cache", tags=["ai-cache"])


@router.get(
    "/stats",
    response_model=CacheStatsResponse,
    responses={500: {"model": ErrorResponse}},
)
async def get_cache_stats(services: InferenceServices = Depends(get_services)):
    """
    캐시 통계 조회

    Example:
        GET /api/ai/cache/stats
        Response: {
            "success": true,
            "data": {
                "size": 3, "itemCount": 3, "remainingSize": 10483200,
                "hits": 5, "maxSize": "10 MB", "maxItems": 100
            }
        }
    """
    try:
        return CacheStatsResponse(data=services.cache_admin.stats())
    except Exception as e:
        logger.error("Error fetching cache stats", error=str(e), exc_info=True)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="Failed to get cache statistics").model_dump(),
        )


@router.post(
    "/clear",
    response_model=CacheClearResponse,
    responses={500: {"model": ErrorResponse}},
)
async def clear_cache(services: InferenceServices = Depends(get_services)):
    """
    캐시 전체 삭제 (멱등)

    Example:
        POST /api/ai/cache/clear
        Response: {"success": true, "message": "AI response cache cleared successfully"}
    """
    try:
        services.cache_admin.clear()
        return CacheClearResponse()
    except Exception as e:
        logger.error("Error clearing cache", error=str(e), exc_info=True)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="Failed to clear cache").model_dump(),
        )
