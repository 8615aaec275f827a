"""
AI 질의 API 라우터

비즈니스 질의를 캐시 게이트웨이를 거쳐 처리합니다.
Upstream 실패는 분류별로 다른 HTTP 상태와 에러 코드로 응답하며,
대체 응답을 만들어내지는 않습니다.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ....application import InferenceServices
from ....domain.exceptions import UpstreamError
from ....infrastructure.logging import get_logger
from ..dependencies import get_services
from ..schemas import AiQueryData, AiQueryRequest, AiQueryResponse, ErrorResponse

logger = get_logger(__name__)
router = APIRouter(prefix="/api/ai", tags=["ai"])

# 실패 분류 → HTTP 상태
STATUS_BY_KIND = {
    "timeout": 504,
    "rate_limit": 429,
    "authentication": 502,
    "bad_request": 502,
    "generic": 502,
}


def error_response(error: UpstreamError) -> JSONResponse:
    """UpstreamError를 분류별 JSON 에러 응답으로 변환"""
    body = ErrorResponse(
        error=error.message,
        errorCode=error.error_code.name,
        kind=error.kind,
    )
    return JSONResponse(
        status_code=STATUS_BY_KIND.get(error.kind, 502),
        content=body.model_dump(),
    )


@router.post(
    "/query",
    response_model=AiQueryResponse,
    responses={
        429: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        504: {"model": ErrorResponse},
    },
)
async def run_query(
    request: AiQueryRequest,
    services: InferenceServices = Depends(get_services),
):
    """
    비즈니스 질의 실행

    Example:
        POST /api/ai/query
        Request: {"query": "Forecast Q3 revenue", "useCache": true}
        Response: {
            "success": true,
            "data": {"query": "...", "response": "{\\"type\\": \\"forecast\\", ...}", "cached": false}
        }
    """
    logger.info(
        "AI query received",
        query_length=len(request.query),
        use_cache=request.useCache,
    )

    try:
        result = await services.business_queries.process(
            request.query,
            use_cache=request.useCache,
        )
    except UpstreamError as e:
        logger.warning("AI query failed", error_code=e.error_code.name, kind=e.kind)
        return error_response(e)

    return AiQueryResponse(
        data=AiQueryData(
            query=result.query,
            response=result.response,
            cached=result.cached,
        )
    )
