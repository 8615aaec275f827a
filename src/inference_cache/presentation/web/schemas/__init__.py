"""
웹 API 스키마
"""

from .cache import CacheStatsData, CacheStatsResponse, CacheClearResponse
from .request import (
    AiQueryRequest,
    AiQueryData,
    AiQueryResponse,
    ErrorResponse,
    HealthCheckResponse,
)

__all__ = [
    "CacheStatsData",
    "CacheStatsResponse",
    "CacheClearResponse",
    "AiQueryRequest",
    "AiQueryData",
    "AiQueryResponse",
    "ErrorResponse",
    "HealthCheckResponse",
]
