"""
Domain Layer

캐시 엔트리/통계 모델, 실패 분류 예외, 그리고 외부 의존성 인터페이스.
"""

from .exceptions import (
    RetryableError,
    UpstreamError,
    UpstreamTimeoutError,
    UpstreamAuthError,
    UpstreamBadRequestError,
    UpstreamRateLimitedError,
    UpstreamGenericError,
    SerializationError,
)
from .models import CacheEntry, CacheStats, GenerationOptions

__all__ = [
    "RetryableError",
    "UpstreamError",
    "UpstreamTimeoutError",
    "UpstreamAuthError",
    "UpstreamBadRequestError",
    "UpstreamRateLimitedError",
    "UpstreamGenericError",
    "SerializationError",
    "CacheEntry",
    "CacheStats",
    "GenerationOptions",
]
