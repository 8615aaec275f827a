"""
캐시 인프라스트럭처 모듈

프롬프트 해시 기반 응답 캐싱 기능 제공
"""

from .codec import JsonCodec
from .response_cache import (
    ResponseCache,
    hash_prompt,
    DEFAULT_MAX_ITEMS,
    DEFAULT_MAX_SIZE_BYTES,
    DEFAULT_TTL_SECONDS,
)

__all__ = [
    "JsonCodec",
    "ResponseCache",
    "hash_prompt",
    "DEFAULT_MAX_ITEMS",
    "DEFAULT_MAX_SIZE_BYTES",
    "DEFAULT_TTL_SECONDS",
]
