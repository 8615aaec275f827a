"""
inference-cache - AI 응답 캐시

느리고 비싼 upstream 텍스트 생성 호출 앞단에 놓이는
LRU + TTL + 바이트 예산 기반 메모이제이션 계층입니다.

아키텍처:
- domain: 엔트리/통계 모델, 실패 분류 예외, 인터페이스
- application: 캐시 게이트웨이, 재시도/타임아웃 생성기, 관리 서비스
- infrastructure: 응답 캐시, 설정, 로깅, Hugging Face Provider
- presentation: FastAPI 웹 앱, CLI
"""

__version__ = "1.0.0"

from .application import CachedInferenceGateway, ResilientTextGenerator, build_services
from .infrastructure.cache import ResponseCache, hash_prompt

__all__ = [
    "CachedInferenceGateway",
    "ResilientTextGenerator",
    "ResponseCache",
    "build_services",
    "hash_prompt",
]
