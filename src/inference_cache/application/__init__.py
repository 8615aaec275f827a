"""
Application Layer

캐시 게이트웨이, 재시도/타임아웃 생성기, 관리 서비스 조립

Structure:
- gateway: 프롬프트 해시 기반 메모이제이션
- text_generation: 재시도 + 하드 타임아웃 generate 함수
- resilience: 재시도 정책
- cache_admin: 통계/삭제 관리 서비스
- business_query: 비즈니스 질의 프롬프트 및 응답 처리
- service_factory: 의존성 주입
"""

from .business_query import BusinessQueryService, QueryResult, create_business_prompt
from .cache_admin import CacheAdminService, usage_percentage
from .gateway import CachedInferenceGateway
from .service_factory import InferenceServices, build_services
from .text_generation import ResilientTextGenerator

__all__ = [
    "BusinessQueryService",
    "QueryResult",
    "create_business_prompt",
    "CacheAdminService",
    "usage_percentage",
    "CachedInferenceGateway",
    "InferenceServices",
    "build_services",
    "ResilientTextGenerator",
]
