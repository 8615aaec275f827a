"""
Service Factory

설정으로부터 캐시, 게이트웨이, 텍스트 생성기, 관리 서비스를 생성하고
의존성을 주입합니다. 모듈 전역 싱글톤 대신 생성된 인스턴스 하나를
웹 앱 lifespan 또는 CLI가 소유합니다.
"""

from dataclasses import dataclass
from typing import Optional

from ..domain.interfaces import ITextGenerationProvider
from ..domain.models import GenerationOptions
from ..infrastructure.cache import ResponseCache
from ..infrastructure.config import AppSettings
from ..infrastructure.huggingface import HuggingFaceTextGenerator
from ..infrastructure.logging import get_logger
from .business_query import BusinessQueryService
from .cache_admin import CacheAdminService
from .gateway import CachedInferenceGateway
from .resilience import LinearBackoffRetryPolicy
from .text_generation import ResilientTextGenerator

logger = get_logger(__name__, component="ServiceFactory")


@dataclass
class InferenceServices:
    """생성된 서비스 묶음"""
    settings: AppSettings
    cache: ResponseCache
    gateway: CachedInferenceGateway
    generator: ResilientTextGenerator
    business_queries: BusinessQueryService
    cache_admin: CacheAdminService
    provider: ITextGenerationProvider

    async def aclose(self) -> None:
        """Provider가 가진 리소스 정리"""
        aclose = getattr(self.provider, "aclose", None)
        if aclose is not None:
            await aclose()


def build_services(
    settings: AppSettings,
    provider: Optional[ITextGenerationProvider] = None,
) -> InferenceServices:
    """
    설정으로 서비스 묶음 생성

    Args:
        settings: 애플리케이션 설정
        provider: 주입할 Upstream Provider (None이면 Hugging Face)

    Returns:
        InferenceServices
    """
    if provider is None:
        if not settings.has_upstream_token:
            logger.warning("HF_API_TOKEN is not set; upstream calls will fail authentication")
        provider = HuggingFaceTextGenerator(
            api_token=settings.hf_api_token,
            base_url=settings.hf_api_url,
        )

    cache = ResponseCache(
        max_items=settings.cache_max_items,
        max_size_bytes=settings.cache_max_size_bytes,
        ttl_seconds=settings.cache_ttl_seconds,
    )
    gateway = CachedInferenceGateway(
        cache,
        enabled=settings.cache_enabled,
        collapse_in_flight=settings.collapse_in_flight,
    )
    retry_policy = LinearBackoffRetryPolicy.from_retry_count(
        settings.retry_count,
        base_delay=settings.retry_base_delay_seconds,
        max_delay=settings.retry_base_delay_seconds * 10,
    )
    generator = ResilientTextGenerator(
        provider,
        retry_policy,
        timeout_seconds=settings.request_timeout_seconds,
        default_options=GenerationOptions(model=settings.hf_model),
    )

    logger.info(
        "Inference services built",
        cache_enabled=settings.cache_enabled,
        model=settings.hf_model,
        retry_count=settings.retry_count,
        timeout_seconds=settings.request_timeout_seconds,
    )

    return InferenceServices(
        settings=settings,
        cache=cache,
        gateway=gateway,
        generator=generator,
        business_queries=BusinessQueryService(gateway, generator),
        cache_admin=CacheAdminService(cache),
        provider=provider,
    )
