"""
애플리케이션 설정

프로세스 시작 시 환경변수(.env 포함)에서 한 번 읽어들이는 설정입니다.
시간 단위 환경변수는 밀리초, 내부 설정 값은 초 단위를 사용합니다.
"""

from dataclasses import dataclass
from typing import Optional

from ...domain.errors import ErrorCode, handle_error
from ...domain.models import DEFAULT_MODEL
from .env_utils import parse_bool_env, parse_int_env, parse_str_env

DEFAULT_HF_API_URL = "https://api-inference.huggingface.co/models"


@dataclass
class AppSettings:
    """
    inference-cache 설정

    Attributes:
        cache_enabled: 전역 캐시 활성화 여부 (ENABLE_LRU_CACHE)
        cache_max_items: 최대 캐시 항목 수
        cache_max_size_bytes: 최대 캐시 바이트 (None이면 바이트 계산 안 함)
        cache_ttl_seconds: 캐시 만료 시간 (초)
        collapse_in_flight: 동일 키의 동시 생성 요청을 하나로 합칠지 여부
        retry_count: 최초 시도 이후 추가 재시도 횟수
        retry_base_delay_seconds: 재시도 기본 대기 시간 (초)
        request_timeout_seconds: 재시도를 포함한 전체 생성 타임아웃 (초)
        hf_api_token: Hugging Face API 토큰
        hf_model: 기본 모델 식별자
        hf_api_url: Inference API 기본 URL
        log_level: 로그 레벨
        log_dir: 로그 디렉토리
        log_json: JSON 로그 출력 여부
        web_host: 웹 서버 호스트
        web_port: 웹 서버 포트
    """
    # Cache 설정
    cache_enabled: bool = True
    cache_max_items: int = 100
    cache_max_size_bytes: Optional[int] = 10 * 1024 * 1024
    cache_ttl_seconds: float = 3600.0
    collapse_in_flight: bool = False

    # Resilience 설정
    retry_count: int = 2
    retry_base_delay_seconds: float = 0.5
    request_timeout_seconds: float = 25.0

    # Upstream 설정
    hf_api_token: str = ""
    hf_model: str = DEFAULT_MODEL
    hf_api_url: str = DEFAULT_HF_API_URL

    # Logging 설정
    log_level: str = "INFO"
    log_dir: Optional[str] = "logs"
    log_json: bool = True

    # Web 설정
    web_host: str = "127.0.0.1"
    web_port: int = 8000

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """
        설정 값 검증

        Raises:
            InferenceCacheError: CONFIG_INVALID
        """
        checks = [
            ("cache_max_items", self.cache_max_items >= 1, "must be >= 1"),
            (
                "cache_max_size_bytes",
                self.cache_max_size_bytes is None or self.cache_max_size_bytes >= 1,
                "must be >= 1 (or 0 to disable byte accounting)",
            ),
            ("cache_ttl_seconds", self.cache_ttl_seconds > 0, "must be > 0"),
            ("retry_count", self.retry_count >= 0, "must be >= 0"),
            ("retry_base_delay_seconds", self.retry_base_delay_seconds > 0, "must be > 0"),
            ("request_timeout_seconds", self.request_timeout_seconds > 0, "must be > 0"),
        ]
        for field_name, ok, error in checks:
            if not ok:
                raise handle_error(
                    ErrorCode.CONFIG_INVALID,
                    field_name=field_name,
                    error=error,
                )

    @property
    def has_upstream_token(self) -> bool:
        return bool(self.hf_api_token)


def load_settings() -> AppSettings:
    """
    환경변수에서 설정 로드

    Returns:
        AppSettings

    Raises:
        InferenceCacheError: 설정 값이 유효하지 않은 경우
    """
    max_size_bytes = parse_int_env("AI_CACHE_MAX_SIZE_BYTES", 10 * 1024 * 1024)

    return AppSettings(
        cache_enabled=parse_bool_env("ENABLE_LRU_CACHE", default=True),
        cache_max_items=parse_int_env("AI_CACHE_MAX_ITEMS", 100),
        # 0은 바이트 계산 비활성화
        cache_max_size_bytes=max_size_bytes if max_size_bytes != 0 else None,
        cache_ttl_seconds=parse_int_env("AI_CACHE_TTL_MS", 3600 * 1000) / 1000,
        collapse_in_flight=parse_bool_env("AI_CACHE_COLLAPSE_IN_FLIGHT", default=False),
        retry_count=parse_int_env("AI_RETRY_COUNT", 2),
        retry_base_delay_seconds=parse_int_env("AI_RETRY_BASE_DELAY_MS", 500) / 1000,
        request_timeout_seconds=parse_int_env("AI_REQUEST_TIMEOUT_MS", 25000) / 1000,
        hf_api_token=parse_str_env("HF_API_TOKEN"),
        hf_model=parse_str_env("HF_MODEL", DEFAULT_MODEL),
        hf_api_url=parse_str_env("HF_API_URL", DEFAULT_HF_API_URL).rstrip("/"),
        log_level=parse_str_env("LOG_LEVEL", "INFO").upper(),
        log_dir=parse_str_env("LOG_DIR", "logs") or None,
        log_json=parse_bool_env("LOG_JSON", default=True),
        web_host=parse_str_env("WEB_HOST", "127.0.0.1"),
        web_port=parse_int_env("WEB_PORT", 8000),
    )
