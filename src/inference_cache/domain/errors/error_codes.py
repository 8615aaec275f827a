"""에러 코드 정의

inference-cache의 모든 에러를 카테고리별로 분류하여 관리합니다.
"""

from enum import Enum


class ErrorCode(Enum):
    """inference-cache 에러 코드

    에러 코드는 4자리 숫자로 구성되며, 앞 두 자리는 카테고리를 나타냅니다.

    Categories:
        20xx: Config 관련 에러
        40xx: Upstream API 관련 에러
        80xx: Cache 관련 에러
        90xx: 기타 에러
    """

    # ==================== Config 관련 (2000-2999) ====================
    CONFIG_INVALID = 2002
    """설정 값 오류"""

    # ==================== API 관련 (4000-4999) ====================
    API_KEY_INVALID = 4002
    """인증 실패 (401/403)"""

    API_RATE_LIMIT_EXCEEDED = 4003
    """API 호출 한도 초과 (429)"""

    API_REQUEST_FAILED = 4004
    """API 요청 실패 (재시도 가능)"""

    API_BAD_REQUEST = 4005
    """잘못된 요청 (400/422, 재시도 불가)"""

    API_TIMEOUT = 4006
    """API 응답 타임아웃"""

    # ==================== Cache 관련 (8000-8999) ====================
    CACHE_SERIALIZATION_FAILED = 8004
    """캐시 직렬화/역직렬화 실패"""

    # ==================== 기타 (9000-9999) ====================
    UNKNOWN_ERROR = 9001
    """알 수 없는 에러"""

    @property
    def category(self) -> str:
        """에러 코드의 카테고리 이름 반환"""
        return _CATEGORIES.get(self.value // 1000, "Unknown")

    def __str__(self) -> str:
        """에러 코드를 문자열로 반환 (예: 'API_TIMEOUT (4006)')"""
        return f"{self.name} ({self.value})"


_CATEGORIES = {
    2: "Config",
    4: "API",
    8: "Cache",
    9: "Other",
}
