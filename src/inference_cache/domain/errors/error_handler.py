"""에러 핸들러

inference-cache의 커스텀 예외 클래스 및 에러 처리 유틸리티를 제공합니다.
"""

from typing import Optional, Dict, Any
from .error_codes import ErrorCode
from .error_messages import format_error_message


class InferenceCacheError(Exception):
    """inference-cache의 기본 예외 클래스

    모든 커스텀 예외는 이 클래스를 상속합니다.

    Attributes:
        error_code: 에러 코드
        message: 사용자에게 노출 가능한 에러 메시지
        context: 추가 컨텍스트 정보
        original_error: 원본 예외 (있는 경우)

    Examples:
        >>> raise InferenceCacheError(ErrorCode.API_TIMEOUT, timeout=25)
    """

    def __init__(
        self,
        error_code: ErrorCode,
        original_error: Optional[Exception] = None,
        **context: Any
    ):
        """
        Args:
            error_code: 에러 코드
            original_error: 원본 예외 (선택)
            **context: 에러 메시지에 포함할 컨텍스트 정보
        """
        self.error_code = error_code
        self.context = context
        self.original_error = original_error

        if original_error is not None and "error" not in self.context:
            self.context["error"] = str(original_error) or type(original_error).__name__

        self.message = format_error_message(error_code, **self.context)

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """에러를 딕셔너리로 변환 (로깅/API 응답용)

        Returns:
            에러 정보를 담은 딕셔너리
        """
        return {
            "error_code": self.error_code.name,
            "error_number": self.error_code.value,
            "category": self.error_code.category,
            "message": self.message,
            "context": self.context,
        }

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}("
            f"error_code={self.error_code.name}, "
            f"message='{self.message}', "
            f"context={self.context})"
        )


# 에러 코드별 예외 클래스 매핑 (exceptions 모듈에서 등록)
ERROR_CLASS_MAPPING: Dict[ErrorCode, type] = {}


def register_error_class(error_code: ErrorCode, error_class: type) -> None:
    """에러 코드에 대응하는 예외 클래스를 등록합니다."""
    ERROR_CLASS_MAPPING[error_code] = error_class


def handle_error(
    error_code: ErrorCode,
    original_error: Optional[Exception] = None,
    log: bool = True,
    **context: Any
) -> InferenceCacheError:
    """에러를 처리하고 적절한 예외를 반환

    Args:
        error_code: 에러 코드
        original_error: 원본 예외 (선택)
        log: 로깅 여부 (기본: True)
        **context: 에러 컨텍스트 정보

    Returns:
        에러 코드에 매핑된 InferenceCacheError 서브클래스 인스턴스

    Examples:
        >>> try:
        ...     response = await client.post(url, json=payload)
        ... except httpx.TransportError as e:
        ...     raise handle_error(ErrorCode.API_REQUEST_FAILED, original_error=e)
    """
    error_class = ERROR_CLASS_MAPPING.get(error_code, InferenceCacheError)

    exception = error_class(
        error_code=error_code,
        original_error=original_error,
        **context
    )

    if log:
        # 순환 import 방지를 위해 여기서 import
        from ...infrastructure.logging import get_logger
        logger = get_logger(__name__)

        if error_code.value >= 9000:
            logger.critical(
                exception.message,
                error_code=error_code.name,
                exc_info=original_error
            )
        elif error_code.value >= 4000:
            logger.error(
                exception.message,
                error_code=error_code.name,
            )
        else:
            logger.warning(
                exception.message,
                error_code=error_code.name,
            )

    return exception
