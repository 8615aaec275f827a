"""
텍스트 생성 Provider 인터페이스

Upstream 텍스트 생성 서비스는 블랙박스로 취급합니다.
구현체는 실패 시 UpstreamError 계열 예외로 분류해서 던져야 합니다.
"""

from abc import ABC, abstractmethod

from ..models import GenerationOptions


class ITextGenerationProvider(ABC):
    """Upstream 텍스트 생성 Provider 인터페이스"""

    @abstractmethod
    async def generate(self, prompt: str, options: GenerationOptions) -> str:
        """
        프롬프트로부터 텍스트 생성

        Args:
            prompt: 입력 프롬프트
            options: 생성 파라미터

        Returns:
            생성된 텍스트

        Raises:
            UpstreamAuthError: 인증 실패
            UpstreamBadRequestError: 잘못된 요청
            UpstreamRateLimitedError: 호출 한도 초과
            UpstreamGenericError: 기타 실패
        """
        pass
