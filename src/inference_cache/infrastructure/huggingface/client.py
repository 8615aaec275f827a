"""
Hugging Face Inference API 텍스트 생성 Provider

HTTP 응답 상태를 실패 분류(인증/요청 오류/호출 한도/기타)로 변환합니다.
재시도와 타임아웃은 이 계층이 아니라 ResilientTextGenerator가 담당합니다.
"""

from typing import Any, Optional

import httpx

from ...domain.errors import ErrorCode, handle_error
from ...domain.interfaces import ITextGenerationProvider
from ...domain.models import GenerationOptions
from ..logging import get_logger

logger = get_logger(__name__, component="HuggingFaceTextGenerator")

_AUTH_STATUSES = (401, 403)
_BAD_REQUEST_STATUSES = (400, 404, 413, 422)
_RATE_LIMIT_STATUS = 429


class HuggingFaceTextGenerator(ITextGenerationProvider):
    """
    Hugging Face Inference API 기반 텍스트 생성

    Example:
        >>> async with HuggingFaceTextGenerator(api_token="hf_...") as provider:
        ...     text = await provider.generate("Hello", GenerationOptions())
    """

    def __init__(
        self,
        api_token: str,
        base_url: str = "https://api-inference.huggingface.co/models",
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Args:
            api_token: Hugging Face API 토큰
            base_url: Inference API 기본 URL (모델 ID가 뒤에 붙음)
            client: 주입할 httpx.AsyncClient (None이면 내부 생성)
        """
        self.base_url = base_url.rstrip("/")
        self._api_token = api_token
        self._owns_client = client is None
        # 전체 타임아웃은 상위 계층에서 관리하므로 HTTP 타임아웃은 두지 않음
        self._client = client or httpx.AsyncClient(
            timeout=None,
            limits=httpx.Limits(max_keepalive_connections=10, max_connections=50),
        )

    async def __aenter__(self) -> "HuggingFaceTextGenerator":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """내부에서 생성한 HTTP 클라이언트 정리"""
        if self._owns_client:
            await self._client.aclose()

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._api_token:
            headers["Authorization"] = f"Bearer {self._api_token}"
        return headers

    @staticmethod
    def _payload(prompt: str, options: GenerationOptions) -> dict[str, Any]:
        return {
            "inputs": prompt,
            "parameters": {
                "max_new_tokens": options.max_tokens,
                "temperature": options.temperature,
                "top_p": options.top_p,
                "return_full_text": False,
            },
        }

    async def generate(self, prompt: str, options: GenerationOptions) -> str:
        """
        텍스트 생성 요청

        Args:
            prompt: 입력 프롬프트
            options: 생성 파라미터

        Returns:
            생성된 텍스트

        Raises:
            UpstreamAuthError: 401/403
            UpstreamBadRequestError: 400/404/413/422
            UpstreamRateLimitedError: 429
            UpstreamGenericError: 5xx, 네트워크 오류, 응답 형식 오류
        """
        url = f"{self.base_url}/{options.model}"
        logger.info(
            "Generating text",
            model=options.model,
            prompt_length=len(prompt),
        )

        try:
            response = await self._client.post(
                url,
                json=self._payload(prompt, options),
                headers=self._headers(),
            )
        except httpx.TransportError as e:
            raise handle_error(
                ErrorCode.API_REQUEST_FAILED,
                original_error=e,
                model=options.model,
            ) from e

        self._raise_for_status(response, options.model)

        text = self._extract_text(response, options.model)
        logger.info(
            "Generated response",
            model=options.model,
            response_length=len(text),
        )
        return text

    @staticmethod
    def _raise_for_status(response: httpx.Response, model: str) -> None:
        status = response.status_code
        if status < 400:
            return

        detail = f"HTTP {status}: {response.text[:200]}"
        if status in _AUTH_STATUSES:
            code = ErrorCode.API_KEY_INVALID
        elif status == _RATE_LIMIT_STATUS:
            code = ErrorCode.API_RATE_LIMIT_EXCEEDED
        elif status in _BAD_REQUEST_STATUSES:
            code = ErrorCode.API_BAD_REQUEST
        else:
            code = ErrorCode.API_REQUEST_FAILED

        raise handle_error(code, error=detail, model=model, status_code=status)

    @staticmethod
    def _extract_text(response: httpx.Response, model: str) -> str:
        try:
            body = response.json()
        except ValueError as e:
            raise handle_error(
                ErrorCode.API_REQUEST_FAILED,
                original_error=e,
                model=model,
            ) from e

        # 응답 형식: [{"generated_text": "..."}] 또는 {"generated_text": "..."}
        if isinstance(body, list) and body:
            body = body[0]
        if isinstance(body, dict) and isinstance(body.get("generated_text"), str):
            return body["generated_text"]

        raise handle_error(
            ErrorCode.API_REQUEST_FAILED,
            error="Unexpected response format",
            model=model,
        )
