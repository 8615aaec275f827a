"""
HuggingFaceTextGenerator 단위 테스트

httpx.MockTransport로 Inference API 응답을 흉내 내어
요청 형식과 HTTP 상태별 실패 분류를 검증합니다.
"""

import json

import httpx
import pytest

from inference_cache.domain.errors import ErrorCode
from inference_cache.domain.exceptions import (
    UpstreamAuthError,
    UpstreamBadRequestError,
    UpstreamGenericError,
    UpstreamRateLimitedError,
)
from inference_cache.domain.models import GenerationOptions
from inference_cache.infrastructure.huggingface import HuggingFaceTextGenerator


BASE_URL = "https://hf.test/models"


def make_generator(handler, api_token: str = "hf_test_token") -> HuggingFaceTextGenerator:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HuggingFaceTextGenerator(api_token=api_token, base_url=BASE_URL, client=client)


class TestSuccessfulGeneration:
    """정상 응답 테스트"""

    @pytest.mark.asyncio
    async def test_request_format(self):
        """
        모델 URL, Bearer 토큰, 생성 파라미터가 올바르게 전송되어야 합니다.
        """
        # Given
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["url"] = str(request.url)
            captured["auth"] = request.headers.get("Authorization")
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json=[{"generated_text": "hello"}])

        generator = make_generator(handler)
        options = GenerationOptions(max_tokens=800, temperature=0.3, model="org/model")

        # When
        text = await generator.generate("prompt text", options)

        # Then
        assert text == "hello"
        assert captured["url"] == f"{BASE_URL}/org/model"
        assert captured["auth"] == "Bearer hf_test_token"
        assert captured["body"] == {
            "inputs": "prompt text",
            "parameters": {
                "max_new_tokens": 800,
                "temperature": 0.3,
                "top_p": 0.95,
                "return_full_text": False,
            },
        }

    @pytest.mark.asyncio
    async def test_dict_response_format(self):
        generator = make_generator(
            lambda request: httpx.Response(200, json={"generated_text": "single"})
        )

        assert await generator.generate("p", GenerationOptions()) == "single"

    @pytest.mark.asyncio
    async def test_no_authorization_header_without_token(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["auth"] = request.headers.get("Authorization")
            return httpx.Response(200, json=[{"generated_text": "ok"}])

        generator = make_generator(handler, api_token="")
        await generator.generate("p", GenerationOptions())

        assert captured["auth"] is None


class TestFailureClassification:
    """HTTP 상태별 실패 분류 테스트"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status, error_class, error_code",
        [
            (401, UpstreamAuthError, ErrorCode.API_KEY_INVALID),
            (403, UpstreamAuthError, ErrorCode.API_KEY_INVALID),
            (429, UpstreamRateLimitedError, ErrorCode.API_RATE_LIMIT_EXCEEDED),
            (400, UpstreamBadRequestError, ErrorCode.API_BAD_REQUEST),
            (422, UpstreamBadRequestError, ErrorCode.API_BAD_REQUEST),
            (500, UpstreamGenericError, ErrorCode.API_REQUEST_FAILED),
            (503, UpstreamGenericError, ErrorCode.API_REQUEST_FAILED),
        ],
    )
    async def test_status_mapping(self, status, error_class, error_code):
        """
        HTTP 상태 코드가 올바른 실패 분류로 변환되어야 합니다.
        """
        # Given
        generator = make_generator(
            lambda request: httpx.Response(status, json={"error": "nope"})
        )

        # When/Then
        with pytest.raises(error_class) as exc_info:
            await generator.generate("p", GenerationOptions())

        assert exc_info.value.error_code == error_code
        assert exc_info.value.context["status_code"] == status

    @pytest.mark.asyncio
    async def test_transport_error_is_generic(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        generator = make_generator(handler)

        with pytest.raises(UpstreamGenericError) as exc_info:
            await generator.generate("p", GenerationOptions())

        assert exc_info.value.retryable is True
        assert isinstance(exc_info.value.original_error, httpx.ConnectError)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(200, text="not json"),
            httpx.Response(200, json=[]),
            httpx.Response(200, json={"unexpected": "shape"}),
        ],
    )
    async def test_bad_response_format_is_generic(self, response):
        generator = make_generator(lambda request: response)

        with pytest.raises(UpstreamGenericError):
            await generator.generate("p", GenerationOptions())


class TestClientLifecycle:
    """HTTP 클라이언트 수명 관리 테스트"""

    @pytest.mark.asyncio
    async def test_injected_client_is_not_closed(self):
        client = httpx.AsyncClient(
            transport=httpx.MockTransport(lambda request: httpx.Response(200))
        )
        async with HuggingFaceTextGenerator(api_token="t", client=client):
            pass

        assert client.is_closed is False
        await client.aclose()

    @pytest.mark.asyncio
    async def test_owned_client_is_closed(self):
        generator = HuggingFaceTextGenerator(api_token="t")
        await generator.aclose()

        assert generator._client.is_closed is True
