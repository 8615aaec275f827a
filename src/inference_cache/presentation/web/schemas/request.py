"""
웹 API 요청/응답 스키마 정의

이 모듈은 FastAPI 엔드포인트에서 사용하는 Pydantic 모델을 정의합니다.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class AiQueryRequest(BaseModel):
    """AI 질의 요청 스키마"""

    query: str = Field(
        ...,
        description="사용자 질의",
        min_length=1,
        max_length=5000,
    )
    useCache: bool = Field(True, description="이번 요청에 캐시를 사용할지 여부")

    @field_validator("query")
    @classmethod
    def validate_query(cls, v: str) -> str:
        """질의 검증 (공백만 있는 경우 거부)"""
        if not v.strip():
            raise ValueError("Query is required")
        return v.strip()


class AiQueryData(BaseModel):
    """AI 질의 결과"""

    query: str
    response: str = Field(..., description="JSON 문자열 형식의 모델 응답")
    cached: bool = Field(..., description="캐시 히트 여부")


class AiQueryResponse(BaseModel):
    """AI 질의 응답 스키마"""

    success: bool = True
    data: AiQueryData


class ErrorResponse(BaseModel):
    """에러 응답 스키마"""

    success: bool = False
    error: str = Field(..., description="사용자에게 표시할 에러 메시지")
    errorCode: Optional[str] = Field(None, description="에러 코드 (예: API_TIMEOUT)")
    kind: Optional[str] = Field(None, description="실패 분류 (timeout, rate_limit 등)")


class HealthCheckResponse(BaseModel):
    """Health Check 응답 스키마"""

    status: str = Field(..., description="서비스 상태")
    message: str = Field(..., description="상태 메시지")
    cacheEnabled: bool = Field(..., description="캐시 활성화 여부")
