"""
캐시 관리 API 응답 스키마
"""

from typing import Literal, Union

from pydantic import BaseModel, Field


class CacheStatsData(BaseModel):
    """캐시 통계"""

    size: int = Field(..., description="현재 캐시 항목 수")
    itemCount: int = Field(..., description="현재 캐시 항목 수")
    remainingSize: Union[int, Literal["unknown"]] = Field(
        ..., description="남은 바이트 (계산 불가 시 'unknown')"
    )
    hits: int = Field(..., description="캐시 히트 수")
    maxSize: str = Field(..., description="최대 바이트 예산 (예: '10 MB')")
    maxItems: int = Field(..., description="최대 항목 수")


class CacheStatsResponse(BaseModel):
    """캐시 통계 응답"""

    success: bool = True
    data: CacheStatsData


class CacheClearResponse(BaseModel):
    """캐시 삭제 응답"""

    success: bool = True
    message: str = "AI response cache cleared successfully"
