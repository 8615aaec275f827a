"""
캐시 모델 정의

응답 캐시 엔트리와 통계 스냅샷 모델을 정의합니다.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class CacheEntry:
    """
    캐시 엔트리 데이터 클래스

    Attributes:
        key: 프롬프트의 SHA-256 hex digest
        value: 직렬화된 응답 (캐시는 내용을 해석하지 않음)
        size_bytes: key + value 의 UTF-8 바이트 길이
        inserted_at: 삽입 시각 (monotonic clock 기준, 초)
        expires_at: 만료 시각 (inserted_at + ttl, 읽기로 연장되지 않음)
        access_count: 조회 횟수
    """
    key: str
    value: str
    size_bytes: int
    inserted_at: float
    expires_at: float
    access_count: int = 0

    def is_expired(self, now: float) -> bool:
        """
        TTL 만료 여부 확인

        Args:
            now: 현재 시각 (inserted_at과 같은 clock 기준)

        Returns:
            now >= expires_at 이면 True
        """
        return now >= self.expires_at


@dataclass(frozen=True)
class CacheStats:
    """
    캐시 통계 스냅샷 (읽기 전용)

    approx_byte_size가 None이면 바이트 사용량을 알 수 없음을 의미합니다.
    이 경우 사용률(%)을 계산해서는 안 됩니다.
    """
    item_count: int
    approx_byte_size: Optional[int]
    max_items: int
    max_size_bytes: Optional[int]
    hits: int = 0
    misses: int = 0
    evictions: int = 0
    expirations: int = 0

    @property
    def remaining_bytes(self) -> Optional[int]:
        """남은 바이트 용량 (알 수 없으면 None)"""
        if self.approx_byte_size is None or self.max_size_bytes is None:
            return None
        return self.max_size_bytes - self.approx_byte_size

    @property
    def hit_rate(self) -> float:
        """히트율 (%)"""
        total = self.hits + self.misses
        return round(self.hits / total * 100, 2) if total > 0 else 0.0
