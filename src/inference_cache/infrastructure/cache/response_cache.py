"""
응답 캐시

LRU 캐시 기반으로 프롬프트 해시와 직렬화된 응답을 저장하여
중복 upstream 호출을 방지합니다.

세 가지 독립적인 제거 압력을 가집니다:
    - 항목 수 (max_items): 초과 시 LRU 항목 제거
    - 총 바이트 크기 (max_size_bytes): 초과 시 LRU 항목 제거
    - 절대 만료 시각 (ttl): 만료 항목은 조회 시 지연 제거
"""

import hashlib
import threading
import time
from collections import OrderedDict
from typing import Callable, Optional

from ...domain.models import CacheEntry, CacheStats
from ..logging import get_logger

logger = get_logger(__name__, component="ResponseCache")

DEFAULT_MAX_ITEMS = 100
DEFAULT_MAX_SIZE_BYTES = 10 * 1024 * 1024
DEFAULT_TTL_SECONDS = 3600.0


def hash_prompt(prompt: str) -> str:
    """
    프롬프트에서 캐시 키 생성

    동일한 프롬프트 텍스트는 프로세스와 무관하게 항상 같은 키를 만듭니다.

    Args:
        prompt: 프롬프트 텍스트

    Returns:
        SHA-256 hex digest (64자)
    """
    return hashlib.sha256(prompt.encode("utf-8")).hexdigest()


class ResponseCache:
    """
    LRU + TTL + 바이트 예산 기반 응답 캐시

    값은 불투명한 문자열이며 캐시는 내용을 해석하지 않습니다.
    set() 안에서의 제거는 동기적으로 수행되므로 삽입과 제거가
    하나의 원자적 단계로 처리됩니다.

    Attributes:
        max_items: 최대 항목 수
        max_size_bytes: 최대 총 바이트 크기 (None이면 바이트 계산 안 함)
        ttl_seconds: 항목별 만료 시간 (초)
        update_recency_on_read: 조회 시 LRU 순서 갱신 여부
    """

    def __init__(
        self,
        max_items: int = DEFAULT_MAX_ITEMS,
        max_size_bytes: Optional[int] = DEFAULT_MAX_SIZE_BYTES,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        update_recency_on_read: bool = True,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Args:
            max_items: 최대 항목 수 (기본: 100)
            max_size_bytes: 최대 총 바이트 크기 (기본: 10 MiB, None이면 제한 없음)
            ttl_seconds: 만료 시간 (초, 기본: 3600 = 1시간)
            update_recency_on_read: 조회가 LRU 순서를 갱신하는지 여부 (기본: True).
                                   만료 시각은 갱신하지 않음
            clock: 단조 증가 시계 (테스트에서 교체 가능)

        Raises:
            ValueError: 설정 값이 유효하지 않은 경우
        """
        if max_items < 1:
            raise ValueError("max_items는 1 이상이어야 합니다.")
        if max_size_bytes is not None and max_size_bytes < 1:
            raise ValueError("max_size_bytes는 1 이상이거나 None이어야 합니다.")
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds는 0보다 커야 합니다.")

        self.max_items = max_items
        self.max_size_bytes = max_size_bytes
        self.ttl_seconds = ttl_seconds
        self.update_recency_on_read = update_recency_on_read
        self._clock = clock

        # LRU 캐시 (앞쪽이 가장 오래 사용되지 않은 항목)
        self._cache: OrderedDict[str, CacheEntry] = OrderedDict()
        self._total_bytes = 0

        # FastAPI 동기 핸들러(스레드풀)에서 접근될 수 있으므로 락 사용
        self._lock = threading.RLock()

        self._stats = {
            "hits": 0,
            "misses": 0,
            "evictions": 0,
            "expirations": 0,
        }

        logger.info(
            "ResponseCache initialized",
            max_items=max_items,
            max_size_bytes=max_size_bytes,
            ttl_seconds=ttl_seconds,
            update_recency_on_read=update_recency_on_read,
        )

    @property
    def tracks_size(self) -> bool:
        """바이트 크기 계산 여부"""
        return self.max_size_bytes is not None

    def get(self, key: str) -> Optional[str]:
        """
        캐시에서 값 조회

        만료된 항목은 미스로 취급하고 즉시 제거합니다.

        Args:
            key: 캐시 키

        Returns:
            저장된 값 또는 None
        """
        now = self._clock()

        with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                self._stats["misses"] += 1
                logger.debug("Cache miss", key_prefix=key[:16])
                return None

            if entry.is_expired(now):
                self._remove(key)
                self._stats["expirations"] += 1
                self._stats["misses"] += 1
                logger.debug(
                    "Cache expired",
                    key_prefix=key[:16],
                    age_seconds=round(now - entry.inserted_at, 3),
                )
                return None

            entry.access_count += 1
            if self.update_recency_on_read:
                self._cache.move_to_end(key)
            self._stats["hits"] += 1

            logger.debug(
                "Cache hit",
                key_prefix=key[:16],
                access_count=entry.access_count,
            )
            return entry.value

    def set(self, key: str, value: str) -> bool:
        """
        캐시에 값 저장

        제한을 넘으면 새 항목이 아닌 LRU 항목부터 제거합니다.
        항목 하나가 max_size_bytes보다 크면 저장하지 않습니다.
        기존 키를 덮어쓰면 값과 크기를 교체하고 최근 사용으로 이동합니다.

        Args:
            key: 캐시 키
            value: 직렬화된 값

        Returns:
            저장 여부 (단일 항목이 예산을 초과하면 False)
        """
        now = self._clock()
        size_bytes = self._entry_size(key, value)

        with self._lock:
            # 덮어쓰기: 이전 값은 새 값으로 대체되므로 먼저 제거
            self._remove(key)

            if self.max_size_bytes is not None and size_bytes > self.max_size_bytes:
                logger.warning(
                    "Cache entry too large, skipped",
                    key_prefix=key[:16],
                    size_bytes=size_bytes,
                    max_size_bytes=self.max_size_bytes,
                )
                return False

            while self._cache and self._needs_room(size_bytes):
                evicted_key, evicted = self._cache.popitem(last=False)
                self._total_bytes -= evicted.size_bytes
                self._stats["evictions"] += 1
                logger.debug(
                    "Cache eviction (LRU)",
                    evicted_key_prefix=evicted_key[:16],
                    cache_size=len(self._cache),
                    total_bytes=self._total_bytes,
                )

            self._cache[key] = CacheEntry(
                key=key,
                value=value,
                size_bytes=size_bytes,
                inserted_at=now,
                expires_at=now + self.ttl_seconds,
            )
            self._total_bytes += size_bytes

            logger.debug(
                "Cache set",
                key_prefix=key[:16],
                size_bytes=size_bytes,
                cache_size=len(self._cache),
            )
            return True

    def delete(self, key: str) -> bool:
        """
        특정 키 제거

        Args:
            key: 캐시 키

        Returns:
            제거 여부
        """
        with self._lock:
            removed = self._remove(key)
        if removed:
            logger.debug("Cache invalidated", key_prefix=key[:16])
        return removed

    def clear(self) -> None:
        """모든 캐시 삭제"""
        with self._lock:
            previous_size = len(self._cache)
            self._cache.clear()
            self._total_bytes = 0
        logger.info("Cache cleared", previous_size=previous_size)

    def purge_expired(self) -> int:
        """
        만료된 항목 일괄 정리

        Returns:
            정리된 항목 수
        """
        now = self._clock()
        with self._lock:
            expired_keys = [
                key for key, entry in self._cache.items()
                if entry.is_expired(now)
            ]
            for key in expired_keys:
                self._remove(key)
                self._stats["expirations"] += 1

        if expired_keys:
            logger.debug("Expired entries purged", count=len(expired_keys))
        return len(expired_keys)

    def stats(self) -> CacheStats:
        """
        캐시 통계 스냅샷 조회 (LRU 순서를 변경하지 않음)

        Returns:
            CacheStats
        """
        with self._lock:
            return CacheStats(
                item_count=len(self._cache),
                approx_byte_size=self._total_bytes if self.tracks_size else None,
                max_items=self.max_items,
                max_size_bytes=self.max_size_bytes,
                **self._stats,
            )

    def _entry_size(self, key: str, value: str) -> int:
        if not self.tracks_size:
            return 0
        return len(key.encode("utf-8")) + len(value.encode("utf-8"))

    def _needs_room(self, incoming_bytes: int) -> bool:
        if len(self._cache) >= self.max_items:
            return True
        if self.max_size_bytes is None:
            return False
        return self._total_bytes + incoming_bytes > self.max_size_bytes

    def _remove(self, key: str) -> bool:
        entry = self._cache.pop(key, None)
        if entry is None:
            return False
        self._total_bytes -= entry.size_bytes
        return True

    def __contains__(self, key: str) -> bool:
        """만료를 고려한 존재 여부 (LRU 순서와 통계를 변경하지 않음)"""
        with self._lock:
            entry = self._cache.get(key)
            return entry is not None and not entry.is_expired(self._clock())

    def __len__(self) -> int:
        """현재 저장된 항목 수 (지연 제거 전의 만료 항목 포함)"""
        with self._lock:
            return len(self._cache)

    def __repr__(self) -> str:
        return (
            f"ResponseCache(max_items={self.max_items}, "
            f"max_size_bytes={self.max_size_bytes}, "
            f"ttl_seconds={self.ttl_seconds}, "
            f"size={len(self._cache)})"
        )
