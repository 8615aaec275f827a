"""
캐시 관리 서비스

운영 도구(라우트 핸들러, CLI, 대시보드 위젯)에 캐시 통계 조회와
전체 삭제를 내부 구조 노출 없이 제공합니다.
"""

import re
from typing import Any, Dict, Optional, Union

from ..infrastructure.cache import ResponseCache
from ..infrastructure.logging import get_logger

logger = get_logger(__name__, component="CacheAdminService")

# 바이트 사용량을 알 수 없을 때 사용하는 값
UNKNOWN_SIZE = "unknown"
UNLIMITED_SIZE = "unlimited"

_MIB = 1024 * 1024
_SIZE_LABEL = re.compile(r"^\s*([0-9]*\.?[0-9]+(?:[eE][-+]?[0-9]+)?)\s*MB\s*$")


def format_size_label(size_bytes: Optional[int]) -> str:
    """바이트 예산을 "10 MB" 형식으로 변환 (None이면 "unlimited")"""
    if size_bytes is None:
        return UNLIMITED_SIZE
    # 15자리 유효숫자: parse_size_label로 원래 바이트 수 복원 가능
    return f"{size_bytes / _MIB:.15g} MB"


def parse_size_label(label: str) -> Optional[int]:
    """ "10 MB" 형식을 바이트로 변환 (해석 불가 시 None)"""
    match = _SIZE_LABEL.match(label)
    if match is None:
        return None
    return round(float(match.group(1)) * _MIB)


def usage_percentage(
    remaining_size: Union[int, str],
    max_size: Union[int, str],
) -> Optional[float]:
    """
    캐시 바이트 사용률 계산

    remaining_size가 "unknown"이거나 최대 크기를 알 수 없으면 None을 반환합니다.
    호출자는 None을 0%로 간주해서는 안 됩니다.

    Args:
        remaining_size: 남은 바이트 또는 "unknown"
        max_size: 최대 바이트 또는 "10 MB" 형식 라벨

    Returns:
        사용률 (0.0 ~ 100.0) 또는 None
    """
    if not isinstance(remaining_size, int) or isinstance(remaining_size, bool):
        return None

    max_bytes = parse_size_label(max_size) if isinstance(max_size, str) else max_size
    if not max_bytes:
        return None

    used = max_bytes - remaining_size
    return round(min(max(used / max_bytes * 100, 0.0), 100.0), 2)


class CacheAdminService:
    """캐시 통계/삭제 관리 서비스"""

    def __init__(self, cache: ResponseCache):
        self._cache = cache

    def stats(self) -> Dict[str, Any]:
        """
        대시보드용 캐시 통계

        Returns:
            {size, itemCount, remainingSize, hits, maxSize, maxItems}
            remainingSize는 바이트 사용량을 알 수 없으면 "unknown"
        """
        snapshot = self._cache.stats()
        remaining = snapshot.remaining_bytes

        return {
            "size": snapshot.item_count,
            "itemCount": snapshot.item_count,
            "remainingSize": remaining if remaining is not None else UNKNOWN_SIZE,
            "hits": snapshot.hits,
            "maxSize": format_size_label(snapshot.max_size_bytes),
            "maxItems": snapshot.max_items,
        }

    def clear(self) -> None:
        """캐시 전체 삭제 (멱등)"""
        self._cache.clear()
        logger.info("AI response cache cleared")
