"""환경변수 파싱 유틸리티

환경변수를 타입 안전하게 파싱하는 헬퍼 함수들을 제공합니다.
값이 없거나 파싱할 수 없으면 기본값을 반환합니다.
"""

import os


def parse_bool_env(var_name: str, default: bool = False) -> bool:
    """
    환경변수를 bool로 파싱

    - True: "true", "1", "yes", "on" (대소문자 무시)
    - False: "false", "0", "no", "off" (대소문자 무시)
    - 기타: default 값 반환

    Examples:
        >>> os.environ["ENABLE_LRU_CACHE"] = "false"
        >>> parse_bool_env("ENABLE_LRU_CACHE", default=True)
        False
    """
    value = os.getenv(var_name, "").lower().strip()

    if value in ("true", "1", "yes", "on"):
        return True
    elif value in ("false", "0", "no", "off"):
        return False

    return default


def parse_int_env(var_name: str, default: int = 0) -> int:
    """
    환경변수를 int로 파싱

    Examples:
        >>> os.environ["AI_CACHE_MAX_ITEMS"] = "250"
        >>> parse_int_env("AI_CACHE_MAX_ITEMS", default=100)
        250
    """
    value = os.getenv(var_name, "").strip()

    if not value:
        return default

    try:
        return int(value)
    except ValueError:
        return default


def parse_str_env(var_name: str, default: str = "") -> str:
    """환경변수를 str로 파싱 (공백 제거)"""
    return os.getenv(var_name, default).strip()
