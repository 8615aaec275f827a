"""
Configuration Infrastructure

환경변수 기반 설정 로더
"""

from .env_utils import parse_bool_env, parse_int_env, parse_str_env
from .settings import AppSettings, load_settings

__all__ = [
    "AppSettings",
    "load_settings",
    "parse_bool_env",
    "parse_int_env",
    "parse_str_env",
]
