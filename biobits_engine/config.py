"""
config.py - 환경변수 기반 설정
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

from dotenv import load_dotenv

# .env 로딩 (이미 OS env에 있는 값은 덮어쓰지 않음)
load_dotenv(override=False)

ENV_PREFIX = "BIOBITS_"


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(ENV_PREFIX + name)
    if v is None:
        return default
    v = v.strip()
    return v if v != "" else default


def _env_bool(name: str, default: bool = False) -> bool:
    v = _env(name)
    if v is None:
        return default
    s = v.lower()
    if s in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if s in {"0", "false", "f", "no", "n", "off"}:
        return False
    return default


def _env_int(name: str, default: int) -> int:
    v = _env(name)
    if v is None:
        return default
    try:
        return int(v)
    except ValueError:
        return default


def _parse_str_list(value: Optional[str]) -> Tuple[str, ...]:
    """쉼표로 구분된 목록 ("http://localhost:8081,https://foo.app")"""
    if not value:
        return tuple()
    return tuple(x.strip() for x in value.split(",") if x.strip())


@dataclass(frozen=True)
class Settings:
    app_name: str
    debug: bool
    log_level: str

    # 퀴즈
    default_questions: int
    max_questions: int

    # cors
    cors_origins: Tuple[str, ...]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    max_questions = max(0, _env_int("MAX_QUESTIONS", 50))
    default_questions = min(max(0, _env_int("DEFAULT_QUESTIONS", 10)), max_questions)

    return Settings(
        app_name=_env("APP_NAME", "BioBits Engine"),
        debug=_env_bool("DEBUG", default=False),
        log_level=_env("LOG_LEVEL", "INFO"),
        default_questions=default_questions,
        max_questions=max_questions,
        cors_origins=_parse_str_list(_env("CORS_ORIGINS", "*")),
    )
