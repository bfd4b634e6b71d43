"""
changelog-update 설정

.env 파일을 자동으로 로드한 뒤 모든 설정을 환경변수에서 읽습니다.
"""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv


@dataclass(frozen=True)
class Settings:
    """애플리케이션 설정"""
    model: str
    changelog_path: str
    initial_min_files: int
    staged_min_files: int
    claude_binary: str
    openai_api_key: Optional[str]
    openai_model: str
    openai_temperature: float
    llm_max_retries: int
    llm_retry_base_delay: float
    log_level: str


def _env_number(name: str, default: str, cast):
    raw = os.getenv(name, default)
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def _load_settings() -> Settings:
    load_dotenv(find_dotenv(usecwd=True))
    return Settings(
        model=os.getenv("CHANGELOG_MODEL", "claude"),
        changelog_path=os.getenv("CHANGELOG_PATH", "CHANGELOG.md"),
        initial_min_files=_env_number("CHANGELOG_INITIAL_MIN_FILES", "5", int),
        staged_min_files=_env_number("CHANGELOG_STAGED_MIN_FILES", "3", int),
        claude_binary=os.getenv("CLAUDE_BINARY", "claude"),
        openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        openai_model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
        openai_temperature=_env_number("OPENAI_TEMPERATURE", "0.3", float),
        llm_max_retries=max(1, _env_number("LLM_MAX_RETRIES", "3", int)),
        llm_retry_base_delay=_env_number("LLM_RETRY_BASE_DELAY", "1.0", float),
        log_level=os.getenv("LOG_LEVEL", "WARNING"),
    )


# 전역 설정 인스턴스
_settings_instance: Optional[Settings] = None


def get_settings() -> Settings:
    """설정 싱글톤 인스턴스 반환"""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = _load_settings()
    return _settings_instance


def reset_settings():
    """설정 인스턴스 리셋 (테스트용)"""
    global _settings_instance
    _settings_instance = None
