"""
로깅 설정 모듈

모든 로거는 changelog_update 네임스페이스 아래에 생성됩니다.
"""
import logging
import os
from typing import Optional

ROOT_LOGGER_NAME = "changelog_update"
DEFAULT_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"


def setup_logging(level: str = "WARNING", fmt: Optional[str] = None) -> logging.Logger:
    """루트 로거에 핸들러를 한 번만 붙이고 레벨을 설정"""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))

    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT, datefmt=DEFAULT_DATEFMT))
        root.addHandler(handler)

    return root


def setup_logging_from_env() -> logging.Logger:
    """LOG_LEVEL / LOG_FORMAT 환경변수 기반 초기화"""
    return setup_logging(
        level=os.getenv("LOG_LEVEL", "WARNING"),
        fmt=os.getenv("LOG_FORMAT") or None,
    )


def get_logger(name: str) -> logging.Logger:
    """changelog_update.<name> 로거 반환"""
    if name.startswith(ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
