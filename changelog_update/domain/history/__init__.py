"""
git 이력 조회 모듈
"""
from .git_source import GitHistorySource, HistorySource

__all__ = [
    "GitHistorySource",
    "HistorySource",
]
