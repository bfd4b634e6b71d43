"""
Langgraph 도메인 모듈
LLM을 이용한 CHANGELOG 항목 생성
"""
from .entry_generator import (
    ClaudeEntryGenerator,
    MockEntryGenerator,
    OpenAIEntryGenerator,
    get_entry_generator,
)
from .changelog_workflow import ChangelogWorkflow

__all__ = [
    "ClaudeEntryGenerator",
    "MockEntryGenerator",
    "OpenAIEntryGenerator",
    "get_entry_generator",
    "ChangelogWorkflow",
]
