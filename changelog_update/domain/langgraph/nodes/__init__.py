"""
LangGraph 노드 모듈

각 노드는 ChangelogState를 받아 갱신된 상태를 반환합니다.
"""
from .history_loader_node import history_loader_node
from .change_set_node import change_set_node
from .entry_generator_node import entry_generator_node

__all__ = [
    "history_loader_node",
    "change_set_node",
    "entry_generator_node",
]
