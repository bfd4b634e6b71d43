from typing import Any, Dict, Optional
from functools import partial

from langgraph.graph import StateGraph, END

from ..changelog.change_set import ChangeSetResolver
from ..history.git_source import HistorySource
from .changelog_state import ChangelogState
from .entry_generator import EntryGenerator
from .nodes import (
    history_loader_node,
    change_set_node,
    entry_generator_node,
)


#LangGraph 워크플로우 메인 클래스
class ChangelogWorkflow:
    """
    버전 하나에 대한 CHANGELOG 항목 생성 워크플로우

    3개 노드로 구성:
        1. history_loader: git에서 변경 내역 로드
        2. change_set_resolver: 초기 릴리스 vs 증분 분류
        3. entry_generator: 항목 텍스트 생성

    변경 내역이 전혀 없거나 로드에 실패하면 생성 단계 없이 종료한다.
    """

    def __init__(
        self,
        history: HistorySource,
        generator: EntryGenerator,
        resolver: Optional[ChangeSetResolver] = None
    ):
        self.history = history
        self.generator = generator
        self.resolver = resolver or ChangeSetResolver()

        # 워크플로우 빌드
        self.workflow = self._build_workflow()

    def _build_workflow(self) -> StateGraph:
        """LangGraph 워크플로우 구성"""
        workflow = StateGraph(ChangelogState)

        # partial을 사용하여 의존성 바인딩
        workflow.add_node(
            "history_loader",
            partial(history_loader_node, history=self.history)
        )
        workflow.add_node(
            "change_set_resolver",
            partial(change_set_node, resolver=self.resolver)
        )
        workflow.add_node(
            "entry_generator",
            partial(entry_generator_node, generator=self.generator)
        )

        # 워크플로우 연결
        workflow.set_entry_point("history_loader")
        workflow.add_conditional_edges(
            "history_loader",
            self._route_after_load,
            {
                "continue": "change_set_resolver",
                "end": END,
            }
        )
        workflow.add_edge("change_set_resolver", "entry_generator")
        workflow.add_edge("entry_generator", END)

        return workflow.compile()

    @staticmethod
    def _route_after_load(state: ChangelogState) -> str:
        if state.get("status") in ("skip", "error"):
            return "end"
        return "continue"

    def process(
        self,
        version: str,
        previous_version: Optional[str],
        target_ref: Optional[str] = None,
        date: Optional[str] = None,
        historical: bool = False
    ) -> Dict[str, Any]:
        """
        워크플로우 실행

        Args:
            version: 대상 태그
            previous_version: 직전 태그 (없으면 초기 릴리스)
            target_ref: diff 끝점 (기본값은 version)
            date: 항목 날짜 (없으면 태그 날짜)
            historical: catch-up 모드 여부

        Returns:
            {
                "success": True/False,
                "entry": str | None,
                "is_initial": bool,
                "status": "completed" | "skip" | "error",
                "error": str  # 실패 시
            }
        """
        initial_state: ChangelogState = {
            "version": version,
            "previous_version": previous_version,
            "target_ref": target_ref or version,
            "date": date,
            "historical": historical,
            "status": "loading",
        }

        result = self.workflow.invoke(initial_state)
        status = result.get("status")

        if status == "completed":
            return {
                "success": True,
                "entry": result.get("entry"),
                "is_initial": result.get("is_initial", False),
                "status": status,
            }
        if status == "skip":
            return {
                "success": True,
                "entry": None,
                "is_initial": False,
                "status": status,
            }
        return {
            "success": False,
            "entry": None,
            "is_initial": result.get("is_initial", False),
            "status": "error",
            "error": result.get("error", "Unknown error"),
        }
