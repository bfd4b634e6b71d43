"""
③ 항목 생성 노드
"""
from changelog_update.app.logging_config import get_logger

from ...changelog.schema import EntryContext
from ..changelog_state import ChangelogState
from ..entry_generator import EntryGenerator

logger = get_logger("langgraph.entry_generator_node")


def entry_generator_node(state: ChangelogState, generator: EntryGenerator) -> ChangelogState:
    """
    항목 생성 노드

    입력:
        - version, date, commit_log, changed_files, staged_changes, is_initial

    출력:
        - entry: `## [버전] - 날짜`로 시작하는 항목
        - status: "completed"

    생성 결과가 비어 있으면 에러로 처리한다.
    """
    try:
        context = EntryContext(
            version=state["version"],
            date=state["date"],
            commit_log=state.get("commit_log") or "",
            changed_files=state.get("changed_files") or [],
            staged_changes=state.get("staged_changes") or [],
            is_initial=state.get("is_initial", False),
            previous_version=state.get("previous_version"),
            historical=state.get("historical", False),
        )

        entry = generator.generate(context).strip()
        if not entry:
            state["error"] = "Generated changelog entry is empty"
            state["status"] = "error"
            return state

        logger.info(f"Generated {len(entry)} chars for {context.version}")
        state["entry"] = entry
        state["status"] = "completed"
        return state

    except Exception as e:
        state["error"] = f"Entry generator failed: {str(e)}"
        state["status"] = "error"
        return state
