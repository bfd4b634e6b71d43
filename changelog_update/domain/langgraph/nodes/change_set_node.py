"""
② 변경 세트 분류 노드
"""
from ...changelog.change_set import ChangeSetResolver
from ..changelog_state import ChangelogState


def change_set_node(state: ChangelogState, resolver: ChangeSetResolver) -> ChangelogState:
    """초기 릴리스 여부를 판별해 is_initial에 기록 (프롬프트 선택용)"""
    try:
        state["is_initial"] = resolver.is_initial(
            state.get("changed_files") or [],
            state.get("commit_log") or "",
            state.get("staged_changes") or []
        )
        state["status"] = "generating"
        return state

    except Exception as e:
        state["error"] = f"Change set resolver failed: {str(e)}"
        state["status"] = "error"
        return state
