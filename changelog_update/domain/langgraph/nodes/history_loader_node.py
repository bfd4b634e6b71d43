"""
① 이력 로더 노드

git에서 버전 사이의 변경 파일, 커밋 로그, 스테이징 변경, 태그 날짜를 로드하는 노드
"""
from datetime import date as date_cls

from changelog_update.app.logging_config import get_logger

from ...changelog.errors import GitCommandError
from ...history.git_source import HistorySource
from ..changelog_state import ChangelogState

logger = get_logger("langgraph.history_loader")


def history_loader_node(state: ChangelogState, history: HistorySource) -> ChangelogState:
    """
    이력 로더 노드

    입력:
        - version, previous_version, target_ref, date

    출력:
        - changed_files, commit_log, staged_changes, date
        - status: "classifying" (변경 있음) / "skip" (변경 없음)

    로직:
        - previous_version이 없으면 초기 릴리스. 커밋이 하나도 없는 저장소라
          git 조회가 실패하면 스테이징 변경만으로 진행
        - 스테이징 변경은 신규 태그에만 포함 (catch-up의 과거 태그는 제외),
          조회 실패는 경고만 남기고 무시
        - date가 없으면 태그 날짜, 그것도 실패하면 오늘 날짜
    """
    try:
        version = state["version"]
        previous = state.get("previous_version")
        target_ref = state.get("target_ref") or version

        try:
            changed_files = history.changed_files(previous, target_ref)
            commit_log = history.commit_log(previous, target_ref)
        except GitCommandError as e:
            if previous is not None:
                raise
            logger.info(f"No commits found for {target_ref}, using staged changes only: {e.message}")
            changed_files, commit_log = [], ""

        staged_changes = []
        if not state.get("historical"):
            try:
                staged_changes = history.staged_changes()
            except GitCommandError as e:
                logger.warning(f"Failed to get staged diff: {e.message}")

        if not state.get("date"):
            try:
                state["date"] = history.date_of(version)
            except Exception as e:
                logger.info(f"Could not resolve date of {version}, using today: {e}")
                state["date"] = date_cls.today().isoformat()

        state["changed_files"] = changed_files
        state["commit_log"] = commit_log
        state["staged_changes"] = staged_changes

        if not changed_files and not commit_log.strip() and not staged_changes:
            state["status"] = "skip"
        else:
            state["status"] = "classifying"
        return state

    except Exception as e:
        state["error"] = f"History loader failed: {str(e)}"
        state["status"] = "error"
        return state
