"""
LangGraph 워크플로우 상태 정의

버전 하나에 대한 CHANGELOG 항목 생성 워크플로우의 상태를 관리합니다.
"""
from typing import List, Optional, TypedDict

from ..changelog.change_set import FileChange


class ChangelogState(TypedDict, total=False):
    """
    LangGraph 워크플로우 상태

    워크플로우 단계:
    1. HistoryLoader: git에서 변경 파일/커밋/스테이징/날짜 로드
    2. ChangeSetResolver: 초기 릴리스 vs 증분 분류
    3. EntryGenerator: 항목 텍스트 생성
    """

    # ========== 입력 데이터 ==========
    version: str  # 대상 태그
    previous_version: Optional[str]  # 직전 태그 (없으면 초기 릴리스)
    target_ref: str  # diff 끝점 (신규 태그는 HEAD, 과거 태그는 태그 자신)
    date: Optional[str]  # YYYY-MM-DD (없으면 태그 날짜 조회)
    historical: bool  # catch-up 모드 여부

    # ========== 로드된 데이터 ==========
    changed_files: List[FileChange]
    commit_log: str
    staged_changes: List[FileChange]

    # ========== 분류 결과 ==========
    is_initial: bool

    # ========== 생성 결과 ==========
    entry: Optional[str]

    # ========== 상태 및 에러 ==========
    status: str  # "loading", "classifying", "generating", "completed", "skip", "error"
    error: Optional[str]
