from pydantic import BaseModel
from typing import Dict, List, Optional

from .change_set import FileChange


# 1. 항목 생성기에 전달되는 버전별 요청 컨텍스트
class EntryContext(BaseModel):
    version: str
    date: str  # YYYY-MM-DD
    commit_log: str = ""
    changed_files: List[FileChange] = []
    staged_changes: List[FileChange] = []
    is_initial: bool = False
    previous_version: Optional[str] = None
    historical: bool = False  # catch-up 모드에서 과거 태그를 처리하는 경우

    @property
    def has_changes(self) -> bool:
        return bool(self.commit_log.strip() or self.changed_files or self.staged_changes)


# 2. catch-up 실행 결과
class CatchUpResult(BaseModel):
    missing_versions: List[str] = []
    generated_versions: List[str] = []
    skipped_versions: List[str] = []
    entries: List[str] = []
    errors: Dict[str, str] = {}
