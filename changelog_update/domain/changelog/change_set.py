"""
변경 세트 분류 모듈

변경 파일 목록을 보고 '초기 릴리스'인지 '증분 업데이트'인지 추정합니다.
분류 결과는 프롬프트 템플릿 선택에만 사용되며 병합 동작에는 영향이 없습니다.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence

# git diff --name-status 상태 코드
STATUS_CODES = {
    'A': 'added',
    'M': 'modified',
    'D': 'deleted',
    'R': 'renamed',
    'C': 'copied',
    'T': 'type_changed',
}

# 스테이징 diff에 섞여 들어오는 헤더 라인
DIFF_HEADER_PREFIXES = ('diff --git', 'index ', '+++', '---', '@@')

DEFAULT_INITIAL_MIN_FILES = 5
DEFAULT_STAGED_MIN_FILES = 3


class ChangeKind(str, Enum):
    INITIAL = "initial"
    INCREMENTAL = "incremental"


@dataclass(frozen=True)
class FileChange:
    """변경 파일 레코드"""
    status: str
    path: str

    @property
    def is_added(self) -> bool:
        return self.status == 'added'

    def to_line(self) -> str:
        """name-status 형식으로 되돌림 (프롬프트용)"""
        code = next((c for c, name in STATUS_CODES.items() if name == self.status), '?')
        return f"{code}\t{self.path}"


def parse_status_code(code: str) -> str:
    """`A`, `M`, `R100` 같은 코드를 상태 이름으로 변환"""
    if not code:
        return 'unknown'
    return STATUS_CODES.get(code[0].upper(), 'unknown')


def parse_name_status(text: str) -> List[FileChange]:
    """
    `git diff --name-status` 출력을 FileChange 목록으로 변환

    - diff 헤더 라인과 `+` 내용 추가 라인은 무시
    - `new file:` 라인은 added로 취급
    - 이름 변경(`R100\\told\\tnew`)은 새 경로를 사용
    """
    changes: List[FileChange] = []
    for raw in text.split('\n'):
        line = raw.rstrip('\r')
        if not line.strip():
            continue
        if line.startswith(DIFF_HEADER_PREFIXES) or line.startswith('+'):
            continue

        stripped = line.strip()
        if stripped.startswith('new file:'):
            changes.append(FileChange('added', stripped[len('new file:'):].strip()))
            continue

        if '\t' in line:
            parts = line.split('\t')
            changes.append(FileChange(parse_status_code(parts[0].strip()), parts[-1].strip()))
        else:
            changes.append(FileChange('unknown', stripped))
    return changes


class ChangeSetResolver:
    """
    초기 릴리스 여부 판별기 (휴리스틱)

    - 커밋된 변경: 모두 added 이고 개수가 initial_min_files 초과
    - 커밋/diff가 전혀 없고 스테이징만 있는 경우:
      스테이징이 모두 added 이고 added 개수가 staged_min_files 초과
    """

    def __init__(
        self,
        initial_min_files: int = DEFAULT_INITIAL_MIN_FILES,
        staged_min_files: int = DEFAULT_STAGED_MIN_FILES
    ):
        self.initial_min_files = initial_min_files
        self.staged_min_files = staged_min_files

    def classify(
        self,
        changed_files: Sequence[FileChange],
        commit_log: str = "",
        staged_changes: Sequence[FileChange] = ()
    ) -> ChangeKind:
        if changed_files:
            all_added = all(c.is_added for c in changed_files)
            if all_added and len(changed_files) > self.initial_min_files:
                return ChangeKind.INITIAL

        if not changed_files and not commit_log.strip() and staged_changes:
            all_added = all(c.is_added for c in staged_changes)
            added_count = sum(1 for c in staged_changes if c.is_added)
            if all_added and added_count > self.staged_min_files:
                return ChangeKind.INITIAL

        return ChangeKind.INCREMENTAL

    def is_initial(
        self,
        changed_files: Sequence[FileChange],
        commit_log: str = "",
        staged_changes: Sequence[FileChange] = ()
    ) -> bool:
        return self.classify(changed_files, commit_log, staged_changes) is ChangeKind.INITIAL
