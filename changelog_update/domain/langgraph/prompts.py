"""CHANGELOG 항목 생성 프롬프트

세 가지 요청 형태를 제공합니다.
1. 초기 릴리스: 추가된 파일/커밋으로 프로젝트 전체를 소개
2. 신규 태그(증분): 이전 태그 이후 변경 + 스테이징 변경 통합
3. 과거 태그(catch-up): 태그 사이의 변경만 기록

모든 형태는 `## [태그] - 날짜` 헤딩으로 시작하는 Keep a Changelog 항목 하나만 요구합니다.
"""
from __future__ import annotations

from typing import List, Tuple

from ..changelog.change_set import FileChange
from ..changelog.heading_parser import format_version_heading
from ..changelog.schema import EntryContext

# Keep a Changelog 카테고리 (출력 순서)
CATEGORY_SECTIONS: List[Tuple[str, str]] = [
    ("추가", "새 기능에 대해 기재"),
    ("변경", "기존 기능의 변경에 대해 기재"),
    ("지원 중단", "곧 삭제될 기능에 대해 기재"),
    ("삭제", "삭제된 기능에 대해 기재"),
    ("수정", "수정된 버그에 대해 기재"),
    ("보안", "취약점 관련 변경에 대해 기재"),
]

SYSTEM_PROMPT = (
    "역할: Keep a Changelog (https://keepachangelog.com/ko/1.1.0/) 형식의 CHANGELOG 작성자\n"
    "언어: 한국어 Markdown\n"
    "원칙:\n"
    "- 제공된 커밋 메시지와 변경 파일 정보에 근거해서만 작성\n"
    "- 서문, 설명, 코드블록 없이 CHANGELOG 항목 본문만 출력\n"
    "- 반드시 레벨 2 헤딩(`## [태그] - 날짜`)으로 시작\n"
    "- 각 섹션 헤더(### 추가 등) 다음에는 반드시 빈 줄을 넣을 것\n"
)

COMMON_RULES = (
    "주의사항:\n"
    "- 사람이 읽기 쉬운 것을 최우선으로 하세요\n"
    "- 해당하는 변경이 없는 카테고리는 출력하지 마세요\n"
    "- 사용자에게 가치 있는 정보를 구체적으로 기재하세요\n"
    "- 변경의 영향이나 이유를 알 수 있게 기술하세요\n"
    "- 기술적 세부사항보다 사용자에 대한 영향을 중시하세요\n"
)


def _format_files(files: List[FileChange]) -> str:
    return "\n".join(f.to_line() for f in files)


def _block(title: str, body: str) -> str:
    return f"{title}:\n---\n{body}\n---\n\n"


def _category_template() -> str:
    return "\n".join(f"### {name}\n\n- {hint}\n" for name, hint in CATEGORY_SECTIONS)


def build_initial_prompt(context: EntryContext) -> Tuple[str, str]:
    """초기 릴리스 프롬프트"""
    heading = format_version_heading(context.version, context.date)

    content = ""
    if context.commit_log.strip():
        content += _block("커밋 메시지", context.commit_log)
    if context.changed_files:
        content += _block("추가된 파일", _format_files(context.changed_files))
    if context.staged_changes:
        content += _block("스테이징 중인 파일", _format_files(context.staged_changes))

    user_prompt = (
        "이번이 첫 릴리스입니다. 아래 정보를 바탕으로 CHANGELOG.md 항목을 생성하세요.\n\n"
        f"새 버전 태그: {context.version}\n"
        f"날짜: {context.date}\n\n"
        f"{content}"
        "아래 형식으로 생성하세요 (레벨 2 헤딩부터 시작):\n"
        f"{heading}\n\n"
        "### 추가\n\n"
        "- 첫 릴리스\n"
        "- 프로젝트의 주요 기능과 특징을 항목별로 기재\n\n"
        "주의사항:\n"
        "- 프로젝트의 목적과 주요 기능을 명확히 기재하세요\n"
        "- 파일 구성에서 추측할 수 있는 기술 스택도 기재하세요\n"
    )
    return SYSTEM_PROMPT, user_prompt


def build_incremental_prompt(context: EntryContext) -> Tuple[str, str]:
    """신규 태그 프롬프트 (이전 태그 이후 + 스테이징 변경)"""
    heading = format_version_heading(context.version, context.date)

    staged_section = ""
    if context.staged_changes:
        staged_section = _block("스테이징 중인 변경 (아직 커밋되지 않음)", _format_files(context.staged_changes))

    user_prompt = (
        "아래 git 변경 정보와 커밋 메시지를 바탕으로 CHANGELOG.md 항목을 생성하세요.\n\n"
        f"새 버전 태그: {context.version}\n"
        f"날짜: {context.date}\n\n"
        + _block("커밋 메시지", context.commit_log)
        + _block("변경 정보 (커밋 완료)", _format_files(context.changed_files))
        + staged_section
        + "아래 형식으로 생성하세요 (레벨 2 헤딩부터 시작):\n"
        f"{heading}\n\n"
        "섹션은 아래 순서로, 해당 변경이 있는 경우에만 기재하세요:\n"
        f"{_category_template()}\n"
        f"{COMMON_RULES}"
        "- 커밋된 변경과 스테이징 중인 변경을 통합해서 기재하세요\n"
    )
    return SYSTEM_PROMPT, user_prompt


def build_historical_prompt(context: EntryContext) -> Tuple[str, str]:
    """과거 태그 프롬프트 (catch-up)"""
    heading = format_version_heading(context.version, context.date)

    staged_section = ""
    if context.staged_changes:
        staged_section = _block("스테이징 중인 변경 (아직 커밋되지 않음)", _format_files(context.staged_changes))

    user_prompt = (
        "아래 git 변경 정보와 커밋 메시지를 바탕으로 CHANGELOG.md 항목을 생성하세요.\n\n"
        f"버전 태그: {context.version}\n"
        f"날짜: {context.date}\n\n"
        + _block("커밋 메시지", context.commit_log)
        + _block("변경 정보", _format_files(context.changed_files))
        + staged_section
        + "아래 형식으로 생성하세요 (레벨 2 헤딩부터 시작):\n"
        f"{heading}\n\n"
        "섹션은 아래 순서로, 해당 변경이 있는 경우에만 기재하세요:\n"
        f"{_category_template()}\n"
        f"{COMMON_RULES}"
    )
    return SYSTEM_PROMPT, user_prompt


def build_entry_prompt(context: EntryContext) -> Tuple[str, str]:
    """컨텍스트에 맞는 (system, user) 프롬프트 선택"""
    if context.is_initial:
        return build_initial_prompt(context)
    if context.historical:
        return build_historical_prompt(context)
    return build_incremental_prompt(context)
