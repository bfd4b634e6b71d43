"""
CHANGELOG 병합 모듈

새 버전 항목을 기존 문서에 삽입하거나, 같은 버전 블록이 있으면 교체합니다.
"""

from typing import List, Optional, Sequence

from changelog_update.app.logging_config import get_logger

from .document import ChangelogDocument
from .heading_parser import parse_version_heading

logger = get_logger("changelog.merger")

CHANGELOG_HEADER = "# Changelog\n\n"
ENTRY_SEPARATOR = "\n\n"


# ============================================================
# 단일 항목 병합
# ============================================================

def merge_entry(existing_content: Optional[str], new_entry: str) -> str:
    """
    새 항목을 기존 CHANGELOG 내용에 병합

    처리 순서:
    1. 기존 문서 없음 -> 헤더 + 새 항목 (빈 파일은 문서가 있는 것으로 본다)
    2. 같은 버전 블록 존재 -> 해당 블록만 교체
    3. 다른 버전 헤딩 존재 -> 첫 번째 헤딩 바로 위에 삽입
    4. 헤딩 없음 -> 기존 내용 뒤에 추가

    Args:
        existing_content: 기존 문서 내용 (없으면 None)
        new_entry: `## [버전]` 헤딩으로 시작하는 항목

    Returns:
        병합된 전체 문서
    """
    if existing_content is None:
        return f"{CHANGELOG_HEADER}{new_entry}\n"

    first_line = new_entry.split('\n', 1)[0]
    incoming_version = parse_version_heading(first_line)
    if incoming_version is None:
        logger.debug("New entry has no version heading, inserting without replacement")

    document = ChangelogDocument.from_text(existing_content)
    scan = document.scan(incoming_version)
    entry_lines = new_entry.split('\n')

    if scan.has_block:
        logger.info(f"Found existing entry for version {incoming_version}, replacing it")
        return _replace_block(document.lines, entry_lines, scan.block_start, scan.block_end)

    if scan.has_headings:
        return _insert_before(document.lines, entry_lines, scan.first_heading_index)

    return _append(existing_content, new_entry)


def merge_entries(existing_content: Optional[str], entries: Sequence[str]) -> str:
    """
    여러 항목을 빈 줄로 이어 붙인 뒤 한 번에 병합

    배치 내 중복 버전은 따로 걸러내지 않는다.
    """
    if not entries:
        return existing_content or ""
    return merge_entry(existing_content, ENTRY_SEPARATOR.join(entries))


# ============================================================
# 내부 헬퍼
# ============================================================

def _replace_block(lines: List[str], entry_lines: List[str], start: int, end: int) -> str:
    new_lines = lines[:start] + entry_lines

    if end < len(lines):
        # 기존 블록이 빈 줄 없이 다음 헤딩에 붙어 있었으면 하나 넣는다
        if end > 0 and lines[end - 1].strip() != "":
            new_lines.append("")
        new_lines.extend(lines[end:])

    return '\n'.join(new_lines)


def _insert_before(lines: List[str], entry_lines: List[str], index: int) -> str:
    new_lines = lines[:index] + entry_lines + [""] + lines[index:]
    return '\n'.join(new_lines)


def _append(existing_content: str, new_entry: str) -> str:
    return f"{existing_content}\n{new_entry}\n"
