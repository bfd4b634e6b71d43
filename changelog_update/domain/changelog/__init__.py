"""
CHANGELOG 도메인 모듈
버전 헤딩 파싱, 문서 병합, 누락 태그 탐지, 초기 릴리스 분류
"""
from .heading_parser import parse_version_heading, is_version_heading, format_version_heading
from .document import ChangelogDocument, BlockScan
from .merger import merge_entry, merge_entries
from .gap_detector import detect_gaps, find_missing_versions
from .change_set import ChangeSetResolver, FileChange, parse_name_status

__all__ = [
    "parse_version_heading",
    "is_version_heading",
    "format_version_heading",
    "ChangelogDocument",
    "BlockScan",
    "merge_entry",
    "merge_entries",
    "detect_gaps",
    "find_missing_versions",
    "ChangeSetResolver",
    "FileChange",
    "parse_name_status",
]
