"""
누락 태그 탐지

git 태그 전체 목록 중 CHANGELOG에 아직 기록되지 않은 버전을 찾습니다.
"""

from typing import Iterable, List, Optional, Sequence

from .document import ChangelogDocument


def detect_gaps(all_versions: Sequence[str], recorded_versions: Iterable[str]) -> List[str]:
    """
    기록되지 않은 버전 목록 반환

    Args:
        all_versions: 오래된 순으로 정렬된 전체 버전 (여기서 정렬하지 않음)
        recorded_versions: 문서에 이미 있는 버전

    Returns:
        all_versions의 순서를 유지한 누락 버전 목록
    """
    recorded = set(recorded_versions)
    return [version for version in all_versions if version not in recorded]


def recorded_versions(content: Optional[str]) -> List[str]:
    """문서에 기록된 버전 목록 (문서가 없으면 빈 목록)"""
    if not content:
        return []
    return ChangelogDocument.from_text(content).versions()


def find_missing_versions(all_versions: Sequence[str], content: Optional[str]) -> List[str]:
    return detect_gaps(all_versions, recorded_versions(content))
