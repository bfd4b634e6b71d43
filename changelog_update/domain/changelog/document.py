"""
CHANGELOG 문서 모델

문서를 줄 단위 리스트로만 보관합니다. 파싱된 트리는 유지하지 않고
필요할 때마다 줄을 다시 스캔합니다.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .heading_parser import parse_version_heading


@dataclass
class BlockScan:
    """한 번의 스캔 결과

    - first_heading_index: 첫 번째 버전 헤딩 위치 (없으면 None)
    - block_start / block_end: 대상 버전 블록 범위 [start, end) (없으면 None)
    """
    first_heading_index: Optional[int] = None
    block_start: Optional[int] = None
    block_end: Optional[int] = None

    @property
    def has_headings(self) -> bool:
        return self.first_heading_index is not None

    @property
    def has_block(self) -> bool:
        return self.block_start is not None


class ChangelogDocument:
    """줄 시퀀스로 표현된 CHANGELOG 문서"""

    def __init__(self, lines: List[str]):
        self.lines = list(lines)

    @classmethod
    def from_text(cls, content: str) -> "ChangelogDocument":
        return cls(content.split('\n'))

    def to_text(self) -> str:
        return '\n'.join(self.lines)

    def headings(self) -> List[Tuple[int, str]]:
        """(줄 번호, 버전 태그) 목록, 문서 순서 그대로"""
        found = []
        for idx, line in enumerate(self.lines):
            version = parse_version_heading(line)
            if version is not None:
                found.append((idx, version))
        return found

    def versions(self) -> List[str]:
        return [version for _, version in self.headings()]

    def first_heading_index(self) -> Optional[int]:
        return self.scan(None).first_heading_index

    def find_block(self, version: str) -> Optional[Tuple[int, int]]:
        """해당 버전의 첫 번째 블록 범위 [start, end)"""
        result = self.scan(version)
        if not result.has_block:
            return None
        return result.block_start, result.block_end

    def scan(self, version: Optional[str]) -> BlockScan:
        """
        문서를 한 번 훑어서 첫 헤딩 위치와 대상 버전 블록을 찾는다.

        같은 버전 헤딩이 여러 번 나오면 첫 번째 블록만 대상이 되고,
        두 번째 헤딩은 첫 블록의 끝으로 취급된다.
        """
        result = BlockScan()
        in_block = False

        for idx, line in enumerate(self.lines):
            found = parse_version_heading(line)
            if found is None:
                continue

            if result.first_heading_index is None:
                result.first_heading_index = idx

            if version is not None and found == version and result.block_start is None:
                result.block_start = idx
                in_block = True
            elif in_block:
                result.block_end = idx
                in_block = False

        if in_block:
            result.block_end = len(self.lines)

        return result
