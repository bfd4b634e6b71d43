"""
버전 헤딩 파서

`## [v1.0.0] - 2025-08-27` 형태의 레벨 2 헤딩에서 버전 태그를 추출합니다.
"""

import re
from typing import Optional

# 괄호 안의 공백은 그대로 유지 (기존 문서와 정확히 일치시키기 위함)
VERSION_HEADING_PATTERN = re.compile(r'^##\s+\[([^\]]+)\]')


def parse_version_heading(line: str) -> Optional[str]:
    """버전 헤딩이면 괄호 안 문자열을, 아니면 None 반환"""
    m = VERSION_HEADING_PATTERN.match(line)
    if not m:
        return None
    return m.group(1)


def is_version_heading(line: str) -> bool:
    return VERSION_HEADING_PATTERN.match(line) is not None


def format_version_heading(version: str, date: str) -> str:
    """프롬프트/Mock 생성기에서 사용하는 표준 헤딩"""
    return f"## [{version}] - {date}"
