"""
CHANGELOG 파일 입출력
"""

from pathlib import Path
from typing import Optional, Union

from changelog_update.app.logging_config import get_logger

from .errors import ChangelogReadError, ChangelogWriteError

logger = get_logger("changelog.persistence")


class ChangelogFile:
    """파일 하나에 대한 읽기/쓰기. 파일이 없으면 빈 문서로 취급"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def read(self) -> Optional[str]:
        if not self.path.exists():
            logger.info(f"{self.path} does not exist yet")
            return None
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ChangelogReadError(str(self.path), str(e)) from e

    def write(self, content: str) -> None:
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise ChangelogWriteError(str(self.path), str(e)) from e
        logger.info(f"Wrote {len(content)} chars to {self.path}")
