"""
git 이력 조회

태그 목록, 태그 간 변경 파일, 커밋 로그, 스테이징 변경, 태그 날짜를
git 명령으로 조회합니다.
"""

import subprocess
from pathlib import Path
from typing import List, Optional, Protocol, Sequence, Union

from changelog_update.app.logging_config import get_logger

from ..changelog.change_set import FileChange, parse_name_status
from ..changelog.errors import GitCommandError

logger = get_logger("history.git")


class HistorySource(Protocol):
    """버전 이력 조회 인터페이스"""

    def fetch_tags(self) -> None: ...

    def latest_version(self) -> Optional[str]: ...

    def all_versions(self) -> List[str]: ...

    def previous_version(self, version: str, versions: Optional[Sequence[str]] = None) -> Optional[str]: ...

    def changed_files(self, from_version: Optional[str], to_version: str) -> List[FileChange]: ...

    def commit_log(self, from_version: Optional[str], to_version: str) -> str: ...

    def staged_changes(self) -> List[FileChange]: ...

    def date_of(self, version: str) -> str: ...


class GitHistorySource:
    """git CLI 기반 HistorySource 구현"""

    def __init__(self, repo_path: Union[str, Path, None] = None):
        self.repo_path = Path(repo_path) if repo_path else Path.cwd()

    def _run_git_command(self, *args: str) -> str:
        """git 명령 실행 후 stdout 반환"""
        try:
            result = subprocess.run(
                ["git", *args],
                cwd=self.repo_path,
                capture_output=True,
                text=True,
                check=True,
            )
            return result.stdout.strip()
        except subprocess.CalledProcessError as e:
            logger.debug(f"git {' '.join(args)} failed ({e.returncode}): {e.stderr}")
            raise GitCommandError(args, e.stderr or "", e.returncode) from e
        except FileNotFoundError as e:
            raise GitCommandError(args, "git executable not found") from e

    def fetch_tags(self) -> None:
        """
        원격 태그 가져오기

        `git fetch --tags` 실패 시 `git pull --tags`를 시도하고,
        추적 브랜치가 없는 경우는 로컬 태그만 사용한다.
        """
        try:
            self._run_git_command("fetch", "--tags")
            return
        except GitCommandError as e:
            logger.info(f"git fetch --tags failed, trying git pull --tags: {e.stderr}")

        try:
            self._run_git_command("pull", "--tags")
        except GitCommandError as e:
            if "no tracking information" in e.stderr:
                logger.info("No remote tracking configured, using local tags only")
                return
            raise

    def latest_version(self) -> Optional[str]:
        try:
            tag = self._run_git_command("describe", "--tags", "--abbrev=0")
        except GitCommandError:
            # 태그가 아직 없음
            return None
        return tag or None

    def all_versions(self) -> List[str]:
        """전체 태그 (오래된 순)"""
        output = self._run_git_command("tag", "--sort=version:refname")
        return [line.strip() for line in output.split("\n") if line.strip()]

    def previous_version(self, version: str, versions: Optional[Sequence[str]] = None) -> Optional[str]:
        """태그 목록에서 바로 앞 태그 (첫 태그이거나 목록에 없으면 None)"""
        tags = list(versions) if versions is not None else self.all_versions()
        if version not in tags:
            return None
        idx = tags.index(version)
        return tags[idx - 1] if idx > 0 else None

    def changed_files(self, from_version: Optional[str], to_version: str) -> List[FileChange]:
        if from_version is None:
            # 첫 릴리스: 트리의 모든 파일을 added로 취급
            output = self._run_git_command("ls-tree", "-r", "--name-only", to_version)
            return [FileChange("added", line.strip()) for line in output.split("\n") if line.strip()]

        output = self._run_git_command("diff", "--name-status", from_version, to_version)
        return parse_name_status(output)

    def commit_log(self, from_version: Optional[str], to_version: str) -> str:
        if from_version is None:
            return self._run_git_command("log", "--oneline", to_version)
        return self._run_git_command("log", "--oneline", f"{from_version}..{to_version}")

    def staged_changes(self) -> List[FileChange]:
        output = self._run_git_command("diff", "--cached", "--name-status")
        return parse_name_status(output)

    def date_of(self, version: str) -> str:
        """태그 커밋 날짜 (YYYY-MM-DD)"""
        # 출력 형식: 2025-08-26 12:34:56 +0900
        output = self._run_git_command("log", "-1", "--format=%ai", version)
        if not output:
            raise ValueError(f"no date found for tag {version}")
        return output.split(" ")[0]
