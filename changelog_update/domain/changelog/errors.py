"""
changelog-update 에러 정의

모든 에러는 코드, 메시지, 해결 제안을 가집니다.
"""

from typing import Any, Dict, Optional, Sequence


class ChangelogError(Exception):
    """코드 + 제안을 가진 기본 에러"""

    def __init__(self, code: str, message: str, suggestion: str = "", detail: Any = None):
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.detail = detail
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "error_code": self.code,
            "message": self.message,
        }
        if self.suggestion:
            d["suggestion"] = self.suggestion
        if self.detail:
            d["detail"] = self.detail
        return d


class GitCommandError(ChangelogError):
    def __init__(self, args: Sequence[str], stderr: str = "", returncode: Optional[int] = None):
        self.args_list = list(args)
        self.stderr = stderr.strip()
        self.returncode = returncode
        command = " ".join(["git", *self.args_list])
        super().__init__(
            code="GIT_COMMAND_FAILED",
            message=f"Git command failed: {command}" + (f": {self.stderr}" if self.stderr else ""),
            suggestion="Run the command inside a git repository with at least one commit.",
            detail=self.stderr or None,
        )


class EntryGenerationError(ChangelogError):
    def __init__(self, backend: str, message: str):
        self.backend = backend
        super().__init__(
            code="ENTRY_GENERATION_FAILED",
            message=f"{backend} execution failed: {message}",
            suggestion=f"Check that the {backend} backend is installed and configured.",
        )


class ChangelogWriteError(ChangelogError):
    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(
            code="CHANGELOG_WRITE_FAILED",
            message=f"Failed to write {path}: {reason}",
            suggestion="Check file permissions and the --changelog path.",
        )


class ChangelogReadError(ChangelogError):
    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(
            code="CHANGELOG_READ_FAILED",
            message=f"Failed to read {path}: {reason}",
            suggestion="Check that the file is readable UTF-8 text.",
        )
