"""
Test configuration and fixtures
"""
import pytest
from typing import Dict, List, Optional

from changelog_update.app.config import reset_settings
from changelog_update.domain.changelog.change_set import FileChange
from changelog_update.domain.changelog.errors import GitCommandError
from changelog_update.domain.changelog.heading_parser import format_version_heading
from changelog_update.domain.changelog.persistence import ChangelogFile


SAMPLE_CHANGELOG = (
    "# Changelog\n"
    "\n"
    "All notable changes to this project will be documented in this file.\n"
    "\n"
    "## [v1.0.0] - 2025-01-01\n"
    "\n"
    "### 추가\n"
    "\n"
    "- old\n"
    "\n"
    "## [v0.9.0] - 2024-12-01\n"
    "\n"
    "### 수정\n"
    "\n"
    "- fix\n"
)


class FakeHistorySource:
    """In-memory HistorySource used instead of running git."""

    def __init__(
        self,
        versions: Optional[List[str]] = None,
        changes: Optional[Dict[Optional[str], List[FileChange]]] = None,
        commits: Optional[Dict[Optional[str], str]] = None,
        staged: Optional[List[FileChange]] = None,
        dates: Optional[Dict[str, str]] = None,
        fail_versions: Optional[List[str]] = None,
    ):
        self.versions = list(versions or [])
        # key: previous version (None = initial release)
        self.changes = changes or {}
        self.commits = commits or {}
        self.staged = list(staged or [])
        self.dates = dates or {}
        self.fail_versions = set(fail_versions or [])
        self.fetch_calls = 0

    def fetch_tags(self) -> None:
        self.fetch_calls += 1

    def latest_version(self) -> Optional[str]:
        return self.versions[-1] if self.versions else None

    def all_versions(self) -> List[str]:
        return list(self.versions)

    def previous_version(self, version, versions=None):
        tags = list(versions) if versions is not None else self.all_versions()
        if version not in tags:
            return None
        idx = tags.index(version)
        return tags[idx - 1] if idx > 0 else None

    def changed_files(self, from_version, to_version):
        if to_version in self.fail_versions:
            raise GitCommandError(["diff", "--name-status", str(from_version), to_version], "bad revision")
        return list(self.changes.get(from_version, []))

    def commit_log(self, from_version, to_version):
        return self.commits.get(from_version, "")

    def staged_changes(self):
        return list(self.staged)

    def date_of(self, version):
        if version not in self.dates:
            raise ValueError(f"no date found for tag {version}")
        return self.dates[version]


class FakeGenerator:
    """EntryGenerator returning a fixed body under the requested heading."""

    def __init__(self, body: str = "### 변경\n\n- something", fail_versions: Optional[List[str]] = None):
        self.body = body
        self.fail_versions = set(fail_versions or [])
        self.contexts = []

    def generate(self, context):
        self.contexts.append(context)
        if context.version in self.fail_versions:
            raise RuntimeError(f"generation failed for {context.version}")
        return f"{format_version_heading(context.version, context.date)}\n\n{self.body}\n"


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from .env files and cached settings."""
    for var in (
        "CHANGELOG_MODEL", "CHANGELOG_PATH", "CHANGELOG_INITIAL_MIN_FILES",
        "CHANGELOG_STAGED_MIN_FILES", "CLAUDE_BINARY", "OPENAI_API_KEY",
        "OPENAI_MODEL", "OPENAI_TEMPERATURE", "LLM_MAX_RETRIES",
        "LLM_RETRY_BASE_DELAY", "LOG_LEVEL", "LOG_FORMAT",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr("changelog_update.app.config.load_dotenv", lambda *a, **kw: False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def sample_changelog():
    return SAMPLE_CHANGELOG


@pytest.fixture
def changelog_path(tmp_path):
    return tmp_path / "CHANGELOG.md"


@pytest.fixture
def changelog_file(changelog_path):
    return ChangelogFile(changelog_path)


@pytest.fixture
def fake_history():
    return FakeHistorySource(
        versions=["v0.1.0", "v0.2.0"],
        changes={
            None: [FileChange("added", f"src/file{i}.py") for i in range(6)],
            "v0.1.0": [FileChange("modified", "src/app.py"), FileChange("added", "src/new.py")],
            "v0.2.0": [FileChange("modified", "README.md")],
        },
        commits={
            None: "abc123 initial commit",
            "v0.1.0": "def456 feat: add new module",
            "v0.2.0": "fed789 docs: update readme",
        },
        dates={"v0.1.0": "2025-01-01", "v0.2.0": "2025-02-01"},
    )


@pytest.fixture
def fake_generator():
    return FakeGenerator()


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers attached by setup_logging during a test."""
    import logging
    from changelog_update.app.logging_config import ROOT_LOGGER_NAME

    root = logging.getLogger(ROOT_LOGGER_NAME)
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
