"""
CHANGELOG 처리 서비스

git 이력, 항목 생성 워크플로우, 문서 병합, 파일 저장을 묶어
신규 태그 처리와 누락 태그(catch-up) 처리를 제공합니다.
"""
from datetime import date as date_cls
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from changelog_update.app.config import Settings, get_settings
from changelog_update.app.logging_config import get_logger

from ..history.git_source import GitHistorySource, HistorySource
from ..langgraph.changelog_workflow import ChangelogWorkflow
from ..langgraph.entry_generator import EntryGenerator, get_entry_generator
from .change_set import ChangeSetResolver
from .gap_detector import find_missing_versions
from .merger import merge_entries, merge_entry
from .persistence import ChangelogFile
from .schema import CatchUpResult

logger = get_logger("changelog_service")

# (버전, 순번, 전체 개수)
ProgressCallback = Callable[[str, int, int], None]


class ChangelogService:
    """CHANGELOG 처리 서비스"""

    def __init__(
        self,
        history: HistorySource,
        generator: EntryGenerator,
        changelog_file: ChangelogFile,
        resolver: Optional[ChangeSetResolver] = None
    ):
        self.history = history
        self.changelog_file = changelog_file
        self.workflow = ChangelogWorkflow(history, generator, resolver)

    # ============================================================
    # 신규 태그
    # ============================================================

    def resolve_previous_version(self, version: str) -> Tuple[Optional[str], bool]:
        """
        신규 태그의 비교 기준 태그 결정

        Returns:
            (이전 태그 또는 None, 태그가 이미 존재하는지 여부)
            - 최신 태그가 요청 태그와 같으면 그 앞 태그를 사용하고,
              앞 태그가 없으면 None (초기 릴리스)
        """
        latest = self.history.latest_version()
        if latest is None:
            return None, False
        if latest != version:
            return latest, False
        return self.history.previous_version(version), True

    def generate_entry(
        self,
        version: str,
        previous_version: Optional[str],
        target_ref: str = "HEAD",
        date: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        신규 태그 항목 생성 (HEAD까지의 변경 + 스테이징 변경, 날짜는 오늘)

        Returns:
            ChangelogWorkflow.process 결과
        """
        logger.info(f"Generating entry for new tag {version} (previous: {previous_version})")
        return self.workflow.process(
            version=version,
            previous_version=previous_version,
            target_ref=target_ref,
            date=date or date_cls.today().isoformat(),
        )

    # ============================================================
    # catch-up
    # ============================================================

    def find_missing_versions(self) -> Tuple[List[str], List[str]]:
        """(전체 태그, 누락 태그) 모두 오래된 순"""
        all_versions = self.history.all_versions()
        missing = find_missing_versions(all_versions, self.changelog_file.read())
        logger.info(f"{len(missing)} of {len(all_versions)} tags missing from {self.changelog_file.path}")
        return all_versions, missing

    def generate_missing_entries(
        self,
        missing_versions: Sequence[str],
        all_versions: Sequence[str],
        on_progress: Optional[ProgressCallback] = None
    ) -> CatchUpResult:
        """
        누락 태그를 하나씩 순서대로 처리

        각 태그는 자신의 커밋 날짜와 바로 앞 태그를 기준으로 생성한다.
        실패한 태그는 errors에 기록하고 건너뛴다.
        """
        result = CatchUpResult(missing_versions=list(missing_versions))
        total = len(missing_versions)

        for i, version in enumerate(missing_versions, start=1):
            if on_progress:
                on_progress(version, i, total)

            previous = self.history.previous_version(version, all_versions)
            outcome = self.workflow.process(
                version=version,
                previous_version=previous,
                target_ref=version,
                historical=True,
            )

            if outcome["status"] == "completed":
                result.generated_versions.append(version)
                result.entries.append(outcome["entry"])
            elif outcome["status"] == "skip":
                logger.warning(f"No changes found for {version}, skipping")
                result.skipped_versions.append(version)
            else:
                logger.warning(f"Failed to generate entry for {version}: {outcome['error']}")
                result.skipped_versions.append(version)
                result.errors[version] = outcome["error"]

        return result

    # ============================================================
    # 병합 및 저장
    # ============================================================

    def apply_entry(self, entry: str) -> str:
        """항목 하나를 병합해서 저장하고 최종 문서를 반환"""
        merged = merge_entry(self.changelog_file.read(), entry)
        self.changelog_file.write(merged)
        return merged

    def apply_entries(self, entries: Sequence[str]) -> str:
        """
        catch-up 항목들을 한 번에 병합

        entries는 오래된 순으로 생성되므로 최신 항목이 위에 오도록
        뒤집어서 병합한다.
        """
        batch = list(reversed(entries))
        merged = merge_entries(self.changelog_file.read(), batch)
        self.changelog_file.write(merged)
        return merged


def get_changelog_service(
    model: Optional[str] = None,
    changelog_path: Optional[str] = None,
    settings: Optional[Settings] = None,
    repo_path: Optional[str] = None
) -> ChangelogService:
    """설정값으로 git 이력, 생성기, 파일을 조립한 서비스 반환"""
    settings = settings or get_settings()
    generator = get_entry_generator(model or settings.model, settings)
    resolver = ChangeSetResolver(
        initial_min_files=settings.initial_min_files,
        staged_min_files=settings.staged_min_files
    )
    return ChangelogService(
        history=GitHistorySource(repo_path),
        generator=generator,
        changelog_file=ChangelogFile(changelog_path or settings.changelog_path),
        resolver=resolver,
    )
