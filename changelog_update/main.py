"""
changelog-update CLI

git 태그를 기준으로 CHANGELOG.md 항목을 생성/병합합니다.

Usage:
    # 새 태그 항목 생성
    changelog-update --tag v1.2.0

    # CHANGELOG에 없는 과거 태그 채우기
    changelog-update --catch-up

    # 둘 다 (catch-up 후 새 태그 처리)
    changelog-update --catch-up --tag v1.2.0 --yes
"""
import argparse
import sys
from typing import Callable, List, Optional

from changelog_update import __version__
from changelog_update.app.config import get_settings
from changelog_update.app.logging_config import get_logger, setup_logging_from_env
from changelog_update.domain.changelog.changelog_service import ChangelogService, get_changelog_service
from changelog_update.domain.changelog.errors import ChangelogError

logger = get_logger("main")

SEPARATOR = "==================================="


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="changelog-update",
        description="Generate CHANGELOG.md entries from git tags using an AI backend",
    )
    parser.add_argument("--tag", help="New version tag (e.g., v1.2.0)")
    parser.add_argument(
        "-m", "--model",
        default=settings.model,
        help="AI model to use: claude, openai or mock (default: %(default)s)",
    )
    parser.add_argument(
        "--changelog",
        default=settings.changelog_path,
        help="CHANGELOG file path (default: %(default)s)",
    )
    parser.add_argument("--skip-pull", action="store_true", help="Skip pulling latest tags from remote")
    parser.add_argument("--catch-up", action="store_true", help="Generate entries for tags missing from CHANGELOG")
    parser.add_argument("--yes", action="store_true", help="Automatically accept all confirmations")
    parser.add_argument("--version", dest="show_version", action="store_true", help="Show version information")
    return parser


def confirm(
    question: str,
    assume_yes: bool = False,
    input_fn: Optional[Callable[[str], str]] = None
) -> bool:
    """[y/N] 확인 (assume_yes면 묻지 않고 승인)"""
    if assume_yes:
        print("\n✔️ Auto-accepting update (--yes flag)")
        return True
    try:
        response = (input_fn or input)(f"\n{question} [y/N]: ")
    except EOFError:
        return False
    return response.strip().lower() in ("y", "yes")


def _print_entry(title: str, entry: str) -> None:
    print(f"\n📝 {title}:")
    print(SEPARATOR)
    print(entry)
    print(SEPARATOR)


def run_catch_up(service: ChangelogService, assume_yes: bool = False) -> int:
    """누락 태그 채우기"""
    print("🔍 Checking for missing tags in CHANGELOG...")

    all_versions, missing = service.find_missing_versions()
    if not all_versions:
        print("❓ No tags found in repository.")
        return 0
    if not missing:
        print(f"✅ All tags are already in {service.changelog_file.path}")
        return 0

    print(f"📌 Found {len(missing)} missing tag(s):")
    for version in missing:
        print(f"  - {version}")

    if not confirm("Do you want to add these missing entries?", assume_yes):
        print("⏹️ Catch-up cancelled.")
        return 0

    def on_progress(version: str, index: int, total: int) -> None:
        print(f"\n🔧 Processing {version} ({index}/{total})...")

    result = service.generate_missing_entries(missing, all_versions, on_progress=on_progress)

    for version in result.skipped_versions:
        reason = result.errors.get(version, "no changes found")
        print(f"⚠️  Warning: Skipped {version}: {reason}")

    if not result.entries:
        print("❌ No entries could be generated.")
        return 0

    _print_entry("Generated CHANGELOG Entries", "\n\n".join(reversed(result.entries)))

    if confirm(f"Do you want to update {service.changelog_file.path} with these entries?", assume_yes):
        service.apply_entries(result.entries)
        print(f"\n✅ {service.changelog_file.path} updated successfully!")
    else:
        print("\n⏹️ Update cancelled.")
    return 0


def run_single_tag(service: ChangelogService, tag: str, assume_yes: bool = False) -> int:
    """새 태그 항목 생성 및 병합"""
    previous, exists = service.resolve_previous_version(tag)
    if exists:
        print(f"⚠️  Tag {tag} already exists. Generating CHANGELOG from previous tag.")
        if previous:
            print(f"📌 Using previous tag: {previous}")
        else:
            print("📌 This is the first tag, treating as initial release.")
    elif previous is None:
        print("📌 No previous tags found. This will be the first release.")
    else:
        print(f"📌 Previous tag: {previous}")

    outcome = service.generate_entry(tag, previous)

    if outcome["status"] == "skip":
        print("✅ No changes since last tag and no staged changes. Nothing to do.")
        return 0
    if not outcome["success"]:
        print(f"❌ Error: {outcome['error']}")
        return 1

    entry = outcome["entry"]
    _print_entry("Generated CHANGELOG Entry", entry)

    path = service.changelog_file.path
    if not confirm(f"Do you want to update {path} with this entry?", assume_yes):
        print("\n⏹️ Update cancelled.")
        return 0

    try:
        service.apply_entry(entry)
    except ChangelogError as e:
        print(f"\n❌ Update failed: {e.message}")
        return 1

    print(f"\n✅ {path} updated successfully!")
    print("📌 Next steps:")
    print(f"  1. Review and edit {path} if needed")
    print(f"  2. git add {path}")
    print(f"  3. git commit -m \"docs: update changelog for {tag}\"")
    print(f"  4. git tag {tag}")
    print("  5. git push && git push --tags")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    setup_logging_from_env()
    try:
        get_settings()
    except ValueError as e:
        print(f"❌ Error: {e}")
        return 1

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.show_version:
        print(f"changelog-update version {__version__}")
        return 0

    if not args.tag and not args.catch_up:
        print("❌ Error: --tag flag is required (or use --catch-up, or both)")
        parser.print_help()
        return 1

    print(f"🚀 Starting CHANGELOG update process using {args.model}...")

    try:
        service = get_changelog_service(model=args.model, changelog_path=args.changelog)
    except ValueError as e:
        print(f"❌ Error: {e}")
        return 1

    if not args.skip_pull:
        print("📥 Fetching latest tags from remote...")
        try:
            service.history.fetch_tags()
        except ChangelogError as e:
            print(f"⚠️  Warning: Failed to pull tags: {e.message}")

    if args.catch_up:
        try:
            code = run_catch_up(service, args.yes)
        except ChangelogError as e:
            logger.error(f"Catch-up failed: {e.to_dict()}")
            print(f"❌ Error during catch-up: {e.message}")
            return 1
        if not args.tag or code != 0:
            return code
        print()

    try:
        return run_single_tag(service, args.tag, args.yes)
    except ChangelogError as e:
        logger.error(f"Update failed: {e.to_dict()}")
        print(f"❌ Error: {e.message}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
