"""
Tests for merger module
"""
from changelog_update.domain.changelog.document import ChangelogDocument
from changelog_update.domain.changelog.merger import CHANGELOG_HEADER, merge_entries, merge_entry

PREAMBLE = "# Changelog\n\nAll notable changes to this project will be documented in this file.\n\n"
V100_BLOCK = "## [v1.0.0] - 2025-01-01\n\n### 추가\n\n- old\n\n"
V090_BLOCK = "## [v0.9.0] - 2024-12-01\n\n### 수정\n\n- fix\n"


def _entry(version, body, date="2025-02-01"):
    return f"## [{version}] - {date}\n\n{body}"


class TestBootstrap:
    """Test merging into an absent document."""

    def test_absent_document(self):
        entry = _entry("v1.0.0", "- first")

        assert merge_entry(None, entry) == CHANGELOG_HEADER + entry + "\n"

    def test_content_after_preamble_equals_entry(self):
        entry = _entry("v1.0.0", "### 추가\n\n- a\n- b")
        merged = merge_entry(None, entry)

        assert merged[len(CHANGELOG_HEADER):] == entry + "\n"


class TestInsert:
    """Test inserting a new version above existing ones."""

    def test_insert_before_first_heading(self, sample_changelog):
        entry = _entry("v1.1.0", "- added")

        merged = merge_entry(sample_changelog, entry)

        assert merged == PREAMBLE + entry + "\n\n" + V100_BLOCK + V090_BLOCK

    def test_scenario_new_version_on_top(self):
        existing = (
            "# Changelog\n\n"
            "## [v0.9.0] - 2024-12-01\n\n- nine\n\n"
            "## [v0.8.0] - 2024-11-01\n\n- eight\n"
        )

        merged = merge_entry(existing, _entry("v1.0.0", "- ten"))

        assert ChangelogDocument.from_text(merged).versions() == ["v1.0.0", "v0.9.0", "v0.8.0"]

    def test_order_preserved_for_unsorted_document(self):
        existing = (
            "## [v0.2.0] - b\n\n- two\n\n"
            "## [v0.5.0] - e\n\n- five\n\n"
            "## [v0.1.0] - a\n\n- one\n"
        )

        merged = merge_entry(existing, _entry("v0.3.0", "- three"))

        assert ChangelogDocument.from_text(merged).versions() == ["v0.3.0", "v0.2.0", "v0.5.0", "v0.1.0"]
        assert merged.endswith("## [v0.2.0] - b\n\n- two\n\n## [v0.5.0] - e\n\n- five\n\n## [v0.1.0] - a\n\n- one\n")

    def test_unparsable_entry_is_inserted(self, sample_changelog):
        merged = merge_entry(sample_changelog, "Some notes without heading")

        assert merged == PREAMBLE + "Some notes without heading\n\n" + V100_BLOCK + V090_BLOCK


class TestReplace:
    """Test replacing an existing version block."""

    def test_replace_middle_block(self, sample_changelog):
        entry = _entry("v1.0.0", "- new", date="2025-01-02")

        merged = merge_entry(sample_changelog, entry)

        # 기존 블록이 빈 줄로 끝났으므로 구분 줄을 더하지 않는다
        assert merged == PREAMBLE + entry + "\n" + V090_BLOCK
        assert "- old" not in merged

    def test_separator_added_when_old_block_touches_next_heading(self):
        existing = "## [v1.0.0] - a\n\n- old\n## [v0.9.0] - b\n\n- x\n"

        merged = merge_entry(existing, "## [v1.0.0] - c\n\n- new")

        assert merged == "## [v1.0.0] - c\n\n- new\n\n## [v0.9.0] - b\n\n- x\n"

    def test_separator_decided_by_old_block_not_new_entry(self):
        blank_ended = "## [v1.0.0] - a\n\n- old\n\n## [v0.9.0] - b\n\n- x\n"
        touching = "## [v1.0.0] - a\n\n- old\n## [v0.9.0] - b\n\n- x\n"

        assert merge_entry(blank_ended, "## [v1.0.0] - c\n\n- new") == (
            "## [v1.0.0] - c\n\n- new\n## [v0.9.0] - b\n\n- x\n"
        )
        assert merge_entry(touching, "## [v1.0.0] - c\n\n- new\n") == (
            "## [v1.0.0] - c\n\n- new\n\n\n## [v0.9.0] - b\n\n- x\n"
        )

    def test_replace_last_block_appends_nothing(self, sample_changelog):
        entry = _entry("v0.9.0", "- fixed again", date="2024-12-02")

        merged = merge_entry(sample_changelog, entry)

        assert merged == PREAMBLE + V100_BLOCK + entry

    def test_scenario_old_body_replaced(self):
        existing = "# Changelog\n\n## [v1.0.0] - 2025-01-01\n\n- old\n"

        merged = merge_entry(existing, _entry("v1.0.0", "- new"))
        document = ChangelogDocument.from_text(merged)

        assert document.versions() == ["v1.0.0"]
        assert "- new" in merged
        assert "- old" not in merged

    def test_repeated_replacement_keeps_single_block(self, sample_changelog):
        entry = _entry("v1.0.0", "### 변경\n\n- updated")

        once = merge_entry(sample_changelog, entry)
        twice = merge_entry(once, entry)

        assert once == PREAMBLE + entry + "\n" + V090_BLOCK
        assert twice == PREAMBLE + entry + "\n\n" + V090_BLOCK
        assert ChangelogDocument.from_text(twice).versions() == ["v1.0.0", "v0.9.0"]

    def test_idempotent_at_end_of_document(self, sample_changelog):
        entry = _entry("v0.9.0", "- same")

        once = merge_entry(sample_changelog, entry)

        assert merge_entry(once, entry) == once

    def test_duplicate_headings_only_first_replaced(self):
        existing = "## [v1.0.0] - a\n\n- first\n\n## [v1.0.0] - b\n\n- second\n"

        merged = merge_entry(existing, _entry("v1.0.0", "- new"))

        assert merged == _entry("v1.0.0", "- new") + "\n## [v1.0.0] - b\n\n- second\n"

    def test_whitespace_in_brackets_must_match_exactly(self):
        existing = "## [ v1.0.0 ] - a\n\n- spaced\n"

        merged = merge_entry(existing, _entry("v1.0.0", "- new"))

        assert ChangelogDocument.from_text(merged).versions() == ["v1.0.0", " v1.0.0 "]


class TestAppend:
    """Test documents without any version headings."""

    def test_append_after_preamble(self):
        existing = "# Changelog\n\nIntro text.\n"
        entry = _entry("v1.0.0", "- first")

        assert merge_entry(existing, entry) == "# Changelog\n\nIntro text.\n\n" + entry + "\n"

    def test_preamble_kept_verbatim(self):
        existing = "# Changelog\n\nIntro text.\n\n\n"
        entry = _entry("v1.0.0", "- first")

        assert merge_entry(existing, entry) == existing + "\n" + entry + "\n"

    def test_empty_file_is_not_bootstrapped(self):
        entry = _entry("v1.0.0", "- first")

        assert merge_entry("", entry) == "\n" + entry + "\n"
        assert merge_entry("  \n", entry) == "  \n\n" + entry + "\n"


class TestMergeEntries:
    """Test batch merging."""

    def test_batch_inserted_in_given_order(self, sample_changelog):
        entries = [_entry("v1.2.0", "- b"), _entry("v1.1.0", "- a")]

        merged = merge_entries(sample_changelog, entries)

        assert ChangelogDocument.from_text(merged).versions() == ["v1.2.0", "v1.1.0", "v1.0.0", "v0.9.0"]
        assert merged == PREAMBLE + entries[0] + "\n\n" + entries[1] + "\n\n" + V100_BLOCK + V090_BLOCK

    def test_batch_into_absent_document(self):
        entries = [_entry("v0.2.0", "- b"), _entry("v0.1.0", "- a")]

        merged = merge_entries(None, entries)

        assert merged == "# Changelog\n\n" + entries[0] + "\n\n" + entries[1] + "\n"

    def test_empty_batch_leaves_document(self, sample_changelog):
        assert merge_entries(sample_changelog, []) == sample_changelog
        assert merge_entries(None, []) == ""
