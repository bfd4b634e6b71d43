"""
Tests for ChangelogDocument
"""
from changelog_update.domain.changelog.document import ChangelogDocument


class TestChangelogDocument:
    """Test line-based document scanning."""

    def test_text_round_trip(self, sample_changelog):
        document = ChangelogDocument.from_text(sample_changelog)

        assert document.to_text() == sample_changelog

    def test_headings_and_versions(self, sample_changelog):
        document = ChangelogDocument.from_text(sample_changelog)

        assert document.headings() == [(4, "v1.0.0"), (10, "v0.9.0")]
        assert document.versions() == ["v1.0.0", "v0.9.0"]
        assert document.first_heading_index() == 4

    def test_no_headings(self):
        document = ChangelogDocument.from_text("# Changelog\n\nNothing yet.\n")

        assert document.versions() == []
        assert document.first_heading_index() is None
        assert document.find_block("v1.0.0") is None

    def test_find_block_middle(self, sample_changelog):
        document = ChangelogDocument.from_text(sample_changelog)

        assert document.find_block("v1.0.0") == (4, 10)

    def test_find_block_runs_to_end_of_document(self, sample_changelog):
        document = ChangelogDocument.from_text(sample_changelog)

        assert document.find_block("v0.9.0") == (10, len(document.lines))

    def test_missing_version(self, sample_changelog):
        document = ChangelogDocument.from_text(sample_changelog)
        scan = document.scan("v2.0.0")

        assert scan.has_headings is True
        assert scan.has_block is False

    def test_duplicate_headings_only_first_block(self):
        document = ChangelogDocument.from_text(
            "## [v1.0.0] - a\n\n- first\n\n## [v1.0.0] - b\n\n- second\n"
        )

        assert document.find_block("v1.0.0") == (0, 4)

    def test_heading_like_lines_in_body_are_ignored(self):
        document = ChangelogDocument.from_text(
            "## [v1.0.0] - a\n\n### [v0.5.0]\n\n- note\n"
        )

        assert document.versions() == ["v1.0.0"]
        assert document.find_block("v1.0.0") == (0, 6)
