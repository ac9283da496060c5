"""Tests for section splicing."""

from datetime import datetime, timedelta, timezone

from memory_bank.store.splicer import current_timestamp, find_section, format_entry, splice

TS = "2026-02-18 09:30:00"


class TestTimestamp:
    def test_format(self):
        now = datetime(2026, 2, 18, 9, 30, 0, 123456, tzinfo=timezone.utc)
        assert current_timestamp(now) == TS

    def test_converts_to_utc(self):
        plus8 = timezone(timedelta(hours=8))
        now = datetime(2026, 2, 18, 17, 30, 0, tzinfo=plus8)
        assert current_timestamp(now) == TS

    def test_default_is_now(self):
        assert len(current_timestamp()) == len(TS)


class TestFormatEntry:
    def test_single_line(self):
        assert format_entry("Fixed bug", TS) == f"\n[{TS}] - Fixed bug\n"


class TestFindSection:
    def test_missing(self):
        assert find_section("# Title\n", "## Decision") is None

    def test_until_next_header(self):
        text = "## Decision\nold note\n## Other\nmore"
        assert find_section(text, "## Decision") == (0, text.index("\n## Other"))

    def test_until_end(self):
        text = "# Log\n## Decision\nold note\n"
        assert find_section(text, "## Decision") == (6, len(text))

    def test_first_occurrence_wins(self):
        text = "## A\none\n## A\ntwo\n"
        assert find_section(text, "## A") == (0, text.index("\n## A", 1))

    def test_single_hash_is_not_a_boundary(self):
        text = "## A\none\n# Top\ntwo"
        assert find_section(text, "## A") == (0, len(text))

    def test_deeper_header_is_a_boundary(self):
        text = "## A\none\n### Sub\ntwo"
        assert find_section(text, "## A") == (0, text.index("\n### Sub"))


class TestSplice:
    def test_no_header_appends(self):
        entry = format_entry("Fixed bug", TS)
        assert splice("X\n", entry) == f"X\n\n[{TS}] - Fixed bug\n"

    def test_empty_header_appends(self):
        entry = format_entry("Fixed bug", TS)
        assert splice("X\n", entry, "") == "X\n" + entry

    def test_inserts_before_next_section(self):
        text = "## Decision\nold note\n## Other\nmore"
        result = splice(text, format_entry("Chose SQLite", TS), "## Decision")
        assert result == f"## Decision\nold note\n[{TS}] - Chose SQLite\n\n## Other\nmore"
        assert result.endswith("## Other\nmore")
        assert result.index("old note") < result.index("Chose SQLite") < result.index("## Other")

    def test_inserts_at_end_of_last_section(self):
        text = "## Decision\nold note\n\n\n"
        result = splice(text, format_entry("Chose SQLite", TS), "## Decision")
        assert result == f"## Decision\nold note\n[{TS}] - Chose SQLite\n"

    def test_missing_header_is_created(self):
        result = splice("# Log\n", format_entry("e1", TS), "## New")
        assert result == f"# Log\n\n## New\n\n[{TS}] - e1\n"

    def test_created_header_is_reused(self):
        text = splice("# Log\n", format_entry("e1", TS), "## New")
        text = splice(text, format_entry("e2", TS), "## New")
        assert text.count("## New") == 1
        assert text.endswith(f"[{TS}] - e1\n[{TS}] - e2\n")

    def test_header_text_inside_entry(self):
        text = splice("## Decision\n", format_entry("see ## Decision above", TS), "## Decision")
        text = splice(text, format_entry("second", TS), "## Decision")
        assert text.count(f"[{TS}]") == 2
        assert text.endswith(f"see ## Decision above\n[{TS}] - second\n")

    def test_only_first_duplicate_header(self):
        text = "## A\none\n## A\ntwo"
        result = splice(text, format_entry("new", TS), "## A")
        assert result == f"## A\none\n[{TS}] - new\n\n## A\ntwo"

    def test_header_match_is_case_sensitive(self):
        result = splice("## decision\nx\n", format_entry("new", TS), "## Decision")
        assert result.startswith("## decision\nx\n")
        assert result.endswith(f"\n## Decision\n\n[{TS}] - new\n")
