"""Tests for .ucp report writing."""

from catalog_codepoints.config.fonts import FONT_SPECS
from catalog_codepoints.core.assign import assign_codepoints
from catalog_codepoints.core.usage import UsageRecord
from catalog_codepoints.operations.report import (
    format_codepoint,
    format_usage,
    summarize_blocks,
    write_reports,
)


def make_usage():
    usage = UsageRecord()
    usage.record_all([ord(c) for c in "ab☃"], "fr")
    usage.record_all([ord(c) for c in "b☃☃"], "de")
    return usage


def test_format_codepoint():
    """Test codepoints are written as 0x%04x followed by the character."""
    assert format_codepoint(0x41) == "0x0041 A"
    assert format_codepoint(0xE9) == "0x00e9 é"
    assert format_codepoint(0x65E5) == "0x65e5 日"


def test_format_usage_sorted_by_language():
    """Test language annotations are sorted for stable output."""
    assert format_usage({"fr": 1, "de": 2}) == "  de: 2  fr: 1"


def test_write_reports(tmp_path):
    """Test one file per font plus unassigned, with counts."""
    usage = make_usage()
    assignment = assign_codepoints(usage, ["fr", "de"])

    summary = write_reports(assignment, usage, tmp_path)

    names = sorted(p.name for p in tmp_path.iterdir())
    assert names == sorted([f"{spec.name}.ucp" for spec in FONT_SPECS] + ["unassigned.ucp"])
    assert (tmp_path / "SuSESans.ucp").read_text(encoding="utf-8") == "0x0061 a\n0x0062 b\n"
    assert (tmp_path / "kochi.ucp").read_text(encoding="utf-8") == ""
    assert (tmp_path / "unassigned.ucp").read_text(encoding="utf-8") == "0x2603 ☃  de: 2  fr: 1\n"
    assert summary.font_counts["SuSESans"] == 2
    assert summary.font_counts["unassigned"] == 1
    assert summary.total == 3


def test_write_reports_surrogate(tmp_path):
    """Test a lone surrogate from a \\u escape can be written."""
    usage = UsageRecord()
    usage.record(0xD800, "ja")
    assignment = assign_codepoints(usage, ["ja"])

    write_reports(assignment, usage, tmp_path)

    data = (tmp_path / "unassigned.ucp").read_bytes()
    assert data.startswith(b"0xd800 \xed\xa0\x80  ja: 1")


def test_summarize_blocks():
    """Test unassigned codepoints are grouped by Unicode block."""
    blocks = summarize_blocks([0x2603, 0x2600, 0x20AC])

    assert blocks == [("Miscellaneous Symbols", 2), ("Currency Symbols", 1)]
