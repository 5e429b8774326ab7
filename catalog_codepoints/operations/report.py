"""
Report operations.

Writes one <font>.ucp file per font subset plus unassigned.ucp, listing the
codepoints each font must include.
"""

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

from fontTools import unicodedata

from catalog_codepoints.config.debug import DebugFlag
from catalog_codepoints.config.fonts import UNASSIGNED
from catalog_codepoints.config.paths import OUTPUT_SUFFIX
from catalog_codepoints.core.assign import FontAssignment
from catalog_codepoints.core.usage import UsageRecord
from catalog_codepoints.utils.logging import debug_enabled, logger


@dataclass
class ReportSummary:
    """Codepoint counts of a report run."""

    font_counts: dict[str, int] = field(default_factory=dict)
    total: int = 0


def format_codepoint(codepoint: int) -> str:
    """Format a codepoint as "0x%04x <char>"."""
    return f"0x{codepoint:04x} {chr(codepoint)}"


def format_usage(usage: dict[str, int]) -> str:
    """Format language counts as "  <lang>: <count>" per language."""
    return "".join(f"  {language}: {count}" for language, count in sorted(usage.items()))


def format_line(codepoint: int, font: str, usage: UsageRecord) -> str:
    """Format one output line; unassigned lines carry language counts."""
    line = format_codepoint(codepoint)
    if font == UNASSIGNED:
        line += format_usage(usage.languages(codepoint))
    return line


def write_font_file(
    path: Path,
    font: str,
    codepoints: list[int],
    usage: UsageRecord,
) -> None:
    """
    Write the codepoint list of one font.

    Lone surrogates (from \\u escapes) are written as-is.

    Raises:
        OSError: If the file cannot be written
    """
    with path.open("w", encoding="utf-8", errors="surrogatepass", newline="\n") as f:
        for codepoint in codepoints:
            f.write(format_line(codepoint, font, usage) + "\n")


def summarize_blocks(codepoints: list[int]) -> list[tuple[str, int]]:
    """
    Count codepoints per Unicode block.

    Returns:
        (block name, count) pairs, largest first
    """
    counts = Counter(unicodedata.block(chr(cp)) for cp in codepoints)
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))


def write_reports(
    assignment: FontAssignment,
    usage: UsageRecord,
    output_dir: Path,
) -> ReportSummary:
    """
    Write one .ucp file per font and for the unassigned codepoints.

    Args:
        assignment: Codepoints claimed per font
        usage: Recorded codepoint usage (for unassigned annotations)
        output_dir: Directory to write the files to

    Returns:
        ReportSummary with per-font counts and the number of distinct
        codepoints used

    Raises:
        OSError: If an output file cannot be written
    """
    summary = ReportSummary()
    output_dir.mkdir(parents=True, exist_ok=True)

    for font in assignment.fonts:
        codepoints = assignment.codepoints(font)
        path = output_dir / f"{font}{OUTPUT_SUFFIX}"

        if debug_enabled(DebugFlag.DUMP):
            logger.debug(f"Font: {font}")
            for codepoint in codepoints:
                if debug_enabled(DebugFlag.DUMP_CHARS):
                    logger.debug(f"  {format_line(codepoint, font, usage)!r}")
                else:
                    logger.debug(f"  0x{codepoint:04x}")

        write_font_file(path, font, codepoints, usage)
        summary.font_counts[font] = len(codepoints)
        logger.info(f'used codepoints in font "{font}": {len(codepoints)}')

    summary.total = len(usage)
    logger.info(f"total used codepoints: {summary.total}")

    if assignment.unassigned:
        logger.info("Unassigned codepoints by block:")
        for block, count in summarize_blocks(assignment.unassigned):
            logger.info(f"  {block}: {count}")

    return summary
