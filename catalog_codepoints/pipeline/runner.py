"""
Extraction pipeline orchestration.

Runs scan, assignment and report in order, sharing explicit state between
the steps.
"""

import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from catalog_codepoints.config.fonts import DEFAULT_LANGUAGES, FONT_SPECS, FontSpec
from catalog_codepoints.config.paths import DEFAULT_ROOT, resolve_root
from catalog_codepoints.core.assign import FontAssignment, assign_codepoints
from catalog_codepoints.core.usage import UsageRecord
from catalog_codepoints.operations.report import ReportSummary, write_reports
from catalog_codepoints.operations.scan import discover_languages, scan_languages
from catalog_codepoints.utils.logging import logger


@dataclass
class ExtractRun:
    """State passed between pipeline steps."""

    root_arg: str | Path
    language: str | None = None
    discover: bool = False
    output_arg: str | Path | None = None
    font_specs: tuple[FontSpec, ...] = FONT_SPECS
    root: Path | None = None
    output_dir: Path | None = None
    languages: list[str] = field(default_factory=list)
    usage: UsageRecord = field(default_factory=UsageRecord)
    assignment: FontAssignment | None = None
    summary: ReportSummary | None = None


def select_languages(run: ExtractRun) -> None:
    """Resolve the root directory and decide which languages to scan."""
    run.root = resolve_root(run.root_arg)
    if run.output_arg is None:
        run.output_dir = run.root
    else:
        run.output_dir = Path(run.output_arg).expanduser()

    if run.language:
        # usage is recorded under the top-level directory name ("ja/" -> "ja")
        run.languages = [Path(run.language).parts[0]]
    elif run.discover:
        run.languages = discover_languages(run.root)
    else:
        run.languages = list(DEFAULT_LANGUAGES)
    logger.info(f"Translation tree: {run.root} ({len(run.languages)} languages)")


def scan(run: ExtractRun) -> None:
    """Record codepoint usage of all selected languages."""
    scan_languages(run.root, run.languages, run.usage)


def assign(run: ExtractRun) -> None:
    """Assign used codepoints to fonts."""
    run.assignment = assign_codepoints(run.usage, run.languages, run.font_specs)


def report(run: ExtractRun) -> None:
    """Write the .ucp files."""
    run.summary = write_reports(run.assignment, run.usage, run.output_dir)


def run_extract(
    root: str | Path = DEFAULT_ROOT,
    language: str | None = None,
    *,
    discover: bool = False,
    output_dir: str | Path | None = None,
    font_specs: tuple[FontSpec, ...] = FONT_SPECS,
) -> ExtractRun:
    """
    Run all extraction steps in order.

    Pipeline:
      1. select - Resolve the root directory and the languages to scan
      2. scan   - Decode msgstr strings of every catalog file
      3. assign - Assign used codepoints to fonts
      4. report - Write <font>.ucp and unassigned.ucp

    Any failing step aborts the run with exit status 1.

    Args:
        root: Top-level directory of the translation tree
        language: Only scan this language directory
        discover: Scan every language directory found under root instead
            of the configured list
        output_dir: Where to write .ucp files (defaults to root)
        font_specs: Font range table

    Returns:
        The completed run state
    """
    run = ExtractRun(
        root_arg=root,
        language=language,
        discover=discover,
        output_arg=output_dir,
        font_specs=font_specs,
    )
    steps: list[tuple[str, Callable[[ExtractRun], None]]] = [
        ("select", select_languages),
        ("scan", scan),
        ("assign", assign),
        ("report", report),
    ]

    for i, (name, func) in enumerate(steps, 1):
        logger.debug(f"[{i}/{len(steps)}] Running {name}")
        try:
            func(run)
        except Exception as e:
            logger.error(f"{name} failed: {e}")
            sys.exit(1)

    return run
