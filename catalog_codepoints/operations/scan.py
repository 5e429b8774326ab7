"""
Scan operations.

Walks the language directories of a translation tree and records every
codepoint used in msgstr strings.
"""

from collections.abc import Iterable
from pathlib import Path

from catalog_codepoints.config.debug import DebugFlag
from catalog_codepoints.config.paths import is_language_tag
from catalog_codepoints.core.catalog import (
    iter_catalog_files,
    iter_msgstr_lines,
    language_of,
)
from catalog_codepoints.core.escapes import decode_string
from catalog_codepoints.core.usage import UsageRecord
from catalog_codepoints.utils.logging import debug_enabled, logger


def discover_languages(root: Path) -> list[str]:
    """
    Find all language subdirectories of the translation tree.

    Args:
        root: Top-level directory of the translation tree

    Returns:
        Sorted directory names of the form xx or xx_YY
    """
    return sorted(
        entry.name
        for entry in root.iterdir()
        if entry.is_dir() and is_language_tag(entry.name)
    )


def scan_catalog(path: Path, language: str, usage: UsageRecord) -> int:
    """
    Record the codepoints of all msgstr strings of one catalog file.

    Args:
        path: Catalog file
        language: Language tag to record the codepoints under
        usage: Usage record to update

    Returns:
        Number of codepoints recorded

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    count = 0
    with path.open(encoding="utf-8", newline="\n") as f:
        for line in iter_msgstr_lines(f):
            if debug_enabled(DebugFlag.LINES):
                logger.debug(f"  {line.rstrip()}")
            codepoints = decode_string(line)
            usage.record_all(codepoints, language)
            count += len(codepoints)
    return count


def scan_languages(
    root: Path,
    languages: Iterable[str],
    usage: UsageRecord,
) -> list[str]:
    """
    Scan the catalog files of each language directory.

    Missing language directories are skipped with a warning.

    Args:
        root: Top-level directory of the translation tree
        languages: Language directories to scan, in order
        usage: Usage record to update

    Returns:
        Languages whose directory was scanned
    """
    scanned = []
    for language in languages:
        if not is_language_tag(language):
            logger.warning(f"{language} does not look like a language directory")

        directory = root / language
        if not directory.is_dir():
            logger.warning(f"Language directory not found: {directory}")
            continue

        files = 0
        recorded = 0
        for path in iter_catalog_files(directory):
            if debug_enabled(DebugFlag.FILES):
                logger.info(f"Parsing {path.relative_to(root)}")
            recorded += scan_catalog(path, language_of(path, root), usage)
            files += 1

        logger.debug(f"{language}: {files} catalog files, {recorded} codepoints")
        scanned.append(language)

    if usage.out_of_range:
        logger.warning(
            f"Ignored {len(usage.out_of_range)} codepoints outside the Basic Multilingual Plane"
        )

    logger.info(f"Scanned {len(scanned)} languages, {len(usage)} distinct codepoints")
    return scanned
