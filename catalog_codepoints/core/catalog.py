"""
Catalog file discovery and msgstr line selection.
"""

import os
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from catalog_codepoints.config.paths import CATALOG_SUFFIX

MSGSTR_START = re.compile(r"^\s*msgstr", re.IGNORECASE)
CONTINUATION = re.compile(r'^\s*"')


def iter_catalog_files(directory: Path) -> Iterator[Path]:
    """
    Walk a directory depth-first and yield its catalog files.

    Directories and files are visited in sorted order so repeated runs see
    files in the same sequence.

    Args:
        directory: Directory to walk

    Yields:
        Paths of regular files ending in .po (any case)
    """
    for dirpath, dirnames, filenames in os.walk(directory):
        dirnames.sort()
        for filename in sorted(filenames):
            path = Path(dirpath) / filename
            if filename.lower().endswith(CATALOG_SUFFIX) and path.is_file():
                yield path


def language_of(path: Path, root: Path) -> str:
    """Get the language tag (top-level directory) of a catalog path."""
    return path.relative_to(root).parts[0]


def iter_msgstr_lines(lines: Iterable[str]) -> Iterator[str]:
    """
    Select the lines belonging to msgstr entries.

    An entry starts with a msgstr line and continues over following lines
    that are bare quoted strings or further msgstr lines. The line ending an
    entry is dropped without being checked for a new entry.

    Args:
        lines: Lines of a catalog file

    Yields:
        Lines to hand to the escape decoder
    """
    it = iter(lines)
    for line in it:
        if not MSGSTR_START.match(line):
            continue
        yield line

        for line in it:
            if not (CONTINUATION.match(line) or MSGSTR_START.match(line)):
                break
            yield line
