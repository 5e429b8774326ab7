"""
Filesystem constants and root directory resolution.
"""

import re
from pathlib import Path

DEFAULT_ROOT = "."

# Output artifact suffix (<font>.ucp)
OUTPUT_SUFFIX = ".ucp"

# Catalog files to scan
CATALOG_SUFFIX = ".po"

# Language subdirectories look like "ja", "zh_CN", "en_GB"
LANGUAGE_DIR_PATTERN = re.compile(r"^[a-z]{2}(_[A-Z]{2})?$")


def is_language_tag(name: str) -> bool:
    """Check whether a directory name looks like a language tag."""
    return LANGUAGE_DIR_PATTERN.match(name) is not None


def resolve_root(path: str | Path) -> Path:
    """
    Resolve the top-level directory of the translation tree.

    Args:
        path: Directory path, "~" and "~user" are expanded

    Returns:
        Absolute path of the directory

    Raises:
        FileNotFoundError: If the directory does not exist
        NotADirectoryError: If the path is not a directory
    """
    root = Path(path).expanduser()
    if not root.exists():
        raise FileNotFoundError(f"cannot change to directory {path}: no such directory")
    if not root.is_dir():
        raise NotADirectoryError(f"cannot change to directory {path}: not a directory")
    return root.resolve()
