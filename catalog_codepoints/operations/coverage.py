"""
Font coverage check.

Compares the codepoints listed in a .ucp file with the cmap of a font file,
so a subset font can be checked against what the catalogs need.
"""

from pathlib import Path

from fontTools.ttLib import TTFont, TTLibError

from catalog_codepoints.utils.logging import logger


def read_ucp(path: Path) -> list[int]:
    """
    Read the codepoints of a .ucp file.

    Only the leading "0x...." token of each line is used; the character
    and any language annotations are ignored. Indented lines are the
    remainder of a line split by a written newline character.

    Args:
        path: .ucp file

    Returns:
        Codepoints in file order

    Raises:
        ValueError: If a line does not start with a hex codepoint
    """
    codepoints = []
    text = path.read_text(encoding="utf-8", errors="surrogatepass")
    for number, line in enumerate(text.split("\n"), 1):
        token = line[:6]
        if not token.strip() or line[0].isspace():
            continue
        if not token.startswith("0x"):
            raise ValueError(f"{path}:{number}: expected 0x codepoint, got {line!r}")
        codepoints.append(int(token, 16))
    return codepoints


def font_codepoints(font_path: Path) -> set[int]:
    """Get the codepoints mapped by a font's best cmap."""
    font = TTFont(font_path, lazy=True)
    try:
        return set(font.getBestCmap() or {})
    finally:
        font.close()


def missing_codepoints(font_path: Path, ucp_path: Path) -> list[int]:
    """
    Find codepoints listed in a .ucp file that a font does not map.

    Args:
        font_path: Font file (TTF/OTF)
        ucp_path: .ucp file produced by extract

    Returns:
        Missing codepoints in ascending order
    """
    needed = set(read_ucp(ucp_path))
    available = font_codepoints(font_path)
    return sorted(needed - available)


def check_coverage(font_path: Path, ucp_path: Path) -> bool:
    """
    Check that a font covers every codepoint of a .ucp file.

    Returns:
        True if nothing is missing
    """
    logger.info(f"Checking {font_path.name} against {ucp_path.name}")
    try:
        missing = missing_codepoints(font_path, ucp_path)
    except (OSError, ValueError, TTLibError) as e:
        logger.error(f"Failed to check coverage: {e}")
        return False

    if not missing:
        logger.info("All codepoints covered")
        return True

    for codepoint in missing:
        logger.error(f"Missing 0x{codepoint:04x} {chr(codepoint)!r}")
    logger.error(f"{len(missing)} codepoints missing from {font_path.name}")
    return False
