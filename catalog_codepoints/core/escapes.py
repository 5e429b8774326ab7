"""
Escape decoding for quoted catalog strings.

Turns one msgstr line (or continuation line) into the codepoints its quoted
string literals denote. C-style control escapes are dropped rather than
reproduced, since only the printable characters matter for font coverage.
"""

import re

from catalog_codepoints.config.debug import DebugFlag
from catalog_codepoints.utils.logging import debug_enabled, logger

MSGSTR_PREFIX = re.compile(r"^\s*msgstr(\[[^\]]*\]|)\s*", re.IGNORECASE)

# Escapes consumed without producing a codepoint
CONTROL_ESCAPES = frozenset("abfnrtv0")

# Escapes standing for the escaped character itself
LITERAL_ESCAPES = frozenset("\\?'")

# Numeric escapes: (marker, digit pattern, base, mask)
NUMERIC_ESCAPES = (
    ("o", re.compile(r"[0-7]{3}"), 8, 0xFF),
    ("x", re.compile(r"[0-9a-fA-F]{2}"), 16, 0xFF),
    ("u", re.compile(r"[0-9a-fA-F]{4}"), 16, 0xFFFF),
)

PLAIN_RUN = re.compile(r'[^\\"]+')


def strip_msgstr_prefix(line: str) -> str:
    """Remove a leading msgstr / msgstr[N] keyword from a line."""
    return MSGSTR_PREFIX.sub("", line, count=1)


def decode_escape(text: str, pos: int) -> tuple[int | None, int] | None:
    """
    Decode one backslash escape starting at ``text[pos]``.

    Args:
        text: Line being scanned
        pos: Index of the backslash

    Returns:
        (codepoint or None for dropped escapes, characters consumed), or
        None if no escape rule matches
    """
    marker = text[pos + 1 : pos + 2]
    if not marker:
        return None
    if marker == '"':
        return 0x22, 2
    if marker in CONTROL_ESCAPES:
        return None, 2
    if marker in LITERAL_ESCAPES:
        return ord(marker), 2

    for escape, digits, base, mask in NUMERIC_ESCAPES:
        if marker != escape:
            continue
        match = digits.match(text, pos + 2)
        if match is None:
            return None
        return int(match.group(), base) & mask, 2 + len(match.group())

    return None


def decode_string(line: str) -> list[int]:
    """
    Decode the quoted string literals of a catalog line into codepoints.

    Characters outside quotes are ignored. Inside quotes, escapes are
    tried before plain text; a backslash that starts no known escape ends
    decoding of the line, keeping what was decoded before it.

    Args:
        line: msgstr line or bare continuation line

    Returns:
        Codepoints in the order they appear
    """
    text = strip_msgstr_prefix(line.rstrip("\n"))
    codepoints: list[int] = []
    inside = False
    pos = 0

    while pos < len(text):
        char = text[pos]

        if not inside:
            if char == '"':
                inside = True
            pos += 1
            continue

        if char == '"':
            inside = False
            pos += 1
            continue

        if char == "\\":
            decoded = decode_escape(text, pos)
            if decoded is None:
                if debug_enabled(DebugFlag.STRINGS):
                    logger.debug(f"    unknown escape at column {pos}: {text[pos:]!r}")
                break
            codepoint, consumed = decoded
            if codepoint is not None:
                codepoints.append(codepoint)
            pos += consumed
            continue

        run = PLAIN_RUN.match(text, pos)
        codepoints.extend(ord(c) for c in run.group())
        pos = run.end()

    if debug_enabled(DebugFlag.STRINGS):
        logger.debug(f"    decoded: {''.join(map(chr, codepoints))!r}")
    if debug_enabled(DebugFlag.CODEPOINTS):
        logger.debug(
            "      " + " ".join(f"{chr(cp)!r}: {cp:#x}" for cp in codepoints)
        )
    return codepoints
