"""
Debug selector categories.

The selector is a bitmask passed on the command line; each bit enables
one category of diagnostic messages. It never changes output files.
"""

from enum import IntFlag


class DebugFlag(IntFlag):
    """Diagnostic categories selectable with --debug."""

    NONE = 0
    FILES = 1  # each catalog file as it is parsed
    LINES = 2  # each msgstr line handed to the decoder
    STRINGS = 4  # each decoded string fragment
    CODEPOINTS = 8  # each decoded codepoint
    DUMP_CHARS = 16  # show characters in the assignment dump
    DUMP = 32  # dump every assigned codepoint per font
    ALL = 63
