"""
Assignment of used codepoints to font subsets.
"""

from collections.abc import Iterable

from catalog_codepoints.config.debug import DebugFlag
from catalog_codepoints.config.fonts import (
    FONT_SPECS,
    UNASSIGNED,
    FontSpec,
    language_to_fonts,
)
from catalog_codepoints.core.usage import UsageRecord
from catalog_codepoints.utils.logging import debug_enabled, logger


class FontAssignment:
    """
    Codepoints claimed per font, plus the unassigned pseudo-font.

    Fonts keep the order of the font table, with the unassigned set last.
    """

    def __init__(self, font_names: Iterable[str]) -> None:
        self._claims: dict[str, set[int]] = {name: set() for name in font_names}
        self._claims[UNASSIGNED] = set()

    def claim(self, font: str, codepoint: int) -> None:
        """Mark a codepoint as needed by a font."""
        self._claims[font].add(codepoint)

    def codepoints(self, font: str) -> list[int]:
        """Get the codepoints claimed by a font in ascending order."""
        return sorted(self._claims[font])

    @property
    def fonts(self) -> list[str]:
        """Font names in output order (unassigned last)."""
        return list(self._claims)

    @property
    def unassigned(self) -> list[int]:
        """Used codepoints no font claims, in ascending order."""
        return self.codepoints(UNASSIGNED)


def assign_codepoints(
    usage: UsageRecord,
    languages: Iterable[str],
    font_specs: Iterable[FontSpec] = FONT_SPECS,
) -> FontAssignment:
    """
    Assign every used codepoint to the fonts of the languages that used it.

    For each language using a codepoint, each font serving that language
    claims the codepoint if one of its ranges contains it. Several fonts may
    claim the same codepoint. Codepoints claimed by no font go to the
    unassigned set.

    Args:
        usage: Recorded codepoint usage
        languages: Scanned language directories
        font_specs: Font range table, in priority order

    Returns:
        FontAssignment with one entry per font plus unassigned
    """
    specs = {spec.name: spec for spec in font_specs}
    lang_fonts = language_to_fonts(languages, specs.values())
    assignment = FontAssignment(specs)

    if debug_enabled(DebugFlag.FILES):
        logger.info("Assigning collected codepoints to fonts")

    for codepoint in usage.codepoints():
        assigned = False
        for language in usage.languages(codepoint):
            for font in lang_fonts.get(language, []):
                for low, high in specs[font].ranges:
                    if low <= codepoint <= high:
                        assignment.claim(font, codepoint)
                        assigned = True
                        break

        if not assigned:
            assignment.claim(UNASSIGNED, codepoint)
            if debug_enabled(DebugFlag.CODEPOINTS):
                logger.debug(f"  {codepoint:#06x} not covered by any font")

    return assignment
