"""
Font range table for codepoint assignment.

Each entry binds a font name to the language directories it serves and the
codepoint ranges it is responsible for. Table order is priority order: the
installer's toolkit picks the first font in its list that has a key
character of a range, so CJK ranges are never split across two fonts for
the same language.

Reference: https://www.unicode.org/charts/
"""

from collections.abc import Iterable
from dataclasses import dataclass

# Highest codepoint handled (Basic Multilingual Plane only)
MAX_CODEPOINT = 0xFFFF

# Pseudo-font collecting used codepoints no font claims
UNASSIGNED = "unassigned"

# Translations scanned when no language is selected
DEFAULT_LANGUAGES = [
    "ja", "cy", "es", "fi", "it", "nl", "ro", "sl_SI", "zh", "bg", "cs",
    "en_GB", "fr", "hu", "no", "pt", "ru", "sv", "tr", "zh_CN", "bs", "de",
    "en_US", "gl", "id", "ko", "nb", "pl", "pt_BR", "sk", "ta", "tv", "zh_TW",
]  # fmt: skip


@dataclass(frozen=True)
class FontSpec:
    """
    Font subset configuration.

    A ``languages`` value of None means the font serves every scanned
    language.
    """

    name: str
    languages: frozenset[str] | None
    ranges: tuple[tuple[int, int], ...]

    def serves(self, language: str) -> bool:
        """Check whether the font is used for a language directory."""
        return self.languages is None or language in self.languages

    def claims(self, codepoint: int) -> bool:
        """Check whether any range of the font contains the codepoint."""
        return any(low <= codepoint <= high for low, high in self.ranges)


# CJK ranges shared by the Han fonts
CJK_RANGES = (
    (0x2E80, 0x312F),  # Radicals, CJK Symbols, Kana, Bopomofo
    (0x3190, 0x9FFF),  # Kanbun through CJK Unified Ideographs
    (0xF900, 0xFAFF),  # CJK Compatibility Ideographs
)

HANGUL_RANGES = (
    (0x3130, 0x318F),  # Hangul Compatibility Jamo
    (0xAC00, 0xD7FF),  # Hangul Syllables
)

FONT_SPECS = (
    FontSpec(
        "SuSESans",
        None,
        (
            (0x0020, 0x036F),  # Latin, IPA, combining diacritics
            (0x1E00, 0x1EFF),  # Latin Extended Additional
        ),
    ),
    FontSpec(
        "FreeSans",
        None,
        (
            (0x0370, 0x04FF),  # Greek and Coptic, Cyrillic
            (0x1F00, 0x1FFF),  # Greek Extended
        ),
    ),
    FontSpec("kochi", frozenset({"ja"}), CJK_RANGES),
    FontSpec("bsmi", frozenset({"zh_TW"}), CJK_RANGES),
    FontSpec("gbsn", frozenset({"zh_CN"}), CJK_RANGES),
    FontSpec("batang", frozenset({"ko"}), HANGUL_RANGES),
)


def language_to_fonts(
    languages: Iterable[str],
    font_specs: Iterable[FontSpec] = FONT_SPECS,
) -> dict[str, list[str]]:
    """
    Map each language directory to the fonts serving it, in table order.

    Args:
        languages: Language directories being scanned
        font_specs: Font range table

    Returns:
        Dict of language -> ordered font names
    """
    specs = list(font_specs)
    return {
        language: [spec.name for spec in specs if spec.serves(language)]
        for language in languages
    }
