"""Codepoint classification for Greek core text.

All checks are inclusive range or set tests; nothing is built at runtime.
"""

from __future__ import annotations

import unicodedata as ud

# Combining Diacritical Marks block (accents, breathings, iota subscript).
COMBINING_MARKS_START = 0x0300
COMBINING_MARKS_END = 0x036F

# Greek and Coptic block.
GREEK_BLOCK_START = 0x0370
GREEK_BLOCK_END = 0x03FF

LOWER_START = 0x03B1  # α
LOWER_END = 0x03C9  # ω
UPPER_START = 0x0391  # Α
UPPER_END = 0x03A9  # Ω

LUNATE_SIGMA = "\u03f2"  # ϲ
INVISIBLE_NU = "\u02c9"  # ˉ
NU = "\u03bd"  # ν

SIGMA_VARIANTS = frozenset(
    {
        "\u03c3",  # σ
        "\u03c2",  # ς final
        "\u03a3",  # Σ
        "\u03f2",  # ϲ lunate
        "\u03f9",  # Ϲ capital lunate
    }
)

# Punctuation the strict path recognizes and drops.
IGNORED_GREEK = frozenset(
    {
        "\u037e",  # Greek question mark
        "\u0387",  # ano teleia
        "\u00b7",  # middle dot
    }
)


def is_combining_mark(ch: str) -> bool:
    return COMBINING_MARKS_START <= ord(ch) <= COMBINING_MARKS_END


def in_greek_block(ch: str) -> bool:
    return GREEK_BLOCK_START <= ord(ch) <= GREEK_BLOCK_END


def is_greek_letter(ch: str) -> bool:
    """True for assigned letters of the basic Greek lowercase/uppercase ranges.

    U+03A2 sits inside the uppercase range but is unassigned, so it is not
    treated as a letter.
    """
    cp = ord(ch)
    if LOWER_START <= cp <= LOWER_END:
        return True
    return UPPER_START <= cp <= UPPER_END and ud.category(ch) == "Lu"


def is_sigma(ch: str) -> bool:
    return ch in SIGMA_VARIANTS


def in_alphabet(ch: str) -> bool:
    """Allow-list used by the whole-string filter: α..ω plus lunate sigma."""
    return ch == LUNATE_SIGMA or LOWER_START <= ord(ch) <= LOWER_END


def is_core_char(ch: str) -> bool:
    """Whether ``ch`` may appear in core text (no sigma but the lunate one)."""
    return ch == LUNATE_SIGMA or (
        LOWER_START <= ord(ch) <= LOWER_END and ch not in SIGMA_VARIANTS
    )


def is_core_text(text: str) -> bool:
    return all(is_core_char(ch) for ch in text)


def describe(ch: str) -> str:
    """Render a codepoint for humans, e.g. ``'͵' (U+0375 GREEK LOWER NUMERAL SIGN)``."""
    name = ud.name(ch, "UNNAMED")
    return f"{ch!r} (U+{ord(ch):04X} {name})"
