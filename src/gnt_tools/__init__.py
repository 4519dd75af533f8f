"""GNT tools: core text of Greek New Testament critical editions.

Two entry points compute the same core text:
- ``normalize_text`` runs over a whole string and never fails.
- ``core_char`` handles one character and faults on unknown Greek codepoints.
"""

from .normalize import normalize_text
from .strict import (
    CaseMappingError,
    CoreTextError,
    UnhandledCharacterError,
    core_char,
    core_chars,
    core_text_strict,
    find_unhandled,
)

__all__ = [
    "normalize_text",
    "core_char",
    "core_chars",
    "core_text_strict",
    "find_unhandled",
    "CoreTextError",
    "UnhandledCharacterError",
    "CaseMappingError",
]
