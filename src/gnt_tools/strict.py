"""Per-character core text with explicit faults on unknown Greek codepoints.

``core_char`` folds the NFD decomposition of one character into at most one
output letter. Marks, digits, whitespace and anything outside the Greek and
Coptic block are dropped; a Greek-block codepoint that is neither a letter,
a sigma, nor known punctuation raises :class:`UnhandledCharacterError` so a
maintainer can triage it rather than have comparisons silently skew.
"""

from __future__ import annotations

import logging
import unicodedata as ud
from typing import Iterable, Iterator, List, Optional, Tuple

from .alphabet import (
    IGNORED_GREEK,
    INVISIBLE_NU,
    LUNATE_SIGMA,
    NU,
    describe,
    in_greek_block,
    is_greek_letter,
    is_sigma,
)

logger = logging.getLogger(__name__)


class CoreTextError(ValueError):
    """Base class for faults raised while computing core text."""


class UnhandledCharacterError(CoreTextError):
    """A Greek-block codepoint the pipeline does not know how to treat."""

    def __init__(self, char: str, source: Optional[str] = None, position: Optional[int] = None):
        self.char = char
        self.codepoint = ord(char)
        # The source character whose decomposition contained ``char``.
        self.source = source if source is not None else char
        self.position = position
        super().__init__(self._message())

    def _message(self) -> str:
        msg = f"unhandled character {describe(self.char)}"
        if self.source != self.char:
            msg += f" in decomposition of {describe(self.source)}"
        if self.position is not None:
            msg += f" at position {self.position}"
        return msg

    def at(self, position: int) -> "UnhandledCharacterError":
        """Return a copy of this error tagged with a source position."""
        return UnhandledCharacterError(self.char, source=self.source, position=position)


class CaseMappingError(CoreTextError):
    """A Greek letter whose lowercase mapping is not exactly one character."""

    def __init__(self, char: str, lowered: str):
        self.char = char
        self.lowered = lowered
        super().__init__(f"lowercase of {describe(char)} is {lowered!r}, expected one character")


def _fold_letter(ch: str) -> str:
    if is_sigma(ch):
        return LUNATE_SIGMA
    lowered = ch.lower()
    if len(lowered) != 1:
        raise CaseMappingError(ch, lowered)
    return lowered


def core_char(
    c: str,
    ignored: Iterable[str] = (),
    expand_invisible_nu: bool = False,
) -> Optional[str]:
    """Return the core letter for one source character, or None to drop it.

    Args:
        c: A single character
        ignored: Extra Greek-block codepoints to drop instead of faulting
        expand_invisible_nu: Treat ˉ (U+02C9) as ν

    Returns:
        One of α..ω / ϲ, or None

    Raises:
        UnhandledCharacterError: ``c`` decomposes to an unrecognized Greek-block codepoint
        CaseMappingError: a letter lowercases to other than one character
    """
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"core_char expects a single character, got {c!r}")
    extra = frozenset(ignored)
    result: Optional[str] = None
    for ch in ud.normalize("NFD", c):
        if is_greek_letter(ch) or is_sigma(ch):
            # One base letter per source character; later marks leave it alone.
            result = _fold_letter(ch)
        elif expand_invisible_nu and ch == INVISIBLE_NU:
            result = NU
        elif ch in IGNORED_GREEK or ch in extra or not in_greek_block(ch):
            continue
        else:
            raise UnhandledCharacterError(ch, source=c)
    return result


def core_chars(
    text: str,
    ignored: Iterable[str] = (),
    expand_invisible_nu: bool = False,
) -> Iterator[Tuple[int, str]]:
    """Yield ``(source_index, core_letter)`` for every character that emits.

    The index refers to ``text`` as given, so results can be aligned back to
    the source. A fault is re-raised with its position attached.
    """
    extra = frozenset(ignored)
    for i, c in enumerate(text):
        try:
            out = core_char(c, ignored=extra, expand_invisible_nu=expand_invisible_nu)
        except UnhandledCharacterError as e:
            raise e.at(i) from e
        if out is not None:
            yield i, out


def core_text_strict(
    text: str,
    ignored: Iterable[str] = (),
    expand_invisible_nu: bool = False,
) -> str:
    """Per-character equivalent of ``normalize_text`` that faults on unknown input."""
    return "".join(
        out for _, out in core_chars(text, ignored=ignored, expand_invisible_nu=expand_invisible_nu)
    )


def find_unhandled(text: str, ignored: Iterable[str] = ()) -> List[UnhandledCharacterError]:
    """Collect every fault in ``text`` instead of stopping at the first one."""
    extra = frozenset(ignored)
    faults: List[UnhandledCharacterError] = []
    for i, c in enumerate(text):
        try:
            core_char(c, ignored=extra)
        except UnhandledCharacterError as e:
            faults.append(e.at(i))
    if faults:
        logger.debug("found %d unhandled characters", len(faults))
    return faults
