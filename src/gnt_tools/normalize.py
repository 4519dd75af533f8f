"""Whole-string normalization of Greek New Testament text to core text.

Policy:
- Decompose (NFD) so accented letters split into base letter + marks.
- Drop combining diacritical marks (U+0300..U+036F).
- Lowercase, and unify every sigma form to the lunate sigma (ϲ).
- Keep only α..ω and ϲ; digits, spaces, punctuation and nomina sacra
  markers such as ``|`` or ``( )`` fall away.

This path never fails on a string. Use :mod:`gnt_tools.strict` when an
unknown Greek codepoint must stop the run instead of being dropped.
"""

from __future__ import annotations

import logging
import unicodedata as ud

from .alphabet import (
    INVISIBLE_NU,
    LUNATE_SIGMA,
    NU,
    SIGMA_VARIANTS,
    in_alphabet,
    is_combining_mark,
    is_greek_letter,
)

logger = logging.getLogger(__name__)

_SIGMA_TABLE = str.maketrans({s: LUNATE_SIGMA for s in SIGMA_VARIANTS})


def decompose(text: str) -> str:
    """Apply Unicode NFD to input text (safe for None-like inputs)."""
    if text is None:
        return ""
    return ud.normalize("NFD", text)


def strip_accents(text: str) -> str:
    # Only meaningful after decompose(): a precomposed ά carries its accent inside.
    return "".join(ch for ch in text if not is_combining_mark(ch))


def fold_case_and_sigma(text: str) -> str:
    """Lowercase the basic Greek letters and map σ, ς, Σ (and lunate forms) to ϲ.

    Everything else passes through untouched, symbol variants such as ϴ
    included; filtering happens later.
    """
    folded = "".join(ch.lower() if is_greek_letter(ch) else ch for ch in text)
    return folded.translate(_SIGMA_TABLE)


def filter_alphabet(text: str) -> str:
    return "".join(ch for ch in text if in_alphabet(ch))


def normalize_text(text: str, expand_invisible_nu: bool = False) -> str:
    """Return the core text of a passage from a GNT critical edition.

    Steps: NFD -> strip accents -> lowercase + sigma unification -> keep
    α..ω and ϲ only. Nomina sacra are left abbreviated (``|κς|`` gives
    ``κϲ``), never expanded.

    Args:
        text: Source text (verse, paragraph, whole book)
        expand_invisible_nu: Restore a line-final nu written as ˉ (U+02C9) as ν

    Returns:
        Core text, possibly empty
    """
    if text is None:
        return ""
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")
    t = decompose(text)
    if expand_invisible_nu:
        t = t.replace(INVISIBLE_NU, NU)
    t = strip_accents(t)
    t = fold_case_and_sigma(t)
    core = filter_alphabet(t)
    logger.debug("normalized %d source chars to %d core chars", len(text), len(core))
    return core
