"""
Text Processing Utilities

Provides functions for normalizing anatomical terminology so that catalog
search is insensitive to case, accents and stray whitespace.

Usage:
    from neuromemo.utils.text import fold_term

    fold_term("Núcleo  Caudado")  # "nucleo caudado"
"""

import unicodedata


def normalize_whitespace(text: str) -> str:
    """
    Normalize all whitespace to single spaces.

    Args:
        text: Input text

    Returns:
        Text with normalized whitespace
    """
    return " ".join(text.split())


def strip_diacritics(text: str) -> str:
    """
    Remove combining marks (accents, umlauts, cedillas) from text.

    Decomposes to NFKD so that "é" becomes "e" + combining acute, then drops
    the combining characters.

    Args:
        text: Input text

    Returns:
        Text without diacritics
    """
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def fold_term(text: str) -> str:
    """
    Fold a term for case- and diacritic-insensitive comparison.

    Args:
        text: Raw term (name, latin name, synonym or search input)

    Returns:
        Folded term; empty string for empty input
    """
    if not text:
        return ""
    return normalize_whitespace(strip_diacritics(text).casefold())
