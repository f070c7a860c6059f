"""Shared utilities."""

from neuromemo.utils.text import fold_term, normalize_whitespace, strip_diacritics

__all__ = [
    "fold_term",
    "normalize_whitespace",
    "strip_diacritics",
]
