"""Hypothesis strategies for syslocale property-based testing.

Usage:
    from tests.strategies import posix_locales, language_lists
"""

from .locales import canonical_tags, language_lists, plain_text, posix_locales

__all__ = [
    "canonical_tags",
    "language_lists",
    "plain_text",
    "posix_locales",
]
