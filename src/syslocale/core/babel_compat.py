"""Babel compatibility layer for optional dependency handling.

syslocale supports two installation modes:
- Core: `pip install syslocale` (no external dependencies)
- With CLDR bridge: `pip install syslocale[babel]` (adds to_babel_locale)

Core installations never import Babel. The bridge gets a consistent,
helpful error message when Babel is missing.

Usage Pattern:
    from syslocale.core.babel_compat import require_babel

    def my_function(tag: str) -> None:
        require_babel("my_function")  # Raises BabelImportError if Babel missing
        from babel import Locale  # Safe to import Babel now
        ...

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache

from syslocale.core.errors import BabelImportError

__all__ = [
    "BabelImportError",
    "is_babel_available",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


def is_babel_available() -> bool:
    """Check if Babel is installed.

    Returns:
        True if Babel is installed and importable, False otherwise.
    """
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)
