"""Core utilities shared by the resolver and the providers.

Exports:
    SysLocaleError: Base exception
    LocaleNotFoundError: Raised by require_locale() when nothing resolves
    BabelImportError: Raised when the Babel bridge is used without Babel
    is_babel_available: Cached Babel availability check
    require_babel: Fail-fast Babel guard

Python 3.13+.
"""

from .babel_compat import is_babel_available, require_babel
from .errors import BabelImportError, LocaleNotFoundError, SysLocaleError

__all__ = [
    "BabelImportError",
    "LocaleNotFoundError",
    "SysLocaleError",
    "is_babel_available",
    "require_babel",
]
