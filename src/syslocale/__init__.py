"""syslocale - the current process locale as canonical language tags.

Consults platform sources (environment variables, Windows NLS, Apple
CoreFoundation, Android properties, browser navigator) and normalizes
raw identifiers such as "fr_FR.UTF-8@euro" into "fr-FR".

Public API:
    get_locale - Single current locale, or None
    get_locales - Ordered, deduplicated preference list
    get_locale_or_default - get_locale() with a caller fallback
    require_locale - get_locale() that raises when nothing resolves
    normalize_locale - Raw identifier to canonical tag
    resolve_best / resolve_all - Resolution over caller-supplied sources
    to_babel_locale - Canonical tag to babel.Locale (requires syslocale[babel])

Exceptions:
    SysLocaleError - Base exception class
    LocaleNotFoundError - Raised by require_locale()
    BabelImportError - Babel bridge used without Babel installed

Submodules:
    syslocale.providers - Platform providers and provider selection
    syslocale.config - Environment precedence schemes
    syslocale.constants - Variable names, separators, native limits
"""

from .core import BabelImportError, LocaleNotFoundError, SysLocaleError, is_babel_available
from .detect import get_locale, get_locale_or_default, get_locales, require_locale
from .locale_utils import LocaleTag, is_canonical, normalize_locale, to_babel_locale
from .providers import LocaleProvider, get_provider
from .resolver import Source, resolve_all, resolve_best, split_source_value

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("syslocale")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BabelImportError",
    "LocaleNotFoundError",
    "LocaleProvider",
    "LocaleTag",
    "Source",
    "SysLocaleError",
    "__version__",
    "get_locale",
    "get_locale_or_default",
    "get_locales",
    "get_provider",
    "is_babel_available",
    "is_canonical",
    "normalize_locale",
    "require_locale",
    "resolve_all",
    "resolve_best",
    "split_source_value",
    "to_babel_locale",
]
