"""Public locale queries for the running process.

Each call asks the platform provider for fresh source values and resolves
them; nothing is cached between calls except the provider choice itself.

Python 3.13+.
"""

from __future__ import annotations

import logging

from syslocale.constants import DEFAULT_LOCALE
from syslocale.core.errors import LocaleNotFoundError
from syslocale.locale_utils import LocaleTag
from syslocale.providers import LocaleProvider, get_provider
from syslocale.resolver import resolve_all, resolve_best

__all__ = [
    "get_locale",
    "get_locale_or_default",
    "get_locales",
    "require_locale",
]

logger = logging.getLogger(__name__)


def get_locale(*, provider: LocaleProvider | None = None) -> LocaleTag | None:
    """Return the active locale as a canonical tag.

    On POSIX systems this is the first of LC_ALL, LC_CTYPE and LANG that
    is set and non-empty. Elsewhere it is the platform's current locale.

    Args:
        provider: Provider to query instead of the one selected for this
            platform (mainly for tests).

    Returns:
        Canonical tag such as "fr-FR", or None if no locale could be
        determined.

    Example:
        >>> from syslocale.providers import EnvironmentProvider
        >>> get_locale(provider=EnvironmentProvider({"LANG": "fr_FR.UTF-8"}))
        'fr-FR'
    """
    provider = provider if provider is not None else get_provider()
    return resolve_best(provider.best_sources())


def get_locales(*, provider: LocaleProvider | None = None) -> list[LocaleTag]:
    """Return the user's ordered locale preferences, most preferred first.

    On POSIX systems LANGUAGE (colon-separated) is read first, then
    LC_ALL, LC_MESSAGES and LANG. Duplicates keep their first position.

    Args:
        provider: Provider to query instead of the one selected for this
            platform (mainly for tests).

    Returns:
        Deduplicated list of canonical tags; empty if none were found.

    Example:
        >>> from syslocale.providers import EnvironmentProvider
        >>> env = {"LANGUAGE": "en_US:ru_RU:es_ES:en_US"}
        >>> get_locales(provider=EnvironmentProvider(env))
        ['en-US', 'ru-RU', 'es-ES']
    """
    provider = provider if provider is not None else get_provider()
    return resolve_all(provider.sources())


def get_locale_or_default(
    default: LocaleTag = DEFAULT_LOCALE, *, provider: LocaleProvider | None = None
) -> LocaleTag:
    """Return get_locale(), or ``default`` if no locale could be determined."""
    locale = get_locale(provider=provider)
    if locale is None:
        logger.debug("No locale determined, using default '%s'", default)
        return default
    return locale


def require_locale(*, provider: LocaleProvider | None = None) -> LocaleTag:
    """Return get_locale(), raising if no locale could be determined.

    Raises:
        LocaleNotFoundError: If every source is absent or empty.
    """
    provider = provider if provider is not None else get_provider()
    locale = get_locale(provider=provider)
    if locale is None:
        raise LocaleNotFoundError(provider.name)
    return locale
