"""Locale utilities for POSIX to BCP-47 conversion.

Centralizes the conversion of raw platform locale identifiers into the
canonical ``language[-REGION]`` tag form returned by every public API.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from syslocale.constants import (
    ENCODING_SEPARATOR,
    MODIFIER_SEPARATOR,
    POSIX_SUBTAG_SEPARATOR,
    TAG_SUBTAG_SEPARATOR,
)
from syslocale.core.babel_compat import require_babel

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "LocaleTag",
    "clear_locale_cache",
    "is_canonical",
    "normalize_locale",
    "to_babel_locale",
]

logger = logging.getLogger(__name__)

type LocaleTag = str
"""Canonical locale tag (e.g., 'en', 'fr-FR')."""


def normalize_locale(raw: str) -> LocaleTag:
    """Convert a raw platform locale identifier to a canonical tag.

    POSIX locale strings carry an optional encoding and modifier
    (``fr_FR.UTF-8@euro``). Everything from the first ``.`` or ``@`` is
    dropped and underscores become hyphens. Case is preserved as given.

    The function is total: it never raises and returns some string for
    every input, including the empty string.

    Args:
        raw: Raw locale identifier as reported by a source.

    Returns:
        Canonical tag (e.g., "fr-FR").

    Example:
        >>> normalize_locale("fr_FR.UTF-8@euro")
        'fr-FR'
        >>> normalize_locale("fr-FR")  # Already canonical
        'fr-FR'
        >>> normalize_locale("EN_us")
        'EN-us'
    """
    end = len(raw)
    for separator in (ENCODING_SEPARATOR, MODIFIER_SEPARATOR):
        index = raw.find(separator, 0, end)
        if index != -1:
            end = index
    return raw[:end].replace(POSIX_SUBTAG_SEPARATOR, TAG_SUBTAG_SEPARATOR)


def is_canonical(tag: str) -> bool:
    """Return True if ``tag`` is unchanged by normalize_locale().

    Example:
        >>> is_canonical("pt-BR")
        True
        >>> is_canonical("pt_BR.UTF-8")
        False
    """
    return not any(
        separator in tag
        for separator in (ENCODING_SEPARATOR, MODIFIER_SEPARATOR, POSIX_SUBTAG_SEPARATOR)
    )


@functools.lru_cache(maxsize=128)
def to_babel_locale(tag: str) -> Locale | None:
    """Parse a tag into a Babel Locale for callers that want CLDR data.

    Raw identifiers are normalized first, so both "de_DE.UTF-8" and
    "de-DE" are accepted. Unknown or malformed tags yield None rather than
    an exception, matching the resolver's "no locale" convention.

    Args:
        tag: Canonical tag or raw platform identifier.

    Returns:
        Babel Locale, or None if Babel does not recognize the tag.

    Raises:
        BabelImportError: If Babel is not installed.

    Example:
        >>> locale = to_babel_locale("de-DE")
        >>> (locale.language, locale.territory)
        ('de', 'DE')
    """
    require_babel("to_babel_locale")
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale, UnknownLocaleError  # noqa: PLC0415

    canonical = normalize_locale(tag)
    if not canonical:
        return None
    try:
        return Locale.parse(canonical, sep=TAG_SUBTAG_SEPARATOR)
    except (UnknownLocaleError, ValueError) as e:
        logger.debug("Babel does not recognize locale '%s': %s", canonical, e)
        return None


def clear_locale_cache() -> None:
    """Clear the Babel Locale cache populated by to_babel_locale()."""
    to_babel_locale.cache_clear()
