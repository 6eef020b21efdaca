"""Windows provider backed by the NLS/MUI APIs in kernel32.

Both queries follow the Win32 buffer protocol: determine the required
capacity, fill a caller-owned buffer of that size, decode. The buffers
never leave the function that allocated them.

Python 3.13+.
"""

from __future__ import annotations

import ctypes
import logging
from collections.abc import Callable
from typing import Any

from syslocale.constants import LOCALE_NAME_MAX_LENGTH, MUI_LANGUAGE_NAME
from syslocale.resolver import Source

__all__ = [
    "WindowsProvider",
    "get_user_default_locale_name",
    "get_user_preferred_ui_languages",
]

logger = logging.getLogger(__name__)

SOURCE_PREFERRED_UI_LANGUAGES = "GetUserPreferredUILanguages"
SOURCE_DEFAULT_LOCALE_NAME = "GetUserDefaultLocaleName"


def _load_kernel32() -> Any | None:
    try:
        return ctypes.WinDLL("kernel32", use_last_error=True)  # type: ignore[attr-defined]
    except (AttributeError, OSError) as e:
        logger.debug("kernel32 unavailable: %s", e)
        return None


def get_user_default_locale_name(kernel32: Any | None = None) -> str | None:
    """Return the user default locale name (e.g., "en-US"), or None on failure.

    LOCALE_NAME_MAX_LENGTH bounds every locale name, so a single fixed-size
    buffer suffices. The returned length includes the terminating NUL.
    """
    kernel32 = kernel32 if kernel32 is not None else _load_kernel32()
    if kernel32 is None:
        return None

    buffer = ctypes.create_unicode_buffer(LOCALE_NAME_MAX_LENGTH)
    try:
        length = kernel32.GetUserDefaultLocaleName(buffer, LOCALE_NAME_MAX_LENGTH)
    except OSError as e:
        logger.warning("GetUserDefaultLocaleName failed: %s", e)
        return None
    if length <= 1:
        logger.debug("GetUserDefaultLocaleName returned length %d", length)
        return None
    return buffer[: length - 1]


def get_user_preferred_ui_languages(kernel32: Any | None = None) -> list[str]:
    """Return the user's ranked UI languages, or [] on failure.

    First call sizes the buffer, second call fills it. The result is a
    NUL-separated list terminated by an extra NUL.
    """
    kernel32 = kernel32 if kernel32 is not None else _load_kernel32()
    if kernel32 is None:
        return []

    count = ctypes.c_ulong(0)
    size = ctypes.c_ulong(0)
    try:
        if not kernel32.GetUserPreferredUILanguages(
            MUI_LANGUAGE_NAME, ctypes.byref(count), None, ctypes.byref(size)
        ):
            logger.debug("GetUserPreferredUILanguages size query failed")
            return []
        if size.value == 0:
            return []

        buffer = ctypes.create_unicode_buffer(size.value)
        if not kernel32.GetUserPreferredUILanguages(
            MUI_LANGUAGE_NAME, ctypes.byref(count), buffer, ctypes.byref(size)
        ):
            logger.debug("GetUserPreferredUILanguages fill failed")
            return []
    except OSError as e:
        logger.warning("GetUserPreferredUILanguages failed: %s", e)
        return []

    return [name for name in buffer[: size.value].split("\0") if name]


class WindowsProvider:
    """Locale provider for Windows.

    The preference list puts the ranked UI languages first and the
    regional-format locale last; the single best locale is the
    regional-format locale alone.

    Args:
        default_locale_name: Query for the user default locale name.
        preferred_ui_languages: Query for the ranked UI language list.
    """

    name = "windows"

    def __init__(
        self,
        default_locale_name: Callable[[], str | None] = get_user_default_locale_name,
        preferred_ui_languages: Callable[[], list[str]] = get_user_preferred_ui_languages,
    ) -> None:
        self._default_locale_name = default_locale_name
        self._preferred_ui_languages = preferred_ui_languages

    def sources(self) -> list[Source]:
        return [
            Source.of(SOURCE_PREFERRED_UI_LANGUAGES, self._preferred_ui_languages()),
            Source.of(SOURCE_DEFAULT_LOCALE_NAME, self._default_locale_name()),
        ]

    def best_sources(self) -> list[Source]:
        return [Source.of(SOURCE_DEFAULT_LOCALE_NAME, self._default_locale_name())]
