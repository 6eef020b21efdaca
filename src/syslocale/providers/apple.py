"""macOS and iOS provider backed by CoreFoundation.

Reads ``CFLocaleCopyPreferredLanguages``, the same ranked list that
``NSLocale.preferredLanguages`` exposes, through ctypes.

Python 3.13+.
"""

from __future__ import annotations

import ctypes
import ctypes.util
import functools
import logging
from collections.abc import Callable
from typing import Any

from syslocale.resolver import Source

__all__ = ["AppleProvider", "copy_preferred_languages"]

logger = logging.getLogger(__name__)

SOURCE_PREFERRED_LANGUAGES = "CFLocaleCopyPreferredLanguages"

K_CF_STRING_ENCODING_UTF8 = 0x08000100


@functools.lru_cache(maxsize=1)
def _load_core_foundation() -> Any | None:
    path = ctypes.util.find_library("CoreFoundation")
    if path is None:
        logger.debug("CoreFoundation not found")
        return None
    try:
        cf = ctypes.cdll.LoadLibrary(path)
    except OSError as e:
        logger.debug("CoreFoundation could not be loaded: %s", e)
        return None

    cf.CFLocaleCopyPreferredLanguages.argtypes = []
    cf.CFLocaleCopyPreferredLanguages.restype = ctypes.c_void_p
    cf.CFArrayGetCount.argtypes = [ctypes.c_void_p]
    cf.CFArrayGetCount.restype = ctypes.c_long
    cf.CFArrayGetValueAtIndex.argtypes = [ctypes.c_void_p, ctypes.c_long]
    cf.CFArrayGetValueAtIndex.restype = ctypes.c_void_p
    cf.CFStringGetLength.argtypes = [ctypes.c_void_p]
    cf.CFStringGetLength.restype = ctypes.c_long
    cf.CFStringGetMaximumSizeForEncoding.argtypes = [ctypes.c_long, ctypes.c_uint32]
    cf.CFStringGetMaximumSizeForEncoding.restype = ctypes.c_long
    cf.CFStringGetCString.argtypes = [
        ctypes.c_void_p,
        ctypes.c_char_p,
        ctypes.c_long,
        ctypes.c_uint32,
    ]
    cf.CFStringGetCString.restype = ctypes.c_bool
    cf.CFRelease.argtypes = [ctypes.c_void_p]
    cf.CFRelease.restype = None
    return cf


def _cf_string_to_str(cf: Any, cf_string: int) -> str | None:
    # Size for the worst-case UTF-8 expansion plus NUL, then fill.
    length = cf.CFStringGetLength(cf_string)
    capacity = cf.CFStringGetMaximumSizeForEncoding(length, K_CF_STRING_ENCODING_UTF8) + 1
    buffer = ctypes.create_string_buffer(capacity)
    if not cf.CFStringGetCString(cf_string, buffer, capacity, K_CF_STRING_ENCODING_UTF8):
        return None
    try:
        return buffer.value.decode("utf-8")
    except UnicodeDecodeError:
        return None


def copy_preferred_languages(cf: Any | None = None) -> list[str]:
    """Return the user's preferred languages (e.g., ["en-US", "fr-FR"]).

    Returns [] if CoreFoundation is unavailable or reports no languages.
    Entries that cannot be decoded are skipped.
    """
    cf = cf if cf is not None else _load_core_foundation()
    if cf is None:
        return []

    array = cf.CFLocaleCopyPreferredLanguages()
    if not array:
        return []
    try:
        languages = []
        for index in range(cf.CFArrayGetCount(array)):
            language = _cf_string_to_str(cf, cf.CFArrayGetValueAtIndex(array, index))
            if language is None:
                logger.debug("Skipping undecodable preferred language at index %d", index)
                continue
            languages.append(language)
        return languages
    finally:
        cf.CFRelease(array)


class AppleProvider:
    """Locale provider for macOS and iOS.

    The single best locale is the first preferred language, as
    ``NSLocale.preferredLanguages.firstObject`` reports it.
    """

    name = "apple"

    def __init__(
        self, preferred_languages: Callable[[], list[str]] = copy_preferred_languages
    ) -> None:
        self._preferred_languages = preferred_languages

    def sources(self) -> list[Source]:
        return [Source.of(SOURCE_PREFERRED_LANGUAGES, self._preferred_languages())]

    def best_sources(self) -> list[Source]:
        return [Source.of(SOURCE_PREFERRED_LANGUAGES, self._preferred_languages()[:1])]
