"""Platform locale providers.

Each provider reports named raw-locale sources for one platform family.
The provider for the running interpreter is chosen once, on first use,
from ``sys.platform``; callers never branch on the platform themselves.

Exports:
    LocaleProvider: Protocol every provider satisfies
    EnvironmentProvider: LANGUAGE / LC_* / LANG variables (POSIX)
    WindowsProvider: kernel32 NLS and MUI queries
    AppleProvider: CoreFoundation preferred languages (macOS, iOS)
    AndroidProvider: Android system properties
    BrowserProvider: navigator languages under Pyodide
    NullProvider: No sources
    select_provider: Pure platform-to-provider mapping
    get_provider: Cached provider for the running interpreter

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import sys

from .android import AndroidProvider
from .apple import AppleProvider
from .base import LocaleProvider, NullProvider
from .browser import BrowserProvider
from .environ import EnvironmentProvider
from .windows import WindowsProvider

__all__ = [
    "AndroidProvider",
    "AppleProvider",
    "BrowserProvider",
    "EnvironmentProvider",
    "LocaleProvider",
    "NullProvider",
    "WindowsProvider",
    "get_provider",
    "select_provider",
]

logger = logging.getLogger(__name__)

# sys.platform prefixes of systems that expose POSIX locale variables.
_POSIX_PLATFORMS = (
    "aix",
    "cygwin",
    "dragonfly",
    "freebsd",
    "gnu",
    "haiku",
    "linux",
    "netbsd",
    "openbsd",
    "sunos",
)


def select_provider(platform: str) -> LocaleProvider:
    """Return a new provider suited to a ``sys.platform`` value.

    Example:
        >>> select_provider("linux").name
        'environ'
        >>> select_provider("win32").name
        'windows'
        >>> select_provider("wasi").name
        'null'
    """
    if platform == "win32":
        return WindowsProvider()
    if platform in ("darwin", "ios"):
        return AppleProvider()
    if platform == "android":
        return AndroidProvider()
    if platform == "emscripten":
        return BrowserProvider()
    if platform.startswith(_POSIX_PLATFORMS):
        return EnvironmentProvider()
    return NullProvider()


@functools.lru_cache(maxsize=1)
def get_provider() -> LocaleProvider:
    """Return the provider for the running interpreter (selected once)."""
    provider = select_provider(sys.platform)
    logger.debug("Selected locale provider '%s' for platform '%s'", provider.name, sys.platform)
    return provider
