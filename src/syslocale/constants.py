"""Shared constants for syslocale.

Centralizes the fixed names and limits used by the resolver and the
platform providers. Placing them here avoids circular imports between
``config`` and ``providers`` and gives a single source of truth.

Constants are grouped by domain:
- Tag format: separators recognized by the normalizer
- Environment: variable names and list delimiters
- Native limits: buffer sizes and flags for OS locale APIs
- Fallback: default tag offered to callers

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Tag format
    "ENCODING_SEPARATOR",
    "MODIFIER_SEPARATOR",
    "POSIX_SUBTAG_SEPARATOR",
    "TAG_SUBTAG_SEPARATOR",
    # Environment
    "ENV_LANGUAGE",
    "ENV_LC_ALL",
    "ENV_LC_CTYPE",
    "ENV_LC_MESSAGES",
    "ENV_LANG",
    "LANGUAGE_LIST_DELIMITER",
    # Native limits
    "LOCALE_NAME_MAX_LENGTH",
    "MUI_LANGUAGE_NAME",
    "ANDROID_LOCALE_PROPERTIES",
    "GETPROP_TIMEOUT_SECONDS",
    # Fallback
    "DEFAULT_LOCALE",
]

# ============================================================================
# TAG FORMAT
# ============================================================================

# POSIX locale strings look like ``lang_REGION.ENCODING@modifier``.
# Everything from the first encoding or modifier separator onward is dropped.
ENCODING_SEPARATOR: str = "."
MODIFIER_SEPARATOR: str = "@"

POSIX_SUBTAG_SEPARATOR: str = "_"
TAG_SUBTAG_SEPARATOR: str = "-"

# ============================================================================
# ENVIRONMENT
# ============================================================================

# GNU gettext preference list, colon-delimited (e.g. "en_US:ru_RU").
ENV_LANGUAGE: str = "LANGUAGE"

ENV_LC_ALL: str = "LC_ALL"
ENV_LC_CTYPE: str = "LC_CTYPE"
ENV_LC_MESSAGES: str = "LC_MESSAGES"
ENV_LANG: str = "LANG"

LANGUAGE_LIST_DELIMITER: str = ":"

# ============================================================================
# NATIVE LIMITS
# ============================================================================

# Windows LOCALE_NAME_MAX_LENGTH, in UTF-16 code units including the NUL.
LOCALE_NAME_MAX_LENGTH: int = 85

# GetUserPreferredUILanguages flag requesting names ("en-US") instead of LCIDs.
MUI_LANGUAGE_NAME: int = 0x8

# Android system properties, most specific first.
ANDROID_LOCALE_PROPERTIES: tuple[str, ...] = ("persist.sys.locale", "ro.product.locale")

# getprop is a local binder query; anything slower is treated as a failure.
GETPROP_TIMEOUT_SECONDS: float = 2.0

# ============================================================================
# FALLBACK
# ============================================================================

# Offered to callers by get_locale_or_default(); never injected by the resolver.
DEFAULT_LOCALE: str = "en-US"
