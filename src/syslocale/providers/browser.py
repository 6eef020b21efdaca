"""Browser provider for Python running on WebAssembly (Pyodide).

Queries ``navigator.languages`` and ``navigator.language`` through the
``js`` module that the Pyodide runtime injects. Outside a browser the
module does not exist and both sources report nothing.

Python 3.13+.
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Callable
from typing import Any

from syslocale.resolver import Source

__all__ = ["BrowserProvider", "navigator_languages"]

logger = logging.getLogger(__name__)

SOURCE_LANGUAGES = "navigator.languages"
SOURCE_LANGUAGE = "navigator.language"


def _navigator() -> Any | None:
    try:
        js = importlib.import_module("js")
        return js.navigator
    except (ImportError, AttributeError) as e:
        logger.debug("No browser navigator available: %s", e)
        return None


def navigator_languages(navigator: Any | None = None) -> tuple[list[str], str | None]:
    """Return (navigator.languages, navigator.language), empty when unavailable."""
    navigator = navigator if navigator is not None else _navigator()
    if navigator is None:
        return [], None

    languages = [
        value for value in (getattr(navigator, "languages", None) or ()) if isinstance(value, str)
    ]
    language = getattr(navigator, "language", None)
    return languages, language if isinstance(language, str) else None


class BrowserProvider:
    """Locale provider for browser-hosted interpreters.

    The single best locale is ``navigator.language``, the browser UI
    language; the preference list is ``navigator.languages``.
    """

    name = "browser"

    def __init__(
        self, query: Callable[[], tuple[list[str], str | None]] = navigator_languages
    ) -> None:
        self._query = query

    def sources(self) -> list[Source]:
        languages, language = self._query()
        return [Source.of(SOURCE_LANGUAGES, languages), Source.of(SOURCE_LANGUAGE, language)]

    def best_sources(self) -> list[Source]:
        _, language = self._query()
        return [Source.of(SOURCE_LANGUAGE, language)]
