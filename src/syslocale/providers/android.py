"""Android provider backed by system properties.

Python 3.13+.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Callable

from syslocale.constants import ANDROID_LOCALE_PROPERTIES, GETPROP_TIMEOUT_SECONDS
from syslocale.resolver import Source

__all__ = ["AndroidProvider", "getprop"]

logger = logging.getLogger(__name__)


def getprop(prop: str) -> str | None:
    """Return an Android system property, or None if unset or unreadable."""
    executable = shutil.which("getprop")
    if executable is None:
        logger.debug("getprop not found on PATH")
        return None
    try:
        completed = subprocess.run(  # noqa: S603
            [executable, prop],
            capture_output=True,
            check=True,
            text=True,
            timeout=GETPROP_TIMEOUT_SECONDS,
        )
    except (OSError, subprocess.SubprocessError, UnicodeDecodeError) as e:
        logger.debug("getprop %s failed: %s", prop, e)
        return None
    return completed.stdout.strip() or None


class AndroidProvider:
    """Locale provider for Android.

    ``persist.sys.locale`` holds the user's choice; ``ro.product.locale``
    is the factory default and only matters when the former is unset.

    Args:
        read_property: Property lookup, ``getprop`` by default.
        properties: Property names in precedence order.
    """

    name = "android"

    def __init__(
        self,
        read_property: Callable[[str], str | None] = getprop,
        properties: tuple[str, ...] = ANDROID_LOCALE_PROPERTIES,
    ) -> None:
        self._read_property = read_property
        self.properties = properties

    def sources(self) -> list[Source]:
        return [Source.of(prop, self._read_property(prop)) for prop in self.properties]

    def best_sources(self) -> list[Source]:
        return self.sources()
