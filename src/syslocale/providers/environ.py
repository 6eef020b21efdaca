"""Environment-variable provider for Linux, BSD and other POSIX systems.

The process environment is read through an injectable read-only mapping,
so tests can supply a plain dict instead of mutating ``os.environ``.

Python 3.13+.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from syslocale.config import EXTENDED_SCHEME, SIMPLE_SCHEME, EnvScheme, EnvVarSpec
from syslocale.resolver import Source

__all__ = ["EnvironmentProvider", "read_env_var"]

logger = logging.getLogger(__name__)


def read_env_var(environ: Mapping[str, str], name: str) -> str | None:
    """Read a variable, treating undecodable values as absent.

    On POSIX, Python decodes environment bytes with surrogateescape, so a
    value that is not valid UTF-8 contains lone surrogates.

    Example:
        >>> read_env_var({"LANG": "de_DE.UTF-8"}, "LANG")
        'de_DE.UTF-8'
        >>> read_env_var({"LANG": "de_\\udcff"}, "LANG") is None
        True
    """
    value = environ.get(name)
    if value is None:
        return None
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        logger.debug("Ignoring %s: value is not valid text", name)
        return None
    return value


class EnvironmentProvider:
    """Reads locale variables from the process environment.

    Two schemes are consulted: one for the single current locale and one
    for the full preference list.

    Args:
        environ: Read-only variable lookup. Defaults to ``os.environ``,
            read at query time rather than at construction.
        best_scheme: Variables for get_locale() (default: LC_ALL > LC_CTYPE > LANG).
        list_scheme: Variables for get_locales()
            (default: LANGUAGE > LC_ALL > LC_MESSAGES > LANG).

    Example:
        >>> from syslocale.resolver import resolve_all
        >>> env = {"LANGUAGE": "en_US:ru_RU", "LC_ALL": "ru_RU", "LANG": "en_US"}
        >>> resolve_all(EnvironmentProvider(env).sources())
        ['en-US', 'ru-RU']
    """

    name = "environ"

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        *,
        best_scheme: EnvScheme = SIMPLE_SCHEME,
        list_scheme: EnvScheme = EXTENDED_SCHEME,
    ) -> None:
        self._environ = environ
        self.best_scheme = best_scheme
        self.list_scheme = list_scheme

    def __repr__(self) -> str:
        return (
            f"EnvironmentProvider(best_scheme={self.best_scheme.name!r}, "
            f"list_scheme={self.list_scheme.name!r})"
        )

    @property
    def environ(self) -> Mapping[str, str]:
        """The mapping consulted by this provider."""
        return os.environ if self._environ is None else self._environ

    def _source(self, spec: EnvVarSpec) -> Source:
        return Source.of(spec.name, read_env_var(self.environ, spec.name), spec.delimiter)

    def sources(self) -> list[Source]:
        return [self._source(spec) for spec in self.list_scheme.variables]

    def best_sources(self) -> list[Source]:
        return [self._source(spec) for spec in self.best_scheme.variables]
