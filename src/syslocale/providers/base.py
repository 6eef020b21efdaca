"""Provider protocol and the no-op provider.

A provider is the platform-specific half of locale detection: it reports
named sources with their current raw values and leaves normalization,
precedence and deduplication to the resolver.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from syslocale.resolver import Source

__all__ = ["LocaleProvider", "NullProvider"]


# pylint: disable=unnecessary-ellipsis
@runtime_checkable
class LocaleProvider(Protocol):
    """Uniform capability implemented by every platform provider.

    Implementations must be synchronous and side-effect-free. A source
    that cannot be read (missing variable, failed native call, decode
    error) is reported with no values instead of raising.

    Attributes:
        name: Short provider identifier used in logs and errors.
    """

    name: str

    def sources(self) -> list[Source]:
        """Return the provider's sources in precedence order."""
        ...

    def best_sources(self) -> list[Source]:
        """Return the sources consulted when a single locale is wanted."""
        ...
# pylint: enable=unnecessary-ellipsis


class NullProvider:
    """Provider for platforms with no known locale source."""

    name = "null"

    def sources(self) -> list[Source]:
        return []

    def best_sources(self) -> list[Source]:
        return []
