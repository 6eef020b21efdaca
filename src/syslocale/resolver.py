"""Locale resolution over ordered sources.

Sources are consulted strictly in precedence order (highest first). Two
contracts are offered:

- resolve_best: the normalized form of the first non-empty value, or None.
  Values that normalize to an empty tag (".UTF-8") count as empty.
- resolve_all: every non-empty value, normalized and deduplicated, in the
  order each tag was first seen.

Deduplication is exact and case-sensitive: "EN-US" and "en-US" are
distinct tags. Callers needing case-insensitive comparison fold themselves.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from syslocale.locale_utils import LocaleTag, normalize_locale

__all__ = [
    "RawValues",
    "Source",
    "SourceLike",
    "resolve_all",
    "resolve_best",
    "split_source_value",
]

logger = logging.getLogger(__name__)

type RawValues = str | Sequence[str] | None
"""What a source reports: nothing, one raw string, or an ordered sequence."""


@dataclass(frozen=True, slots=True)
class Source:
    """A named source and the raw locale strings it currently reports.

    Attributes:
        name: Identifier used in log messages (e.g., "LANG").
        values: Raw strings in the order the source reported them.
        delimiter: If set, each value is a delimited list that is split
            into sub-values before normalization (e.g., ":" for LANGUAGE).
    """

    name: str
    values: tuple[str, ...] = ()
    delimiter: str | None = None

    @classmethod
    def of(cls, name: str, values: RawValues, delimiter: str | None = None) -> Source:
        """Build a Source from a single optional string or a sequence.

        Example:
            >>> Source.of("LANG", "de_DE.UTF-8")
            Source(name='LANG', values=('de_DE.UTF-8',), delimiter=None)
            >>> Source.of("LC_ALL", None).values
            ()
        """
        if values is None:
            return cls(name, (), delimiter)
        if isinstance(values, str):
            return cls(name, (values,), delimiter)
        return cls(name, tuple(values), delimiter)

    def candidates(self) -> Iterator[str]:
        """Yield non-empty raw sub-values in source order."""
        for value in self.values:
            parts = (
                split_source_value(value, self.delimiter)
                if self.delimiter is not None
                else (value,)
            )
            for part in parts:
                if part:
                    yield part


type SourceLike = Source | tuple[str, RawValues]
"""Accepted by the resolvers: a Source or a plain (name, values) pair."""


def split_source_value(value: str, delimiter: str) -> list[str]:
    """Split a delimited preference list, preserving order and empty items.

    Example:
        >>> split_source_value("en_US::ru_RU", ":")
        ['en_US', '', 'ru_RU']
    """
    return value.split(delimiter)


def _as_source(source: SourceLike) -> Source:
    if isinstance(source, Source):
        return source
    name, values = source
    return Source.of(name, values)


def _iter_tags(sources: Iterable[SourceLike]) -> Iterator[tuple[str, str, LocaleTag]]:
    for source in map(_as_source, sources):
        produced = False
        for raw in source.candidates():
            tag = normalize_locale(raw)
            # A bare suffix such as ".UTF-8" carries no language at all.
            if not tag:
                logger.debug("Ignoring '%s' from %s: no language before suffix", raw, source.name)
                continue
            produced = True
            yield source.name, raw, tag
        if not produced:
            logger.debug("Locale source %s is empty", source.name)


def resolve_best(sources: Iterable[SourceLike]) -> LocaleTag | None:
    """Return the canonical form of the first non-empty source value.

    Sources are consulted lazily, so lower-precedence sources are never
    queried once a value has been found when ``sources`` is a generator.

    Args:
        sources: Sources in precedence order, highest first.

    Returns:
        Canonical tag, or None if every source is absent or empty.

    Example:
        >>> resolve_best([("LC_ALL", None), ("LC_CTYPE", ""), ("LANG", "fr_FR.UTF-8")])
        'fr-FR'
    """
    for name, raw, tag in _iter_tags(sources):
        logger.debug("Resolved locale '%s' from %s (raw: '%s')", tag, name, raw)
        return tag
    return None


def resolve_all(sources: Iterable[SourceLike]) -> list[LocaleTag]:
    """Return every canonical tag the sources produce, without duplicates.

    A tag keeps the position at which it was first produced; later
    sightings from the same or lower-precedence sources are ignored.

    Args:
        sources: Sources in precedence order, highest first.

    Returns:
        Ordered list of canonical tags; empty if nothing was found.

    Example:
        >>> resolve_all([
        ...     Source.of("LANGUAGE", "en_US:ru_RU", delimiter=":"),
        ...     ("LC_ALL", "ru_RU"),
        ...     ("LANG", "en_US"),
        ... ])
        ['en-US', 'ru-RU']
    """
    resolved: list[LocaleTag] = []
    seen: set[LocaleTag] = set()
    for name, _raw, tag in _iter_tags(sources):
        if tag in seen:
            logger.debug("Skipping duplicate locale '%s' from %s", tag, name)
            continue
        seen.add(tag)
        resolved.append(tag)
    logger.debug("Resolved locale preference list: %s", resolved)
    return resolved
