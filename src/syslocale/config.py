"""Environment precedence schemes.

Describes which environment variables are consulted, in which order, and
whether a variable holds a single locale or a delimited preference list.
Schemes are immutable so the module-level instances can be shared freely.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from syslocale.constants import (
    ENV_LANG,
    ENV_LANGUAGE,
    ENV_LC_ALL,
    ENV_LC_CTYPE,
    ENV_LC_MESSAGES,
    LANGUAGE_LIST_DELIMITER,
)

__all__ = [
    "EXTENDED_SCHEME",
    "SIMPLE_SCHEME",
    "EnvScheme",
    "EnvVarSpec",
]


@dataclass(frozen=True, slots=True)
class EnvVarSpec:
    """One environment variable consulted as a locale source.

    Attributes:
        name: Variable name (e.g., "LANG").
        delimiter: Separator for multi-valued variables, or None when the
            variable holds at most one locale.
    """

    name: str
    delimiter: str | None = None

    def __post_init__(self) -> None:
        """Validate the variable entry at construction time.

        Raises:
            ValueError: If name is empty or delimiter is an empty string.
        """
        if not self.name:
            msg = "environment variable name must be non-empty"
            raise ValueError(msg)
        if self.delimiter == "":
            msg = "delimiter must be None or a non-empty string"
            raise ValueError(msg)

    @property
    def multi_valued(self) -> bool:
        """True if the variable holds a delimited preference list."""
        return self.delimiter is not None


@dataclass(frozen=True, slots=True)
class EnvScheme:
    """Ordered environment variables, highest precedence first.

    Example:
        >>> scheme = EnvScheme("custom", (EnvVarSpec("APP_LANG"), EnvVarSpec("LANG")))
        >>> scheme.names
        ('APP_LANG', 'LANG')
    """

    name: str
    variables: tuple[EnvVarSpec, ...]

    def __post_init__(self) -> None:
        """Validate the scheme at construction time.

        Raises:
            ValueError: If the scheme has no variables or repeats a name.
        """
        if not self.variables:
            msg = f"scheme {self.name!r} must list at least one variable"
            raise ValueError(msg)
        names = [spec.name for spec in self.variables]
        if len(set(names)) != len(names):
            msg = f"scheme {self.name!r} lists a variable more than once"
            raise ValueError(msg)

    @property
    def names(self) -> tuple[str, ...]:
        """Variable names in precedence order."""
        return tuple(spec.name for spec in self.variables)


# Single-valued lookup used to answer "what is the locale".
SIMPLE_SCHEME = EnvScheme(
    "simple",
    (
        EnvVarSpec(ENV_LC_ALL),
        EnvVarSpec(ENV_LC_CTYPE),
        EnvVarSpec(ENV_LANG),
    ),
)

# Full preference list, LANGUAGE first as gettext does.
EXTENDED_SCHEME = EnvScheme(
    "extended",
    (
        EnvVarSpec(ENV_LANGUAGE, delimiter=LANGUAGE_LIST_DELIMITER),
        EnvVarSpec(ENV_LC_ALL),
        EnvVarSpec(ENV_LC_MESSAGES),
        EnvVarSpec(ENV_LANG),
    ),
)
