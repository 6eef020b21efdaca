"""syslocale exception hierarchy.

Resolution itself never raises: every source failure collapses to "no
value". These exceptions exist for the opt-in strict entry points.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "BabelImportError",
    "LocaleNotFoundError",
    "SysLocaleError",
]


class SysLocaleError(Exception):
    """Base exception for all syslocale errors."""


class LocaleNotFoundError(SysLocaleError, LookupError):
    """No source produced a locale.

    Raised by require_locale() only; get_locale() returns None instead.

    Attributes:
        provider: Name of the provider that was consulted
    """

    def __init__(self, provider: str) -> None:
        """Initialize LocaleNotFoundError.

        Args:
            provider: Name of the provider that was consulted
        """
        msg = f"Could not determine the locale (provider: {provider})."
        if provider == "environ":
            msg += " Set LC_ALL, LC_CTYPE, or LANG environment variable."
        super().__init__(msg)
        self.provider = provider


class BabelImportError(SysLocaleError, ImportError):
    """Raised when Babel is required but not installed."""

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for CLDR locale data. "
            "Install with: pip install syslocale[babel]"
        )
        super().__init__(message)
        self.feature = feature
