"""Tests for the native-API providers.

Native libraries are replaced by fakes that follow the same calling
conventions (ctypes buffers, size out-parameters, CoreFoundation handles),
so the buffer protocols run on every platform.
"""

from __future__ import annotations

import ctypes
import subprocess
from typing import Any
from unittest.mock import patch

from syslocale.providers import (
    AndroidProvider,
    AppleProvider,
    BrowserProvider,
    LocaleProvider,
    NullProvider,
    WindowsProvider,
)
from syslocale.providers.android import getprop
from syslocale.providers.apple import copy_preferred_languages
from syslocale.providers.browser import navigator_languages
from syslocale.providers.windows import (
    get_user_default_locale_name,
    get_user_preferred_ui_languages,
)
from syslocale.resolver import resolve_all, resolve_best

# =============================================================================
# WINDOWS
# =============================================================================


class FakeKernel32:
    """kernel32 stand-in implementing the two NLS/MUI calls."""

    def __init__(self, default_name: str = "", ui_languages: list[str] | None = None) -> None:
        self.default_name = default_name
        self.ui_languages = ui_languages or []
        self.ui_calls = 0

    def GetUserDefaultLocaleName(self, buffer: Any, size: int) -> int:  # noqa: N802
        if not self.default_name or len(self.default_name) + 1 > size:
            return 0
        buffer.value = self.default_name
        return len(self.default_name) + 1

    def GetUserPreferredUILanguages(  # noqa: N802
        self, flags: int, count_ref: Any, buffer: Any, size_ref: Any
    ) -> bool:
        self.ui_calls += 1
        multi = "".join(f"{name}\0" for name in self.ui_languages) + "\0"
        count_ref._obj.value = len(self.ui_languages)
        if buffer is None:
            size_ref._obj.value = len(multi)
            return True
        if size_ref._obj.value < len(multi):
            return False
        source = (ctypes.c_wchar * len(multi))(*multi)
        ctypes.memmove(buffer, source, ctypes.sizeof(source))
        return True


class FailingKernel32:
    """kernel32 stand-in whose calls raise OSError."""

    def GetUserDefaultLocaleName(self, buffer: Any, size: int) -> int:  # noqa: N802
        raise OSError("access violation")

    def GetUserPreferredUILanguages(self, *args: Any) -> bool:  # noqa: N802
        raise OSError("access violation")


class TestWindowsQueries:
    """Test the kernel32 wrappers."""

    def test_default_locale_name(self) -> None:
        """Name returned without the terminating NUL."""
        assert get_user_default_locale_name(FakeKernel32("en-US")) == "en-US"

    def test_default_locale_name_failure(self) -> None:
        """Zero length means no locale."""
        assert get_user_default_locale_name(FakeKernel32("")) is None

    def test_default_locale_name_oserror(self) -> None:
        """OSError from the call means no locale."""
        assert get_user_default_locale_name(FailingKernel32()) is None

    def test_preferred_ui_languages_two_phase(self) -> None:
        """Size query then fill; multi-string split in order."""
        kernel32 = FakeKernel32(ui_languages=["de-DE", "en-US", "fr-FR"])
        assert get_user_preferred_ui_languages(kernel32) == ["de-DE", "en-US", "fr-FR"]
        assert kernel32.ui_calls == 2

    def test_preferred_ui_languages_empty(self) -> None:
        """Empty list yields []."""
        assert get_user_preferred_ui_languages(FakeKernel32()) == []

    def test_preferred_ui_languages_oserror(self) -> None:
        """OSError yields []."""
        assert get_user_preferred_ui_languages(FailingKernel32()) == []

    def test_no_kernel32_off_windows(self) -> None:
        """Without kernel32 both queries report nothing."""
        with patch("syslocale.providers.windows._load_kernel32", return_value=None):
            assert get_user_default_locale_name() is None
            assert get_user_preferred_ui_languages() == []


class TestWindowsProvider:
    """Test WindowsProvider source ordering."""

    def test_best_is_default_locale_name(self) -> None:
        """Single locale comes from GetUserDefaultLocaleName only."""
        provider = WindowsProvider(lambda: "en-GB", lambda: ["de-DE"])
        assert resolve_best(provider.best_sources()) == "en-GB"

    def test_list_puts_ui_languages_first(self) -> None:
        """UI languages precede the default locale; duplicates dropped."""
        provider = WindowsProvider(lambda: "en-GB", lambda: ["de-DE", "en-GB"])
        assert resolve_all(provider.sources()) == ["de-DE", "en-GB"]

    def test_nothing_available(self) -> None:
        """Failed queries resolve to nothing."""
        provider = WindowsProvider(lambda: None, lambda: [])
        assert resolve_best(provider.best_sources()) is None
        assert resolve_all(provider.sources()) == []

    def test_satisfies_protocol(self) -> None:
        """WindowsProvider is a LocaleProvider."""
        assert isinstance(WindowsProvider(lambda: None, lambda: []), LocaleProvider)


# =============================================================================
# APPLE
# =============================================================================


class FakeCoreFoundation:
    """CoreFoundation stand-in with integer handles for arrays and strings."""

    ARRAY = 1

    def __init__(self, languages: list[bytes] | None) -> None:
        self.languages = languages
        self.released: list[int] = []

    def CFLocaleCopyPreferredLanguages(self) -> int | None:  # noqa: N802
        return None if self.languages is None else self.ARRAY

    def CFArrayGetCount(self, array: int) -> int:  # noqa: N802
        return len(self.languages or [])

    def CFArrayGetValueAtIndex(self, array: int, index: int) -> int:  # noqa: N802
        return 100 + index

    def _bytes(self, handle: int) -> bytes:
        assert self.languages is not None
        return self.languages[handle - 100]

    def CFStringGetLength(self, handle: int) -> int:  # noqa: N802
        return len(self._bytes(handle))

    def CFStringGetMaximumSizeForEncoding(self, length: int, encoding: int) -> int:  # noqa: N802
        return length * 4

    def CFStringGetCString(self, handle: int, buffer: Any, size: int, encoding: int) -> bool:  # noqa: N802
        data = self._bytes(handle)
        if len(data) + 1 > size:
            return False
        buffer.value = data
        return True

    def CFRelease(self, handle: int) -> None:  # noqa: N802
        self.released.append(handle)


class TestAppleQueries:
    """Test the CoreFoundation wrapper."""

    def test_preferred_languages(self) -> None:
        """Languages returned in order and the array released."""
        cf = FakeCoreFoundation([b"en-US", b"fr-FR"])
        assert copy_preferred_languages(cf) == ["en-US", "fr-FR"]
        assert cf.released == [FakeCoreFoundation.ARRAY]

    def test_null_array(self) -> None:
        """NULL array yields [] and nothing is released."""
        cf = FakeCoreFoundation(None)
        assert copy_preferred_languages(cf) == []
        assert cf.released == []

    def test_undecodable_entry_skipped(self) -> None:
        """Entries that are not UTF-8 are skipped."""
        cf = FakeCoreFoundation([b"\xff\xfe", b"de-DE"])
        assert copy_preferred_languages(cf) == ["de-DE"]
        assert cf.released == [FakeCoreFoundation.ARRAY]

    def test_no_core_foundation(self) -> None:
        """Without CoreFoundation the query reports nothing."""
        with patch("syslocale.providers.apple._load_core_foundation", return_value=None):
            assert copy_preferred_languages() == []


class TestAppleProvider:
    """Test AppleProvider source shapes."""

    def test_best_is_first_preferred(self) -> None:
        """Single locale is the first preferred language."""
        provider = AppleProvider(lambda: ["en-GB", "fr-FR"])
        assert resolve_best(provider.best_sources()) == "en-GB"

    def test_list(self) -> None:
        """Preference list keeps order and drops repeats."""
        provider = AppleProvider(lambda: ["en-GB", "fr-FR", "en-GB"])
        assert resolve_all(provider.sources()) == ["en-GB", "fr-FR"]

    def test_empty(self) -> None:
        """No preferred languages resolves to nothing."""
        provider = AppleProvider(list)
        assert resolve_best(provider.best_sources()) is None
        assert resolve_all(provider.sources()) == []


# =============================================================================
# ANDROID
# =============================================================================


class TestGetprop:
    """Test the getprop wrapper."""

    def test_missing_executable(self) -> None:
        """No getprop on PATH yields None."""
        with patch("syslocale.providers.android.shutil.which", return_value=None):
            assert getprop("persist.sys.locale") is None

    def test_value(self) -> None:
        """Stripped stdout returned."""
        completed = subprocess.CompletedProcess(["getprop"], 0, stdout="en-US\n", stderr="")
        with (
            patch("syslocale.providers.android.shutil.which", return_value="/system/bin/getprop"),
            patch("syslocale.providers.android.subprocess.run", return_value=completed),
        ):
            assert getprop("persist.sys.locale") == "en-US"

    def test_unset_property(self) -> None:
        """Blank output yields None."""
        completed = subprocess.CompletedProcess(["getprop"], 0, stdout="\n", stderr="")
        with (
            patch("syslocale.providers.android.shutil.which", return_value="/system/bin/getprop"),
            patch("syslocale.providers.android.subprocess.run", return_value=completed),
        ):
            assert getprop("persist.sys.locale") is None

    def test_failure(self) -> None:
        """Subprocess failure yields None."""
        with (
            patch("syslocale.providers.android.shutil.which", return_value="/system/bin/getprop"),
            patch(
                "syslocale.providers.android.subprocess.run",
                side_effect=subprocess.TimeoutExpired("getprop", 2.0),
            ),
        ):
            assert getprop("persist.sys.locale") is None


class TestAndroidProvider:
    """Test AndroidProvider precedence."""

    def test_user_choice_wins(self) -> None:
        """persist.sys.locale overrides ro.product.locale."""
        props = {"persist.sys.locale": "lv-LV", "ro.product.locale": "en-US"}
        provider = AndroidProvider(props.get)
        assert resolve_best(provider.best_sources()) == "lv-LV"
        assert resolve_all(provider.sources()) == ["lv-LV", "en-US"]

    def test_factory_default(self) -> None:
        """ro.product.locale used when the user has not chosen."""
        provider = AndroidProvider({"ro.product.locale": "en-US"}.get)
        assert resolve_best(provider.best_sources()) == "en-US"


# =============================================================================
# BROWSER
# =============================================================================


class FakeNavigator:
    def __init__(self, languages: list[str], language: str | None) -> None:
        self.languages = languages
        self.language = language


class TestBrowserProvider:
    """Test BrowserProvider and the navigator query."""

    def test_navigator_languages(self) -> None:
        """Both navigator properties read."""
        navigator = FakeNavigator(["de-DE", "en"], "de-DE")
        assert navigator_languages(navigator) == (["de-DE", "en"], "de-DE")

    def test_no_js_module(self) -> None:
        """Outside Pyodide there is no js module and nothing is reported."""
        with patch("syslocale.providers.browser._navigator", return_value=None):
            assert navigator_languages() == ([], None)

    def test_best_is_navigator_language(self) -> None:
        """Single locale is navigator.language."""
        provider = BrowserProvider(lambda: (["fr-FR", "en-US"], "en-US"))
        assert resolve_best(provider.best_sources()) == "en-US"

    def test_list(self) -> None:
        """navigator.languages first, navigator.language deduplicated."""
        provider = BrowserProvider(lambda: (["fr-FR", "en-US"], "en-US"))
        assert resolve_all(provider.sources()) == ["fr-FR", "en-US"]


# =============================================================================
# NULL
# =============================================================================


class TestNullProvider:
    """Test NullProvider."""

    def test_no_sources(self) -> None:
        """Resolves to nothing."""
        provider = NullProvider()
        assert resolve_best(provider.best_sources()) is None
        assert resolve_all(provider.sources()) == []
        assert isinstance(provider, LocaleProvider)
