"""Quickstart example for syslocale.

Shows the zero-argument queries, then the same resolution driven by an
explicit environment mapping so the output does not depend on this machine.
"""

import logging

from syslocale import get_locale, get_locale_or_default, get_locales, normalize_locale
from syslocale.providers import EnvironmentProvider

# Example 1: This process
print("=" * 50)
print("Example 1: This Process")
print("=" * 50)

print(f"get_locale():            {get_locale()}")
print(f"get_locales():           {get_locales()}")
print(f"get_locale_or_default(): {get_locale_or_default()}")

# Example 2: Normalization
print("\n" + "=" * 50)
print("Example 2: Normalization")
print("=" * 50)

for raw in ("fr_FR.UTF-8", "fr_FR@euro", "fr_FR.UTF-8@euro", "fr-FR", "EN_US"):
    print(f"{raw!r:22} -> {normalize_locale(raw)!r}")
# Output: every fr variant becomes 'fr-FR'; 'EN_US' becomes 'EN-US'

# Example 3: Precedence and deduplication
print("\n" + "=" * 50)
print("Example 3: Precedence and Deduplication")
print("=" * 50)

env = {"LANGUAGE": "en_US:ru_RU", "LC_ALL": "ru_RU", "LANG": "en_US"}
provider = EnvironmentProvider(env)
print(f"environment: {env}")
print(f"get_locale:  {get_locale(provider=provider)}")
# Output: ru-RU (LC_ALL wins the single-locale lookup)
print(f"get_locales: {get_locales(provider=provider)}")
# Output: ['en-US', 'ru-RU']

# Example 4: Seeing which source won
print("\n" + "=" * 50)
print("Example 4: Debug Logging")
print("=" * 50)

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
get_locale(provider=EnvironmentProvider({"LC_CTYPE": "", "LANG": "de_DE.UTF-8"}))

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
