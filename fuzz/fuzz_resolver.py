#!/usr/bin/env python3
# FUZZ_PLUGIN_HEADER_START
# FUZZ_PLUGIN: resolver - Locale Normalization & Environment Resolution
# Intentional: This header is intentionally placed for dynamic plugin discovery.
# FUZZ_PLUGIN_HEADER_END
"""Locale Resolver Fuzzer (Atheris).

Targets: syslocale.locale_utils and syslocale.resolver
Feeds arbitrary raw identifiers and environments through normalization
and both resolution contracts, checking their invariants.
"""

from __future__ import annotations

import atexit
import json
import logging
import sys

# --- PEP 695 Type Aliases ---
type FuzzStats = dict[str, int | str]

_fuzz_stats: FuzzStats = {"status": "incomplete", "iterations": 0, "findings": 0}

_VARIABLES = ("LANGUAGE", "LC_ALL", "LC_CTYPE", "LC_MESSAGES", "LANG")


def _emit_final_report() -> None:
    report = json.dumps(_fuzz_stats)
    print(f"\n[SUMMARY-JSON-BEGIN]{report}[SUMMARY-JSON-END]", file=sys.stderr)


atexit.register(_emit_final_report)

try:
    import atheris
except ImportError:
    sys.exit(1)

logging.getLogger("syslocale").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["syslocale"]):
    from syslocale.locale_utils import is_canonical, normalize_locale
    from syslocale.providers import EnvironmentProvider
    from syslocale.resolver import resolve_all, resolve_best


def test_one_input(data: bytes) -> None:
    """Atheris entry point: normalization and resolution invariants."""
    _fuzz_stats["iterations"] = int(_fuzz_stats["iterations"]) + 1
    _fuzz_stats["status"] = "running"

    fdp = atheris.FuzzedDataProvider(data)

    try:
        # 1. Normalization is a total projection
        raw_locale = fdp.ConsumeUnicodeNoSurrogates(40)
        norm = normalize_locale(raw_locale)
        assert normalize_locale(norm) == norm
        assert is_canonical(norm)

        # 2. Resolution over a random environment
        env = {
            name: fdp.ConsumeUnicodeNoSurrogates(20)
            for name in _VARIABLES
            if fdp.ConsumeBool()
        }
        provider = EnvironmentProvider(env)
        tags = resolve_all(provider.sources())
        assert len(tags) == len(set(tags))
        assert "" not in tags

        best = resolve_best(provider.best_sources())
        assert best is None or best != ""

    except Exception:
        _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
        raise


if __name__ == "__main__":
    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()
