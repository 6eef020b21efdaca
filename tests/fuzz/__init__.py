"""Fuzz testing for syslocale.

This package contains:
- test_resolver_property: Reference-model checks of resolution over
  arbitrary environments (pytest -m fuzz)

Python 3.13+.
"""
