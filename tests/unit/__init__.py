"""Unit tests.

The package has no I/O, so every test here is fast and deterministic apart
from hypothesis-generated inputs.
"""
