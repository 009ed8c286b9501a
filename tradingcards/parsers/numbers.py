"""
Strict number parsing for definition files.

Python's int() and float() also accept digit separators ("1_000") and
non-finite values ("inf", "nan"). Definition files only allow plain
decimal numbers, so those raise ValueError here.
"""

import math


def parse_int(text: str) -> int:
    """Parse a plain integer such as "001" or "-5"."""
    if "_" in text:
        raise ValueError(f"invalid integer: {text!r}")
    return int(text)


def parse_float(text: str) -> float:
    """Parse a finite decimal such as "0.01" or "1e-3"."""
    if "_" in text:
        raise ValueError(f"invalid number: {text!r}")

    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"non-finite number: {text!r}")
    return value
