"""Scalar values produced by SDP Core."""

from __future__ import annotations

import re
from typing import Any, Union

# Largest value a signed 64-bit integer can hold.
INT64_MAX = 2**63 - 1

_INT64_MAX_TEXT = str(INT64_MAX)
_DIGITS_RE = re.compile(r"[0-9]+")

Scalar = Union[int, str]
Section = dict[str, Any]


def is_number(s: str) -> bool:
    """True if *s* is one or more ASCII digits and nothing else."""
    return _DIGITS_RE.fullmatch(s) is not None


def _fits_int64(digits: str) -> bool:
    # Compared as text so oversized inputs never reach int().
    significant = digits.lstrip("0")
    if len(significant) != len(_INT64_MAX_TEXT):
        return len(significant) < len(_INT64_MAX_TEXT)
    return significant <= _INT64_MAX_TEXT


def to_int_if_int(s: str) -> Scalar:
    """Convert a digit-only string to ``int``; anything else is returned as is.

    Digit strings beyond the signed 64-bit range fall back to the string.
    """
    if not is_number(s) or not _fits_int64(s):
        return s
    return int(s)
