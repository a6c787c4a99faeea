"""Exceptions for SDP Core."""

from __future__ import annotations


class SDPCoreError(Exception):
    """Raised by helper parsers when a value cannot be interpreted.

    ``parse()`` itself never raises on malformed input.
    """
