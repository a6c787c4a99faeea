"""Reader layer: splits SDP text into validated (type, content) lines."""

from __future__ import annotations

import re
from typing import Iterator

_VALID_LINE_RE = re.compile(r"^([a-z])=(.*)")


def split_lines(sdp: str) -> Iterator[str]:
    """Yield raw lines of *sdp*, split on LF, with one trailing CR removed."""
    for line in sdp.split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        yield line


def read_line(line: str) -> tuple[str, str] | None:
    """Return ``(type, content)`` for a ``x=...`` line, or None if malformed."""
    m = _VALID_LINE_RE.match(line)
    if m is None:
        return None
    return m.group(1), m.group(2)
