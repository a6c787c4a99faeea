"""Helpers for attribute values the grammar keeps as raw text.

These take strings already extracted by ``parse()`` (``fmtp`` config,
``m=`` payload lists, ``imageattr`` sets, ``simulcast`` lists) and break
them down further.
"""

from __future__ import annotations

import re
from typing import Any, Union

from .errors import SDPCoreError
from .values import is_number

_KEY_VALUE_RE = re.compile(r"^\s*([^= ]+)(?:\s*=\s*([^ ]+))?$")
_FLOAT_RE = re.compile(r"[0-9]*\.[0-9]+")

# Parameters whose values are never guessed from their text.
_WELL_KNOWN_PARAMS: dict[str, str] = {
    # H264
    "profile-level-id": "s",
    "packetization-mode": "d",
    # VP9
    "profile-id": "s",
}

ParamValue = Union[int, float, str, None]


# ---------------------------------------------------------------------------
# key=value parameters
# ---------------------------------------------------------------------------

def _param_value(key: str, raw: str | None) -> ParamValue:
    if raw is None:
        return None
    kind = _WELL_KNOWN_PARAMS.get(key)
    if kind is None:
        if is_number(raw):
            kind = "d"
        elif _FLOAT_RE.fullmatch(raw):
            kind = "f"
        else:
            kind = "s"
    try:
        if kind == "d":
            return int(raw)
        if kind == "f":
            return float(raw)
    except ValueError:
        pass
    return raw


def _insert_param(params: dict[str, ParamValue], text: str) -> None:
    m = _KEY_VALUE_RE.match(text)
    if m is None:
        return
    key, raw = m.group(1), m.group(2)
    params[key] = _param_value(key, raw)


def parse_params(text: str) -> dict[str, ParamValue]:
    """Parse ``a=1;b=two;c`` style parameters (e.g. an fmtp config).

    >>> parse_params("profile-level-id=42e01f;packetization-mode=1")
    {'profile-level-id': '42e01f', 'packetization-mode': 1}
    """
    params: dict[str, ParamValue] = {}
    for piece in text.split(";"):
        piece = piece.strip()
        if not piece:
            continue
        _insert_param(params, piece)
    return params


# ---------------------------------------------------------------------------
# Payload lists
# ---------------------------------------------------------------------------

def parse_payloads(text: str | int) -> list[int]:
    """Parse an ``m=`` payload list such as ``"111 103 104"``.

    A single payload is coerced to ``int`` by ``parse()``; that is accepted too.
    """
    if isinstance(text, int):
        return [text]
    payloads: list[int] = []
    for token in text.split():
        try:
            payloads.append(int(token))
        except ValueError as exc:
            raise SDPCoreError(f"invalid payload type {token!r}") from exc
    return payloads


# ---------------------------------------------------------------------------
# imageattr / simulcast
# ---------------------------------------------------------------------------

def parse_image_attributes(text: str) -> list[Any]:
    """Parse an imageattr set like ``[x=1280,y=720] [x=320,y=180]``.

    A ``*`` (any resolution) stays the string ``"*"``.
    """
    items: list[Any] = []
    for item in text.split():
        if not (item.startswith("[") and item.endswith("]")):
            items.append(item)
            continue
        attrs: dict[str, ParamValue] = {}
        for piece in item[1:-1].split(","):
            if piece:
                _insert_param(attrs, piece)
        items.append(attrs)
    return items


def parse_simulcast_stream_list(text: str) -> list[list[dict[str, Any]]]:
    """Parse a simulcast list such as ``1,~4;2;3``.

    Each ``;`` separated stream is a list of ``{"scid", "paused"}`` formats;
    a leading ``~`` marks a paused format.
    """
    streams: list[list[dict[str, Any]]] = []
    for stream in text.split(";"):
        if not stream:
            continue
        formats: list[dict[str, Any]] = []
        for fmt in stream.split(","):
            if not fmt:
                continue
            if fmt.startswith("~"):
                formats.append({"scid": fmt[1:], "paused": True})
            else:
                formats.append({"scid": fmt, "paused": False})
        streams.append(formats)
    return streams
