"""Grammar table: ordered rules per SDP line type."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Sequence


_DEFAULT_REG = re.compile(r"(.*)", re.ASCII)


# ---------------------------------------------------------------------------
# Rule / Grammar
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Rule:
    """One candidate pattern for a line type.

    - ``name`` only: the first capture is stored as a scalar at ``name``.
    - ``names``: one key per capture group, written into ``name`` (a nested
      dict) when ``name`` is also set, else into the scope itself.
    - ``push``: every match appends a fresh dict to the list at ``push``.
    """

    name: str = ""
    push: str = ""
    reg: re.Pattern[str] = _DEFAULT_REG
    names: tuple[str, ...] = ()


def rule(
    name: str = "",
    reg: str | None = None,
    names: Sequence[str] = (),
    push: str = "",
) -> Rule:
    """Build a Rule, compiling *reg* with ASCII semantics."""
    pattern = _DEFAULT_REG if reg is None else re.compile(reg, re.ASCII)
    return Rule(name=name, push=push, reg=pattern, names=tuple(names))


@dataclass(frozen=True, slots=True)
class Grammar:
    """Read-only rule table plus the media section settings."""

    rules: Mapping[str, tuple[Rule, ...]] = field(default_factory=dict)
    media_type: str = "m"
    media_key: str = "media"
    media_placeholders: tuple[str, ...] = ("rtp", "fmtp")

    def __post_init__(self) -> None:
        frozen = {letter: tuple(rs) for letter, rs in self.rules.items()}
        object.__setattr__(self, "rules", MappingProxyType(frozen))
        object.__setattr__(self, "media_placeholders", tuple(self.media_placeholders))

    def lookup(self, letter: str) -> tuple[Rule, ...]:
        """Rules registered for *letter*, in order; ``()`` if none."""
        return self.rules.get(letter, ())


# ---------------------------------------------------------------------------
# Reference SDP grammar
# ---------------------------------------------------------------------------

_IMAGEATTR_SET = r"(\*|\[\S+\](?:[\s\t]+\[\S+\])*)"

_SDP_RULES: dict[str, list[Rule]] = {
    "v": [rule(name="version", reg=r"^(\d*)$")],
    "o": [
        # o=- 20518 0 IN IP4 203.0.113.1
        rule(
            name="origin",
            reg=r"^(\S*) (\d*) (\d*) (\S*) IP(\d) (\S*)",
            names=["username", "sessionId", "sessionVersion", "netType", "ipVer", "address"],
        ),
    ],
    "s": [rule(name="name")],
    "i": [rule(name="description")],
    "u": [rule(name="uri")],
    "e": [rule(name="email")],
    "p": [rule(name="phone")],
    "z": [rule(name="timezones")],
    "r": [rule(name="repeats")],
    "t": [rule(name="timing", reg=r"^(\d*) (\d*)", names=["start", "stop"])],
    "c": [rule(name="connection", reg=r"^IN IP(\d) (\S*)", names=["version", "ip"])],
    "b": [
        rule(push="bandwidth", reg=r"^(TIAS|AS|CT|RR|RS):(\d*)", names=["type", "limit"]),
    ],
    "m": [
        # m=video 51744 RTP/AVP 126 97 98 34 31
        rule(
            reg=r"^(\w*) (\d*) ([\w/]*)(?: (.*))?",
            names=["type", "port", "protocol", "payloads"],
        ),
    ],
    "a": [
        rule(
            push="rtp",
            reg=r"^rtpmap:(\d*) ([\w\-.]*)(?:\s*/(\d*)(?:\s*/(\S*))?)?",
            names=["payload", "codec", "rate", "encoding"],
        ),
        # a=fmtp:108 profile-level-id=24;object=23;bitrate=64000
        rule(push="fmtp", reg=r"^fmtp:(\d*) ([\S| ]*)", names=["payload", "config"]),
        rule(name="control", reg=r"^control:(.*)"),
        # a=rtcp:65179 IN IP4 193.84.77.194
        rule(
            name="rtcp",
            reg=r"^rtcp:(\d*)(?: (\S*) IP(\d) (\S*))?",
            names=["port", "netType", "ipVer", "address"],
        ),
        rule(push="rtcpFbTrrInt", reg=r"^rtcp-fb:(\*|\d*) trr-int (\d*)", names=["payload", "value"]),
        rule(
            push="rtcpFb",
            reg=r"^rtcp-fb:(\*|\d*) ([\w\-_]*)(?: ([\w\-_]*))?",
            names=["payload", "type", "subtype"],
        ),
        # a=extmap:2/sendonly urn:ietf:params:rtp-hdrext:toffset
        rule(
            push="ext",
            reg=r"^extmap:(\d+)(?:/(\w+))?(?: (urn:ietf:params:rtp-hdrext:encrypt))? (\S*)(?: (\S*))?",
            names=["value", "direction", "encrypt-uri", "uri", "config"],
        ),
        rule(name="extmapAllowMixed", reg=r"^(extmap-allow-mixed)"),
        rule(
            push="crypto",
            reg=r"^crypto:(\d*) ([\w_]*) (\S*)(?: (\S*))?",
            names=["id", "suite", "config", "sessionConfig"],
        ),
        rule(name="setup", reg=r"^setup:(\w*)"),
        rule(name="connectionType", reg=r"^connection:(new|existing)"),
        rule(name="mid", reg=r"^mid:([^\s]*)"),
        rule(name="msid", reg=r"^msid:(.*)"),
        rule(name="ptime", reg=r"^ptime:(\d*(?:\.\d*)*)"),
        rule(name="maxptime", reg=r"^maxptime:(\d*(?:\.\d*)*)"),
        rule(name="direction", reg=r"^(sendrecv|recvonly|sendonly|inactive)"),
        rule(name="icelite", reg=r"^(ice-lite)"),
        rule(name="iceUfrag", reg=r"^ice-ufrag:(\S*)"),
        rule(name="icePwd", reg=r"^ice-pwd:(\S*)"),
        rule(name="fingerprint", reg=r"^fingerprint:(\S*) (\S*)", names=["type", "hash"]),
        # a=candidate:0 1 UDP 2113667327 203.0.113.1 54400 typ host
        rule(
            push="candidates",
            reg=(
                r"^candidate:(\S*) (\d*) (\S*) (\d*) (\S*) (\d*) typ (\S*)"
                r"(?: raddr (\S*) rport (\d*))?(?: tcptype (\S*))?(?: generation (\d*))?"
                r"(?: network-id (\d*))?(?: network-cost (\d*))?"
            ),
            names=[
                "foundation", "component", "transport", "priority", "ip", "port", "type",
                "raddr", "rport", "tcptype", "generation", "network-id", "network-cost",
            ],
        ),
        rule(name="endOfCandidates", reg=r"^(end-of-candidates)"),
        rule(name="remoteCandidates", reg=r"^remote-candidates:(.*)"),
        rule(name="iceOptions", reg=r"^ice-options:(\S*)"),
        rule(push="ssrcs", reg=r"^ssrc:(\d*) ([\w_-]*)(?::(.*))?", names=["id", "attribute", "value"]),
        # a=ssrc-group:FEC 1 2
        rule(
            push="ssrcGroups",
            reg=r"^ssrc-group:([\x21\x23\x24\x25\x26\x27\x2A\x2B\x2D\x2E\w]*) (.*)",
            names=["semantics", "ssrcs"],
        ),
        rule(name="msidSemantic", reg=r"^msid-semantic:\s?(\w*) (\S*)", names=["semantic", "token"]),
        rule(push="groups", reg=r"^group:(\w*) (.*)", names=["type", "mids"]),
        rule(name="rtcpMux", reg=r"^(rtcp-mux)"),
        rule(name="rtcpRsize", reg=r"^(rtcp-rsize)"),
        rule(
            name="sctpmap",
            reg=r"^sctpmap:([\w_/]*) (\S*)(?: (\S*))?",
            names=["sctpmapNumber", "app", "maxMessageSize"],
        ),
        rule(name="xGoogleFlag", reg=r"^x-google-flag:([^\s]*)"),
        rule(push="rids", reg=r"^rid:([\d\w]+) (\w+)(?: ([\S| ]*))?", names=["id", "direction", "params"]),
        # a=imageattr:97 send [x=800,y=640,sar=1.1,q=0.6] recv [x=480,y=320]
        rule(
            push="imageattrs",
            reg=(
                r"^imageattr:(\d+|\*)[\s\t]+(send|recv)[\s\t]+" + _IMAGEATTR_SET
                + r"(?:[\s\t]+(recv|send)[\s\t]+" + _IMAGEATTR_SET + r")?"
            ),
            names=["pt", "dir1", "attrs1", "dir2", "attrs2"],
        ),
        # a=simulcast:send 1,2,3;~4,~5 recv 6;~7,~8
        rule(
            name="simulcast",
            reg=(
                r"^simulcast:(send|recv) ([a-zA-Z0-9\-_~;,]+)"
                r"(?:\s?(send|recv) ([a-zA-Z0-9\-_~;,]+))?$"
            ),
            names=["dir1", "list1", "dir2", "list2"],
        ),
        # Old simulcast draft 03, kept for interop: a=simulcast: recv pt=97;98
        rule(name="simulcast_03", reg=r"^simulcast:[\s\t]+([\S+\s\t]+)$", names=["value"]),
        rule(name="framerate", reg=r"^framerate:(\d+(?:$|\.\d+))"),
        # a=source-filter: incl IN IP4 239.5.2.31 10.1.15.5
        rule(
            name="sourceFilter",
            reg=r"^source-filter: *(excl|incl) (\S*) (IP4|IP6|\*) (\S*) (.*)",
            names=["filterMode", "netType", "addressTypes", "destAddress", "srcList"],
        ),
        rule(name="bundleOnly", reg=r"^(bundle-only)"),
        rule(name="label", reg=r"^label:(.+)"),
        rule(name="sctpPort", reg=r"^sctp-port:(\d+)$"),
        rule(name="maxMessageSize", reg=r"^max-message-size:(\d+)$"),
        rule(push="tsRefClocks", reg=r"^ts-refclk:([^\s=]*)(?:=(\S*))?", names=["clksrc", "clksrcExt"]),
        # a=mediaclk:direct=963214424 rate=1000/1001
        rule(
            name="mediaClk",
            reg=r"^mediaclk:(?:id=(\S*))? *([^\s=]*)(?:=(\S*))?(?: *rate=(\d+)/(\d+))?",
            names=["id", "mediaClockName", "mediaClockValue", "rateNumerator", "rateDenominator"],
        ),
        rule(name="keywords", reg=r"^keywds:(.+)$"),
        rule(name="content", reg=r"^content:(.+)"),
        # BFCP, RFC 8856
        rule(name="bfcpFloorCtrl", reg=r"^floorctrl:(c-only|s-only|c-s)"),
        rule(name="bfcpConfId", reg=r"^confid:(\d+)"),
        rule(name="bfcpUserId", reg=r"^userid:(\d+)"),
        rule(name="bfcpFloorId", reg=r"^floorid:(.+) (?:m-stream|mstrm):(.+)", names=["id", "mStream"]),
        # Any a= line nothing above understood is kept verbatim.
        rule(push="invalids", reg=r"(.*)", names=["value"]),
    ],
}

DEFAULT_GRAMMAR = Grammar(rules=_SDP_RULES)
