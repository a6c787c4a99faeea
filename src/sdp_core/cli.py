"""SDPRepl — incremental SDP inspector for notebook / interactive use.

Also provides the ``sdp-parse`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import IO, Any, Callable

from .parser import parse
from .values import Section

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# SDPRepl class (notebook / programmatic use)
# ---------------------------------------------------------------------------

class SDPRepl:
    """Accumulates SDP lines across calls and re-parses the whole buffer.

    Usage::

        repl = SDPRepl()
        repl.eval("v=0")
        repl.eval("m=audio 9 UDP/TLS/RTP/SAVPF 111")
        doc = repl.eval("a=rtpmap:111 opus/48000/2")
        doc["media"][0]["rtp"]   # → [{"payload": 111, "codec": "opus", ...}]
        repl.reset()
    """

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.doc: Section = parse("")

    def eval(self, text: str) -> Section:
        """Append the lines of *text* and return the re-parsed document."""
        self.lines.extend(text.split("\n"))
        self.doc = parse("\n".join(self.lines))
        return self.doc

    def reset(self) -> None:
        """Clear all buffered lines."""
        self.lines = []
        self.doc = parse("")


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _fmt_inline(value: Any) -> str:
    """Format a single value for compact one-line display."""
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, dict):
        return "{" + ", ".join(f"{k}: {_fmt_inline(v)}" for k, v in value.items()) + "}"
    if isinstance(value, list):
        return "[" + ", ".join(_fmt_inline(v) for v in value) + "]"
    return str(value)


def _fmt_media(index: int, section: Section) -> str:
    """One summary line for a media section."""
    kind = section.get("type", "?")
    port = section.get("port", "?")
    protocol = section.get("protocol", "?")
    codecs = ", ".join(str(r.get("codec", "?")) for r in section.get("rtp", []))
    line = f"  {index}: {kind} {port} {protocol}"
    if "mid" in section:
        line += f"  mid={_fmt_inline(section['mid'])}"
    if codecs:
        line += f"  [{codecs}]"
    return line


def _dump(doc: Any, dest: IO[str], indent: int | None = 2) -> None:
    print(json.dumps(doc, indent=indent, ensure_ascii=False), file=dest)


def _show_media(repl: SDPRepl, dest: IO[str]) -> None:
    """Print one line per media section."""
    media = repl.doc.get("media", [])
    if not media:
        print("  (no media sections)", file=dest)
        return
    for i, section in enumerate(media):
        print(_fmt_media(i, section), file=dest)


def _load_file(repl: SDPRepl, filepath: str) -> None:
    try:
        text = Path(filepath).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error reading '{filepath}': {exc}", file=sys.stderr)
        return
    repl.eval(text)


def _process_line(repl: SDPRepl, line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    line = line.strip()
    if not line:
        return True

    # ── Exit ──────────────────────────────────────────────────────────────
    if line in (":q", ":quit"):
        return False

    # ── Control commands ──────────────────────────────────────────────────
    if line == ":show":
        _dump(repl.doc, dest)
        return True

    if line == ":media":
        _show_media(repl, dest)
        return True

    if line == ":reset":
        repl.reset()
        return True

    # ── Batch file ────────────────────────────────────────────────────────
    if line.startswith("?<< "):
        _load_file(repl, line[4:].strip())
        return True

    # ── Regular SDP input ─────────────────────────────────────────────────
    repl.eval(line)
    return True


def _redirect(command: str, current: IO[str] | None) -> IO[str] | None:
    """Handle ``?>> path`` / ``?>>``: close *current*, open the new target.

    Returns the file output now goes to, or None for stdout.
    """
    if current is not None:
        current.close()
    filepath = command[3:].strip()
    if not filepath:
        return None
    try:
        return open(filepath, "w", encoding="utf-8")
    except OSError as exc:
        print(f"Error opening '{filepath}': {exc}", file=sys.stderr)
        return None


def _interactive(read: Callable[[str], str] = input) -> None:
    repl = SDPRepl()
    out: IO[str] | None = None

    print("SDP REPL  (:q to quit  |  :show  :media  :reset  |  ?<< <file>  ?>> <file>)")

    while True:
        try:
            line = read("SDP> ").strip()
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue

        if line == "?>>" or line.startswith("?>> "):
            out = _redirect(line, out)
        elif not _process_line(repl, line, out or sys.stdout):
            break

    if out is not None:
        out.close()


# ---------------------------------------------------------------------------
# Batch mode
# ---------------------------------------------------------------------------

def _parse_files(files: list[Path]) -> list[Section] | None:
    docs: list[Section] = []
    for path in files:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Error reading '{path}': {exc}", file=sys.stderr)
            return None
        log.debug("parsing %s", path)
        docs.append(parse(text))
    return docs


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """``sdp-parse`` / ``python -m sdp_core.cli``."""
    parser = argparse.ArgumentParser(
        prog="sdp-parse",
        description="Parse SDP session descriptions into JSON.",
    )
    parser.add_argument(
        "files", nargs="*", type=Path,
        help="SDP files to parse (none: interactive mode)",
    )
    parser.add_argument(
        "--indent", type=int, default=2,
        help="JSON indentation (default: 2)",
    )
    parser.add_argument(
        "-o", "--output", type=Path, default=None,
        help="Write JSON here instead of stdout",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    if not args.files:
        _interactive()
        return 0

    docs = _parse_files(args.files)
    if docs is None:
        return 1
    result: Any = docs[0] if len(docs) == 1 else docs

    if args.output is None:
        _dump(result, sys.stdout, args.indent)
        return 0
    try:
        with args.output.open("w", encoding="utf-8") as fh:
            _dump(result, fh, args.indent)
    except OSError as exc:
        print(f"Error writing '{args.output}': {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
