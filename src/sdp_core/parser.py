"""Parser: SDP text → nested session document."""

from __future__ import annotations

import logging
from typing import Sequence

from .binder import apply_rule
from .document import Document
from .grammar import DEFAULT_GRAMMAR, Grammar, Rule
from .reader import read_line, split_lines
from .values import Section

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def parse(sdp: str, grammar: Grammar = DEFAULT_GRAMMAR) -> Section:
    """Parse *sdp* and return the session dict.

    Malformed lines, unknown line types and lines no rule matches are
    skipped. Media sections are collected in order under
    ``grammar.media_key``.
    """
    doc = Document(grammar=grammar)
    count = 0

    for line in split_lines(sdp):
        count += 1
        _apply_line(doc, line)

    log.debug("parsed %d lines, %d media sections", count, len(doc.media))
    return doc.finish()


# ---------------------------------------------------------------------------
# Per-line processing
# ---------------------------------------------------------------------------

def _apply_line(doc: Document, line: str) -> None:
    parsed = read_line(line)
    if parsed is None:
        if line:
            log.debug("skipping malformed line %r", line)
        return

    letter, content = parsed

    # The section switch depends only on the letter, never on a match.
    if letter == doc.grammar.media_type:
        doc.open_media()

    rules = doc.grammar.lookup(letter)
    if not rules:
        log.debug("no rules for line type %r", letter)
        return

    if match_rule(rules, doc.scope, content) is None:
        log.debug("no rule matched %s=%r", letter, content)


def match_rule(rules: Sequence[Rule], location: Section, content: str) -> Rule | None:
    """Apply the first rule in *rules* that matches *content*.

    Returns the rule applied, or None when nothing matched.
    """
    for rule in rules:
        if apply_rule(rule, location, content):
            return rule
    return None
