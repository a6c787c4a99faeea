"""Binding of rule matches into the document."""

from __future__ import annotations

import re

from .grammar import Rule
from .values import Section, to_int_if_int


def resolve_target(rule: Rule, location: Section) -> Section:
    """Return the dict a match of *rule* should be written into.

    - ``push`` rule: a fresh dict, appended to ``location[rule.push]``
      (created as an empty list if missing).
    - ``name`` + ``names`` rule: ``location[rule.name]``, created as an
      empty dict the first time and reused afterwards.
    - anything else: *location* itself.
    """
    if rule.push:
        target: Section = {}
        location.setdefault(rule.push, []).append(target)
        return target
    if rule.name and rule.names:
        return location.setdefault(rule.name, {})
    return location


def attach_properties(match: re.Match[str], location: Section, rule: Rule) -> None:
    """Write the captures of *match* into *location* per *rule*'s names."""
    if rule.name and not rule.names:
        first = match.group(1) if match.re.groups else None
        location[rule.name] = to_int_if_int(first or "")
        return

    groups = match.groups()
    for i, key in enumerate(rule.names):
        if i < len(groups) and groups[i]:
            location[key] = to_int_if_int(groups[i])


def apply_rule(rule: Rule, location: Section, content: str) -> bool:
    """Apply *rule* to *content* in *location*. Returns False on no match."""
    match = rule.reg.search(content)
    if match is None:
        return False
    attach_properties(match, resolve_target(rule, location), rule)
    return True
