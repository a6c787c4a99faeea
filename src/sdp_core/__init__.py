"""SDP Core — grammar-driven parser for SDP session descriptions."""

from .binder import apply_rule, attach_properties, resolve_target
from .document import Document
from .errors import SDPCoreError
from .grammar import DEFAULT_GRAMMAR, Grammar, Rule, rule
from .params import (
    parse_image_attributes,
    parse_params,
    parse_payloads,
    parse_simulcast_stream_list,
)
from .parser import match_rule, parse
from .values import Scalar, to_int_if_int
from .cli import SDPRepl

__all__ = [
    "parse",
    "match_rule",
    "apply_rule",
    "attach_properties",
    "resolve_target",
    "Document",
    "Grammar",
    "Rule",
    "rule",
    "DEFAULT_GRAMMAR",
    "Scalar",
    "to_int_if_int",
    "parse_params",
    "parse_payloads",
    "parse_image_attributes",
    "parse_simulcast_stream_list",
    "SDPCoreError",
    "SDPRepl",
]
