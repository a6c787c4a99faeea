"""Tests for write-target resolution and attribute binding."""

from sdp_core import rule
from sdp_core.binder import apply_rule, attach_properties, resolve_target


# ---------------------------------------------------------------------------
# resolve_target
# ---------------------------------------------------------------------------

def test_resolve_push_creates_list():
    scope = {}
    target = resolve_target(rule(push="rtp", names=["x"]), scope)
    assert scope == {"rtp": [{}]}
    assert scope["rtp"][0] is target

def test_resolve_push_appends_fresh_dict():
    scope = {"rtp": [{"payload": 0}]}
    target = resolve_target(rule(push="rtp", names=["x"]), scope)
    assert target == {}
    assert len(scope["rtp"]) == 2
    assert scope["rtp"][0] == {"payload": 0}

def test_resolve_named_group_created_once():
    r = rule(name="origin", reg=r"(\S+)", names=["a"])
    scope = {}
    first = resolve_target(r, scope)
    first["a"] = 1
    second = resolve_target(r, scope)
    assert first is second
    assert scope == {"origin": {"a": 1}}

def test_resolve_plain_name_is_scope():
    scope = {}
    assert resolve_target(rule(name="mid"), scope) is scope

def test_resolve_names_without_name_is_scope():
    scope = {}
    assert resolve_target(rule(reg=r"(\w+)", names=["type"]), scope) is scope


# ---------------------------------------------------------------------------
# attach_properties
# ---------------------------------------------------------------------------

def test_attach_single_scalar():
    r = rule(name="ptime", reg=r"^ptime:(\S*)")
    loc = {}
    attach_properties(r.reg.search("ptime:20"), loc, r)
    assert loc == {"ptime": 20}

def test_attach_single_scalar_overwrites():
    r = rule(name="mid", reg=r"^mid:(\S*)")
    loc = {"mid": "audio"}
    attach_properties(r.reg.search("mid:video"), loc, r)
    assert loc == {"mid": "video"}

def test_attach_single_without_groups_writes_empty():
    r = rule(name="flag", reg=r"^flag$")
    loc = {}
    attach_properties(r.reg.search("flag"), loc, r)
    assert loc == {"flag": ""}

def test_attach_names_skips_absent_groups():
    r = rule(reg=r"^(\d+)(?: (\w+))?(?: (\w+))?", names=["a", "b", "c"])
    loc = {}
    attach_properties(r.reg.search("1 two"), loc, r)
    assert loc == {"a": 1, "b": "two"}
    assert "c" not in loc

def test_attach_names_skips_empty_groups():
    r = rule(reg=r"^(\d*) (\S*)", names=["a", "b"])
    loc = {}
    attach_properties(r.reg.search(" x"), loc, r)
    assert loc == {"b": "x"}

def test_attach_more_names_than_groups():
    r = rule(reg=r"^(\w+)", names=["a", "b"])
    loc = {}
    attach_properties(r.reg.search("hello"), loc, r)
    assert loc == {"a": "hello"}


# ---------------------------------------------------------------------------
# apply_rule
# ---------------------------------------------------------------------------

def test_apply_rule_no_match_leaves_scope():
    r = rule(push="rtp", reg=r"^rtpmap:(\d+)", names=["payload"])
    scope = {}
    assert apply_rule(r, scope, "fmtp:0 x") is False
    assert scope == {}

def test_apply_rule_push_n_times():
    r = rule(push="rtp", reg=r"^rtpmap:(\d+)", names=["payload"])
    scope = {}
    for pt in (0, 8, 96):
        assert apply_rule(r, scope, f"rtpmap:{pt}")
    assert scope["rtp"] == [{"payload": 0}, {"payload": 8}, {"payload": 96}]

def test_apply_rule_push_with_plain_name():
    r = rule(name="value", push="items", reg=r"^(\w+)")
    scope = {}
    apply_rule(r, scope, "a")
    apply_rule(r, scope, "b")
    assert scope == {"items": [{"value": "a"}, {"value": "b"}]}
