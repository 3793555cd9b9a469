"""Environment scoping semantics."""

from oq.environment import Environment
from oq.object import Integer


def test_get_and_set():
    env = Environment()
    value = Integer(1)
    assert env.set("a", value) is value
    assert env.get("a") is value
    assert env.get("missing") is None
    assert env.get("missing", "fallback") == "fallback"


def test_lookup_walks_outward():
    outer = Environment()
    outer.set("a", Integer(1))
    inner = outer.enclosed()
    assert inner.outer is outer
    assert inner.get("a").value == 1
    assert "a" in inner
    assert "a" not in inner.store


def test_set_binds_locally_and_shadows():
    outer = Environment()
    outer.set("a", Integer(1))
    inner = Environment(outer)
    inner.set("a", Integer(2))
    assert inner.get("a").value == 2
    assert outer.get("a").value == 1


def test_outer_mutation_is_visible_to_inner():
    outer = Environment()
    inner = outer.enclosed()
    outer.set("late", Integer(7))
    assert inner.get("late").value == 7

