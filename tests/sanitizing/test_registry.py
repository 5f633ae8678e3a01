from __future__ import annotations
import pytest

from src.sanitizing.errors import InvalidFilterError
from src.sanitizing.registry import FilterRegistry, as_filter_fn, compile_filters_registry


class Upper:
    def apply(self, value, options):
        return value.upper()


class NeedsArgs:
    def __init__(self, prefix):
        self.prefix = prefix

    def apply(self, value, options):
        return self.prefix + value


def test_callable_and_apply_object_normalize_to_same_contract():
    reg = FilterRegistry({"fn": lambda v, o: v + "!", "obj": Upper()})
    assert reg["fn"]("hi", [""]) == "hi!"
    assert reg["obj"]("hi", [""]) == "HI"

def test_filter_class_is_instantiated():
    fn = as_filter_fn(Upper, "upper")
    assert fn("abc", []) == "ABC"

def test_filter_class_needing_args_is_rejected():
    with pytest.raises(InvalidFilterError):
        as_filter_fn(NeedsArgs, "prefix")

def test_apply_wins_over_call():
    class Both:
        def __call__(self, value, options):
            return "call"
        def apply(self, value, options):
            return "apply"
    assert as_filter_fn(Both())("x", []) == "apply"

@pytest.mark.parametrize("bad", [None, 42, "trim", object()])
def test_non_callable_filters_raise_at_construction(bad):
    with pytest.raises(InvalidFilterError):
        FilterRegistry({"bad": bad})

def test_lookup_and_mapping_protocol():
    reg = FilterRegistry({"a": lambda v, o: v})
    assert reg.lookup("missing") is None
    assert "a" in reg and "missing" not in reg
    assert len(reg) == 1
    assert list(reg) == ["a"]

def test_registry_has_no_mutation_api():
    reg = FilterRegistry({"a": lambda v, o: v})
    with pytest.raises(TypeError):
        reg["b"] = lambda v, o: v  # type: ignore[index]

def test_builtin_registry_is_fresh_and_fully_normalizable():
    r1 = compile_filters_registry()
    r2 = compile_filters_registry()
    assert r1 is not r2
    r1.pop("trim")
    assert "trim" in r2
    reg = FilterRegistry(r2)
    for name in ("trim", "escape", "strip_tags", "cast", "format_date", "truncate", "split", "slug"):
        assert callable(reg[name])
