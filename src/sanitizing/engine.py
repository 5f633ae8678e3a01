from __future__ import annotations
import logging
from collections.abc import Sized
from numbers import Number
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence
import numpy as np

from .errors import UnknownFilterError
from .registry import FilterRegistry, as_filter_fn
from .rules import ParsedRule, ParsedRules, dropped_rule_count, parse_rules


# ---- helpers ----

def is_empty(value: Any) -> bool:
    """
    Values that skip filtering entirely.

    Empty: None, False (numpy's too), "" / b"", and any empty sized container (list, dict, tuple, set).
    Not empty: every number including 0, 0.0 and NaN; True; the string "0"; other objects.
    """
    if value is None:
        return True
    if isinstance(value, (bool, np.bool_)):
        return not value
    if isinstance(value, Number):
        return False
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def apply_filter(
    registry: Mapping[str, Any],
    name: str,
    value: Any,
    options: Sequence[str] = (),
) -> Any:
    """
    Run one named filter on `value`.

    The name is resolved first so a misconfigured chain fails even on empty input;
    empty values are then returned untouched without calling the filter.
    """
    if isinstance(registry, FilterRegistry):
        fn = registry.lookup(name)
    else:
        fn = registry.get(name)
        fn = None if fn is None else as_filter_fn(fn, name)
    if fn is None:
        raise UnknownFilterError(name)
    if is_empty(value):
        return value
    return fn(value, list(options))


def sanitize_attribute(value: Any, chain: Sequence[ParsedRule], registry: Mapping[str, Any]) -> Any:
    """Fold a value through its rules, left to right."""
    for rule in chain:
        value = apply_filter(registry, rule.name, value, rule.options)
    return value


def sanitize_data(
    data: Mapping[str, Any],
    parsed_rules: ParsedRules,
    registry: Mapping[str, Any],
) -> dict[str, Any]:
    """
    Pure: returns a new dict with exactly the keys of `data`.
    Attributes without rules pass through unchanged.
    """
    if not isinstance(registry, FilterRegistry):
        registry = FilterRegistry(registry)
    sanitized: dict[str, Any] = {}
    for attribute, value in data.items():
        chain = parsed_rules.get(attribute)
        sanitized[attribute] = value if chain is None else sanitize_attribute(value, chain, registry)
    return sanitized


# ---- Public API ----

class Sanitizer:
    """
    Sanitize `data` with per-attribute filter chains.

        Sanitizer(
            {"name": " Bob ", "age": 0},
            {"name": "trim"},
            {"trim": lambda v, opts: v.strip()},
        ).sanitize()
        # {"name": "Bob", "age": 0}

    Rules are parsed once here; `sanitize()` can be called any number of times and
    never mutates the inputs. Filters may be callables, objects with `apply`, or a
    ready-made FilterRegistry.
    """

    def __init__(
        self,
        data: Mapping[str, Any],
        rules: Mapping[str, Any],
        filters: Mapping[str, Any],
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._log = logger
        self._data = MappingProxyType(dict(data))
        self._rules = parse_rules(rules)
        self._filters = filters if isinstance(filters, FilterRegistry) else FilterRegistry(filters)

        if self._log is not None:
            dropped = dropped_rule_count(rules, self._rules)
            if dropped:
                self._log.debug("dropped %d empty rule(s)", dropped, extra={"dropped_rules": dropped})

    @property
    def data(self) -> Mapping[str, Any]:
        return self._data

    @property
    def rules(self) -> ParsedRules:
        return self._rules

    @property
    def filters(self) -> FilterRegistry:
        return self._filters

    def sanitize(self) -> dict[str, Any]:
        try:
            return sanitize_data(self._data, self._rules, self._filters)
        except UnknownFilterError as e:
            if self._log is not None:
                self._log.error("unknown filter %r", e.name, extra={"filter": e.name})
            raise
