from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence

from .errors import RuleSyntaxError

# ---- public types ----

@dataclass(frozen=True)
class ParsedRule:
    """One filter invocation: `name` looked up in the registry, `options` passed through."""
    name: str
    options: tuple[str, ...] = ()

# attribute -> rules in declaration order
ParsedRules = Mapping[str, tuple[ParsedRule, ...]]

RULE_SEPARATOR = "|"
NAME_SEPARATOR = ":"
OPTION_SEPARATOR = ","


# ---- parsing ----

def parse_rule(rule: str) -> Optional[ParsedRule]:
    """
    Parse 'filterName' or 'filterName:option1, option2' into a ParsedRule.

    - Only the first ':' separates name from options; later ones stay in the options.
    - A bare name still carries one empty option: 'trim' -> ParsedRule('trim', ('',)).
    - Options are trimmed, the name is not (it is used as-is for lookup).
    - An empty name yields None instead of raising.
    """
    name, _, options = rule.partition(NAME_SEPARATOR)
    if not name:
        return None
    return ParsedRule(name=name, options=tuple(o.strip() for o in options.split(OPTION_SEPARATOR)))


def _rule_strings(attribute: str, spec: Any) -> Sequence[str]:
    if isinstance(spec, str):
        return spec.split(RULE_SEPARATOR)
    if isinstance(spec, (list, tuple)) and all(isinstance(r, str) for r in spec):
        return spec
    raise RuleSyntaxError(
        f"Rules for {attribute!r} must be a string or a list of strings, got {type(spec).__name__}"
    )


def parse_rules(raw_rules: Mapping[str, Any]) -> ParsedRules:
    """
    Parse {attribute: 'trim|truncate:20, ...'} into {attribute: (ParsedRule, ...)}.

    A list/tuple of rule strings is accepted as an already-split rule set.
    Attributes whose rules are all empty are left out of the result.
    """
    parsed: dict[str, tuple[ParsedRule, ...]] = {}
    for attribute, spec in raw_rules.items():
        chain = [r for r in map(parse_rule, _rule_strings(attribute, spec)) if r is not None]
        if chain:
            parsed[attribute] = tuple(chain)
    return MappingProxyType(parsed)


def dropped_rule_count(raw_rules: Mapping[str, Any], parsed: ParsedRules) -> int:
    """How many rule strings parse_rules discarded (for diagnostics)."""
    total = sum(len(_rule_strings(a, s)) for a, s in raw_rules.items())
    return total - sum(len(chain) for chain in parsed.values())
