from __future__ import annotations

# Public API re-exports (keep small & stable)
from .engine import Sanitizer, apply_filter, is_empty, sanitize_data
from .errors import (
    SanitizerError,
    UnknownFilterError,
    InvalidFilterError,
    RuleSyntaxError,
    UnknownProfileError,
)
from .factory import SanitizerFactory
from .registry import Filter, FilterFn, FilterRegistry, as_filter_fn, compile_filters_registry
from .rules import ParsedRule, ParsedRules, parse_rule, parse_rules
