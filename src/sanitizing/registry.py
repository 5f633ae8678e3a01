from __future__ import annotations
from typing import Any, Callable, Iterator, Mapping, Optional, Protocol, Sequence, runtime_checkable

from .errors import InvalidFilterError

# -------- public types --------

# Every filter ends up in this shape: (value, options) -> new value
FilterFn = Callable[[Any, Sequence[str]], Any]


@runtime_checkable
class Filter(Protocol):
    """Object-style filter."""
    def apply(self, value: Any, options: Sequence[str]) -> Any: ...


def as_filter_fn(obj: Any, name: str = "<filter>") -> FilterFn:
    """
    Normalize a filter into a plain (value, options) callable.

    Accepts, in this order:
      - a class whose instances expose `apply` (instantiated with no arguments)
      - an object with a callable `apply`
      - any other callable
    """
    if isinstance(obj, type) and callable(getattr(obj, "apply", None)):
        try:
            obj = obj()
        except TypeError as e:
            raise InvalidFilterError(f"Filter class for {name!r} cannot be built without arguments") from e
    apply = getattr(obj, "apply", None)
    if callable(apply):
        return apply
    if callable(obj):
        return obj
    raise InvalidFilterError(
        f"Filter {name!r} must be callable or expose an apply(value, options) method, "
        f"got {type(obj).__name__}"
    )


# -------- registry --------

class FilterRegistry(Mapping[str, FilterFn]):
    """
    Read-only name -> FilterFn lookup built once from the caller's mapping.
    Population belongs to the caller (see SanitizerFactory.extend).
    """

    def __init__(self, filters: Mapping[str, Any] | None = None) -> None:
        self._fns: dict[str, FilterFn] = {
            name: as_filter_fn(f, name) for name, f in (filters or {}).items()
        }

    def lookup(self, name: str) -> Optional[FilterFn]:
        return self._fns.get(name)

    def __getitem__(self, name: str) -> FilterFn:
        return self._fns[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fns)

    def __len__(self) -> int:
        return len(self._fns)

    def __repr__(self) -> str:
        return f"FilterRegistry({sorted(self._fns)!r})"


def compile_filters_registry() -> dict[str, Any]:
    """
    Map built-in filter names -> filters.
    Returns a fresh dict so callers can add or override entries.
    """
    from .filters_builtin.text import trim, lowercase, uppercase, capitalize, normalize
    from .filters_builtin.markup import escape, StripTags
    from .filters_builtin.numeric import digit, Cast
    from .filters_builtin.dates import FormatDate
    from .filters_builtin.strings import truncate, split, RegexReplace, slug

    return {
        # Whitespace / case
        "trim":       trim,
        "lowercase":  lowercase,
        "uppercase":  uppercase,
        "capitalize": capitalize,
        "normalize":  normalize,

        # Markup
        "escape":     escape,
        "strip_tags": StripTags(),

        # Numbers / types
        "digit":      digit,
        "cast":       Cast(),

        # Dates
        "format_date": FormatDate(),

        # Shape
        "truncate":      truncate,
        "split":         split,
        "regex_replace": RegexReplace(),
        "slug":          slug,
    }
