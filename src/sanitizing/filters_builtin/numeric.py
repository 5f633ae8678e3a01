from __future__ import annotations
from typing import Any, Callable, Sequence
import re

__all__ = ["digit", "Cast"]

_NON_DIGIT_RE = re.compile(r"[^0-9]")

_TRUE_TOKENS = {"true", "t", "1", "yes", "y", "on"}
_FALSE_TOKENS = {"false", "f", "0", "no", "n", "off", ""}


def digit(value: Any, options: Sequence[str] = ()) -> Any:
    """Keep only the digits 0-9: '+1 (555) 010-9999' -> '15550109999'."""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return value
    return _NON_DIGIT_RE.sub("", str(value))


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        token = value.strip().lower()
        if token in _TRUE_TOKENS:
            return True
        if token in _FALSE_TOKENS:
            return False
        raise ValueError(f"Cannot cast {value!r} to bool")
    return bool(value)


class Cast:
    """
    cast:<type> with type one of int/integer, float/real/double, str/string, bool/boolean.
    Conversion failures (e.g. cast:int on 'abc') raise ValueError.
    """

    CASTS: dict[str, Callable[[Any], Any]] = {
        "int": lambda v: int(float(v)) if isinstance(v, str) and "." in v else int(v),
        "integer": lambda v: Cast.CASTS["int"](v),
        "float": float,
        "real": float,
        "double": float,
        "str": str,
        "string": str,
        "bool": _to_bool,
        "boolean": _to_bool,
    }

    def apply(self, value: Any, options: Sequence[str] = ()) -> Any:
        kind = (options[0] if options else "").lower()
        if kind not in self.CASTS:
            raise ValueError(f"cast: unsupported type {kind!r}; expected one of {sorted(self.CASTS)}")
        return self.CASTS[kind](value.strip() if isinstance(value, str) else value)
