from __future__ import annotations
from typing import Any, Sequence
import re
import unicodedata

__all__ = ["trim", "lowercase", "uppercase", "capitalize", "normalize"]

_CONTROL_RE = re.compile(r"[\x00-\x08\x0B-\x0C\x0E-\x1F\x7F]")
_WHITESPACE_RE = re.compile(r"\s+")

_FANCY_TRANSLATE = {
    ord("\u2018"): "'",
    ord("\u2019"): "'",
    ord("\u201C"): '"',
    ord("\u201D"): '"',
    ord("\u2013"): "-",
    ord("\u2014"): "-",
    ord("\u2212"): "-",
    ord("\u00A0"): " ",
}


def trim(value: Any, options: Sequence[str] = ()) -> Any:
    return value.strip() if isinstance(value, str) else value


def lowercase(value: Any, options: Sequence[str] = ()) -> Any:
    return value.lower() if isinstance(value, str) else value


def uppercase(value: Any, options: Sequence[str] = ()) -> Any:
    return value.upper() if isinstance(value, str) else value


def capitalize(value: Any, options: Sequence[str] = ()) -> Any:
    """'jOHN  doe' -> 'John  Doe' (spacing kept, unlike str.title on apostrophes)."""
    if not isinstance(value, str):
        return value
    return re.sub(r"\S+", lambda m: m.group(0)[:1].upper() + m.group(0)[1:].lower(), value)


def normalize(value: Any, options: Sequence[str] = ()) -> Any:
    """NFKC, curly quotes/dashes/NBSP to ASCII, control chars dropped, whitespace collapsed, stripped."""
    if not isinstance(value, str):
        return value
    s = unicodedata.normalize("NFKC", value)
    s = s.translate(_FANCY_TRANSLATE)
    s = _CONTROL_RE.sub("", s)
    s = _WHITESPACE_RE.sub(" ", s)
    return s.strip()
