from __future__ import annotations
from typing import Any, Sequence
import re
from slugify import slugify

__all__ = ["truncate", "split", "RegexReplace", "slug"]


def truncate(value: Any, options: Sequence[str] = ()) -> Any:
    """
    truncate:<n>[,<suffix>]: 'Hello world' with truncate:5,... -> 'Hello...'.
    The suffix is only appended when something was cut.
    """
    if not isinstance(value, str):
        return value
    try:
        limit = max(0, int(options[0]))
    except (IndexError, ValueError) as e:
        raise ValueError(f"truncate requires an integer length, got {list(options)!r}") from e
    suffix = options[1] if len(options) > 1 else ""
    if len(value) <= limit:
        return value
    return value[:limit] + suffix


def split(value: Any, options: Sequence[str] = ()) -> Any:
    """
    split:<sep>: 'a;b' with split:; -> ['a', 'b'].

    The separator comes from the first option. Since options are themselves
    comma-separated, 'split:,' yields an empty first option, which means ','.
    """
    if not isinstance(value, str):
        return value
    sep = options[0] if options and options[0] else ","
    return value.split(sep)


class RegexReplace:
    """
    regex_replace:<pattern>,<repl>: re.sub on string values.
    Options are comma-separated, so neither part can contain a comma.
    """

    @staticmethod
    def _compile(pattern: str) -> re.Pattern:
        try:
            return re.compile(pattern)
        except re.error as e:
            raise ValueError(f"regex_replace: invalid pattern {pattern!r}: {e}") from e

    def apply(self, value: Any, options: Sequence[str] = ()) -> Any:
        if not isinstance(value, str):
            return value
        if not options or not options[0]:
            raise ValueError("regex_replace requires a pattern option")
        repl = options[1] if len(options) > 1 else ""
        return self._compile(options[0]).sub(repl, value)


def slug(value: Any, options: Sequence[str] = ()) -> Any:
    """slug[:<sep>]: 'Héllo, World!' -> 'hello-world'."""
    if not isinstance(value, str):
        return value
    sep = options[0] if options and options[0] else "-"
    return slugify(value, lowercase=True, separator=sep)
