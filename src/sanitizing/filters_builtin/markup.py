from __future__ import annotations
from typing import Any, Sequence
import html
import bleach

__all__ = ["escape", "StripTags"]


def escape(value: Any, options: Sequence[str] = ()) -> Any:
    """HTML-escape & < > " ' so the value is safe to echo into markup."""
    return html.escape(value, quote=True) if isinstance(value, str) else value


class StripTags:
    """
    Remove every HTML tag and comment, keeping the text between them.
    Stray '<', '>' and '&' in the remaining text come back entity-escaped.
    """

    _ALLOWED_TAGS: frozenset[str] = frozenset()

    def apply(self, value: Any, options: Sequence[str] = ()) -> Any:
        if not isinstance(value, str):
            return value
        return bleach.clean(value, tags=self._ALLOWED_TAGS, attributes={}, strip=True, strip_comments=True)
