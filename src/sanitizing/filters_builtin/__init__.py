from __future__ import annotations

# Built-in filters; see registry.compile_filters_registry for their rule names
from .text import trim, lowercase, uppercase, capitalize, normalize
from .markup import escape, StripTags
from .numeric import digit, Cast
from .dates import FormatDate
from .strings import truncate, split, RegexReplace, slug
