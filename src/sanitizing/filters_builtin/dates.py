from __future__ import annotations
from typing import Any, Sequence
from datetime import date, datetime
import pandas as pd

__all__ = ["FormatDate"]


class FormatDate:
    """
    format_date:<from>,<to>: re-render a date string.

    'from' and 'to' are strftime patterns: format_date:%d/%m/%Y,%Y-%m-%d turns
    '21/03/2024' into '2024-03-21'. date/datetime values skip parsing.
    """

    def apply(self, value: Any, options: Sequence[str] = ()) -> Any:
        if len(options) < 2 or not options[0] or not options[1]:
            raise ValueError("format_date requires two options: <from format>, <to format>")
        from_fmt, to_fmt = options[0], options[1]
        if isinstance(value, (date, datetime, pd.Timestamp)):
            return value.strftime(to_fmt)
        if not isinstance(value, str):
            return value
        # errors="raise": an unparseable date is bad input the caller should see
        ts = pd.to_datetime(value.strip(), format=from_fmt, errors="raise")
        return ts.strftime(to_fmt)
