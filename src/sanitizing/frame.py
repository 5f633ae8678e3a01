from __future__ import annotations
from typing import Any, Mapping
import pandas as pd

from .engine import sanitize_data
from .registry import FilterRegistry
from .rules import parse_rules


def sanitize_frame(df: pd.DataFrame, rules: Mapping[str, Any], filters: Mapping[str, Any]) -> pd.DataFrame:
    """
    Sanitize every row of `df` as one record. Pure: returns a new frame.

    - Rules are parsed and filters normalized once for the whole frame.
    - Missing cells (NaN/NA/NaT) in ruled columns become None first, so they short-circuit as empty.
    - Ruled columns come back as object dtype; columns without rules are copied as-is,
      dtype included. Index and column order are preserved.
    """
    parsed = parse_rules(rules)
    registry = filters if isinstance(filters, FilterRegistry) else FilterRegistry(filters)

    out = df.copy(deep=True)
    ruled = [c for c in df.columns if c in parsed]
    if df.empty or not ruled:
        return out

    sub = df[ruled].astype(object)
    records = sub.where(sub.notna(), None).to_dict(orient="records")
    cleaned = [sanitize_data(rec, parsed, registry) for rec in records]
    for col in ruled:
        out[col] = pd.Series([rec[col] for rec in cleaned], index=df.index, dtype=object)
    return out
