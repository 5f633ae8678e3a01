from __future__ import annotations
import numpy as np
import pandas as pd

from src.sanitizing.frame import sanitize_frame


def test_sanitize_frame_rows_and_missing_cells(spy_filter):
    df = pd.DataFrame(
        {"name": [" Ann ", None, np.nan], "note": ["x", "y", "z"]},
        index=[10, 11, 12],
    )
    filters = {"trim": lambda v, o: v.strip(), "spy": spy_filter}
    out = sanitize_frame(df, {"name": "trim|spy"}, filters)

    assert list(out.columns) == ["name", "note"]
    assert list(out.index) == [10, 11, 12]
    assert out["name"].tolist() == ["Ann", None, None]
    assert out["note"].tolist() == ["x", "y", "z"]
    assert spy_filter.calls == [("Ann", [""])]
    # input untouched
    assert df["name"].iloc[0] == " Ann "

def test_sanitize_frame_empty():
    df = pd.DataFrame({"a": []})
    out = sanitize_frame(df, {"a": "trim"}, {"trim": lambda v, o: v.strip()})
    assert out.empty
    assert out is not df

def test_sanitize_frame_leaves_unruled_columns_and_dtypes_alone():
    df = pd.DataFrame(
        {
            "name": [" Bo ", None],
            "count": pd.array([1, None], dtype="Int64"),
            "score": [1.5, np.nan],
        }
    )
    out = sanitize_frame(df, {"name": "trim"}, {"trim": lambda v, o: v.strip()})

    pd.testing.assert_series_equal(out["count"], df["count"])
    pd.testing.assert_series_equal(out["score"], df["score"])
    assert out["name"].dtype == object
    assert out["name"].tolist() == ["Bo", None]

def test_sanitize_frame_without_matching_rules_is_a_copy():
    df = pd.DataFrame({"a": [" x "]})
    out = sanitize_frame(df, {"other": "trim"}, {"trim": lambda v, o: v.strip()})
    pd.testing.assert_frame_equal(out, df)
    assert out is not df
