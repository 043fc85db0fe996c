import pandas as pd

from wiretext.utils import safe_int, coalesce


def test_safe_int_basic():
    series = pd.Series([1, None, 3], dtype=object)
    result = safe_int(series, default=-1)
    assert result.tolist() == [1, -1, 3]
    assert result.dtype.kind in {"i", "u"}


def test_coalesce_basic():
    series = pd.Series(["a", None, "b"])
    result = coalesce(series, "x")
    assert result.tolist() == ["a", "x", "b"]
