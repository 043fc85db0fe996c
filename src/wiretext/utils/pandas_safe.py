import pandas as pd


def safe_int(series: pd.Series, default: int = 0) -> pd.Series:
    """Return integer Series with missing values replaced by ``default``.

    Parameters
    ----------
    series:
        Series to convert.
    default:
        Value to use where ``series`` has ``None`` or ``NaN``.
    """
    filled = series.where(series.notna(), default)
    if hasattr(filled, "infer_objects"):
        filled = filled.infer_objects()
    return pd.to_numeric(filled, downcast="integer")


def coalesce(series: pd.Series, fallback):
    """Return ``series`` with missing values replaced by ``fallback``."""
    return series.where(series.notna(), fallback)
