import numpy as np
import pandas as pd


# ---------- cleaning ----------
def clean_amount_series(values: pd.Series) -> pd.Series:
    """Vectorized parse of currency-like strings into floats."""
    if values.empty:
        return pd.Series([], index=values.index, dtype="float64")

    result = pd.Series(np.nan, index=values.index, dtype="float64")
    str_vals = values.astype("string").str.strip()
    str_vals = str_vals.replace({"": pd.NA})
    cleaned = str_vals.str.replace(",", "").str.replace("€", "")

    paren_mask = (cleaned.str.startswith("(") & cleaned.str.endswith(")")).fillna(False)
    if paren_mask.any():
        paren_vals = cleaned.loc[paren_mask].str[1:-1].str.strip()
        result.loc[paren_mask] = -pd.to_numeric(paren_vals, errors="coerce")

    remaining_mask = ~paren_mask & cleaned.notna()
    if remaining_mask.any():
        result.loc[remaining_mask] = pd.to_numeric(
            cleaned.loc[remaining_mask].str.strip(), errors="coerce"
        )

    return result


def clean_amount(x) -> float:
    """Numeric value of a single amount cell; ``nan`` when it cannot be read."""
    if isinstance(x, (int, float)) and not isinstance(x, bool):
        return float(x)
    series = pd.Series([x], dtype=object)
    return float(clean_amount_series(series).iloc[0])


__all__ = [
    "clean_amount",
    "clean_amount_series",
]
