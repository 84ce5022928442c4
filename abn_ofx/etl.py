from pathlib import Path
from typing import List, Optional

import pandas as pd

from abn_ofx.io import load_transactions
from abn_ofx.normalize import NormalizedTransaction, RawTransactionRow, normalize_rows
from abn_ofx.payee import classify_series
from abn_ofx.rules import PayeeRules
from abn_ofx.trntype import infer_trntype_series
from abn_ofx.validate import (
    AMOUNT_COLUMN,
    DATE_COLUMN,
    DESCRIPTION_COLUMN,
    check_columns,
)


def _cell(value) -> Optional[object]:
    if value is None:
        return None
    if not isinstance(value, str) and pd.api.types.is_scalar(value) and pd.isna(value):
        return None
    return value


def _column(df: pd.DataFrame, name: str) -> pd.Series:
    if name in df.columns:
        return df[name]
    return pd.Series(None, index=df.index, dtype=object)


# ---------- ETL ----------
def rows_from_frame(df: pd.DataFrame) -> List[RawTransactionRow]:
    """Turn a statement frame into rows, in frame order."""
    check_columns(df)

    amounts = _column(df, AMOUNT_COLUMN)
    descriptions = _column(df, DESCRIPTION_COLUMN)
    dates = _column(df, DATE_COLUMN)

    rows = []
    for amount, description, date in zip(amounts, descriptions, dates):
        description = _cell(description)
        rows.append(
            RawTransactionRow(
                amount=_cell(amount),
                description=None if description is None else str(description),
                date=_cell(date),
            )
        )
    return rows


def load_rows(path: Path) -> List[RawTransactionRow]:
    return rows_from_frame(load_transactions(path))


def load_and_prepare(
    path: Path, *, rules: Optional[PayeeRules] = None
) -> List[NormalizedTransaction]:
    return normalize_rows(load_rows(path), rules)


def summarize(df: pd.DataFrame, rules: Optional[PayeeRules] = None) -> pd.DataFrame:
    """Per-row type and payee columns for a statement frame.

    Handy when inspecting an export before converting it; the conversion
    itself goes through :func:`load_and_prepare`.
    """

    check_columns(df)
    return pd.DataFrame(
        {
            "trntype": infer_trntype_series(_column(df, AMOUNT_COLUMN)),
            "payee": classify_series(_column(df, DESCRIPTION_COLUMN), rules),
        },
        index=df.index,
    )
