"""Transaction-type inference.

Statements only distinguish outgoing from incoming money, so the OFX type is
decided by the sign of the amount alone: negative amounts are ``DEBIT`` and
everything else, including zero and unreadable amounts, is ``CREDIT``.
"""

import numpy as np
import pandas as pd

from abn_ofx.cleaning import clean_amount, clean_amount_series

DEBIT = "DEBIT"
CREDIT = "CREDIT"


def infer_trntype_series(amount: pd.Series) -> pd.Series:
    """Infer OFX transaction type values for a series of amounts."""
    if amount.empty:
        return pd.Series([], index=amount.index, dtype="string")

    numeric_amounts = clean_amount_series(amount)
    # NaN compares False, so missing amounts fall through to CREDIT
    values = np.where(numeric_amounts.to_numpy() < 0, DEBIT, CREDIT)
    return pd.Series(values, index=amount.index, dtype="string")


def infer_trntype(amount) -> str:
    value = clean_amount(amount)
    return DEBIT if value < 0 else CREDIT


__all__ = ["DEBIT", "CREDIT", "infer_trntype", "infer_trntype_series"]
