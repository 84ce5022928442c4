"""Row normalization: raw spreadsheet rows to OFX-ready transactions."""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from abn_ofx.date_time import ofx_posted_date
from abn_ofx.id import make_fitid
from abn_ofx.payee import classify
from abn_ofx.rules import PayeeRules
from abn_ofx.trntype import infer_trntype

NO_DESCRIPTION = "No description available"


@dataclass(frozen=True)
class RawTransactionRow:
    """One spreadsheet row.

    Every field is optional: cells missing from the source (or whole missing
    columns) are ``None`` and degrade to fallbacks during normalization.
    """

    amount: Optional[object] = None
    description: Optional[str] = None
    date: Optional[object] = None


@dataclass(frozen=True)
class NormalizedTransaction:
    kind: str
    posted_date: str
    amount: Optional[object]
    fitid: str
    payee: str
    memo: str


def memo_for(description: Optional[str]) -> str:
    if description is None:
        return NO_DESCRIPTION
    text = str(description)
    return text if text else NO_DESCRIPTION


def normalize(
    row: RawTransactionRow, index: int, rules: Optional[PayeeRules] = None
) -> NormalizedTransaction:
    """Normalize the row at zero-based position *index* of the statement."""
    return NormalizedTransaction(
        kind=infer_trntype(row.amount),
        posted_date=ofx_posted_date(row.date),
        amount=row.amount,
        fitid=make_fitid(index),
        payee=classify(row.description, rules),
        memo=memo_for(row.description),
    )


def normalize_rows(
    rows: Iterable[RawTransactionRow], rules: Optional[PayeeRules] = None
) -> List[NormalizedTransaction]:
    return [normalize(row, idx, rules) for idx, row in enumerate(rows)]


__all__ = [
    "NO_DESCRIPTION",
    "RawTransactionRow",
    "NormalizedTransaction",
    "memo_for",
    "normalize",
    "normalize_rows",
]
