"""Assembling normalized transactions into an OFX statement document.

The document is an :class:`xml.etree.ElementTree.Element` tree with a fixed
sign-on section and a single EUR bank statement.  Transactions become
``<STMTTRN>`` nodes in the order they are given; nothing is filtered, merged or
reordered, so the output holds exactly one node per input row.
"""

from datetime import datetime
from typing import Iterable, Optional
from xml.etree.ElementTree import Element, SubElement, indent, tostring

import pandas as pd

from abn_ofx.date_time import server_timestamp
from abn_ofx.normalize import NormalizedTransaction

TRNUID = "1001"
CURRENCY = "EUR"
LANGUAGE = "ENG"

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


def _format_amount(value) -> str:
    """Render an amount cell without changing its value.

    Integral floats lose their ``.0`` so ``100.0`` is written as ``100``;
    missing amounts give an empty element.
    """

    if value is None:
        return ""
    if isinstance(value, float):
        if pd.isna(value):
            return ""
        if value.is_integer():
            return str(int(value))
        return str(float(value))
    return str(value)


def _add_status(parent: Element) -> None:
    status = SubElement(parent, "STATUS")
    SubElement(status, "CODE").text = "0"
    SubElement(status, "SEVERITY").text = "INFO"


def _add_transaction(tranlist: Element, txn: NormalizedTransaction) -> None:
    stmttrn = SubElement(tranlist, "STMTTRN")
    SubElement(stmttrn, "TRNTYPE").text = txn.kind
    SubElement(stmttrn, "DTPOSTED").text = txn.posted_date
    SubElement(stmttrn, "TRNAMT").text = _format_amount(txn.amount)
    SubElement(stmttrn, "FITID").text = txn.fitid
    SubElement(stmttrn, "NAME").text = txn.payee
    SubElement(stmttrn, "MEMO").text = txn.memo


# ---------- OFX ----------
def build_document(
    transactions: Iterable[NormalizedTransaction],
    now: Optional[datetime] = None,
) -> Element:
    root = Element("OFX")

    signon = SubElement(root, "SIGNONMSGSRSV1")
    sonrs = SubElement(signon, "SONRS")
    _add_status(sonrs)
    SubElement(sonrs, "DTSERVER").text = server_timestamp(now)
    SubElement(sonrs, "LANGUAGE").text = LANGUAGE

    bankmsgs = SubElement(root, "BANKMSGSRSV1")
    stmttrnrs = SubElement(bankmsgs, "STMTTRNRS")
    SubElement(stmttrnrs, "TRNUID").text = TRNUID
    _add_status(stmttrnrs)
    stmtrs = SubElement(stmttrnrs, "STMTRS")
    SubElement(stmtrs, "CURDEF").text = CURRENCY
    tranlist = SubElement(stmtrs, "BANKTRANLIST")

    for txn in transactions:
        _add_transaction(tranlist, txn)

    return root


def render_document(root: Element) -> str:
    """Serialize *root* as pretty-printed XML with a declaration line."""
    indent(root, space="  ")
    body = tostring(root, encoding="unicode")
    return f"{XML_DECLARATION}\n{body}\n"


def build_ofx(
    transactions: Iterable[NormalizedTransaction],
    now: Optional[datetime] = None,
) -> str:
    return render_document(build_document(transactions, now))
