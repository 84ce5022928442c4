"""Payee extraction from bank description strings.

Descriptions in the export follow a handful of conventions: a fixed set of
literal prefixes (bank fees, interest settlement), fixed-width card and app
payments where the counterparty sits at a known column, SEPA transfers with
``Naam:`` labels and structured ``/TRTP/.../NAME/...`` tag strings.  The rules
themselves live in :mod:`abn_ofx.rules`; this module only evaluates them.
"""

import logging
from typing import Optional

import pandas as pd

from abn_ofx.rules import DEFAULT_RULES, PayeeRules, PositionalFormat

logger = logging.getLogger(__name__)

UNKNOWN_PAYEE = "Unknown Payee"
UNKNOWN_FORMAT = "Unknown Format"


def _as_text(description) -> str:
    if description is None:
        return ""
    if not isinstance(description, str) and pd.isna(description):
        return ""
    return str(description)


def _extract_positional(text: str, fmt: PositionalFormat) -> str:
    comma = text.find(",", fmt.offset)
    end = comma if comma != -1 else fmt.offset + fmt.max_length
    return text[fmt.offset:end].strip()


def classify(description, rules: Optional[PayeeRules] = None) -> str:
    """Return the payee name for *description*, first matching rule wins.

    ``None`` and missing values are treated as an empty description.  The
    result is never empty: unrecognised descriptions give ``"Unknown Format"``
    and recognised formats without an extractable name give
    ``"Unknown Payee"``.
    """

    rules = rules or DEFAULT_RULES
    text = _as_text(description)

    for prefix, name in rules.static_prefixes:
        if text.startswith(prefix):
            return name

    for fmt in rules.positional_formats:
        if text.startswith(fmt.prefix):
            payee = _extract_positional(text, fmt)
            if not payee:
                logger.debug("No payee at offset %d in %r", fmt.offset, text)
                return UNKNOWN_PAYEE
            return payee

    if text.startswith(rules.sepa_prefix):
        match = rules.sepa_pattern.search(text)
        payee = match.group(1).strip() if match else ""
        return payee or UNKNOWN_PAYEE

    if text.startswith(rules.tagged_prefix):
        match = rules.tagged_pattern.search(text)
        payee = match.group(1).strip() if match else ""
        return payee or UNKNOWN_PAYEE

    logger.debug("Unrecognised description format: %r", text)
    return UNKNOWN_FORMAT


def classify_series(descriptions: pd.Series, rules: Optional[PayeeRules] = None) -> pd.Series:
    """Classify every description in *descriptions*, preserving the index."""
    if descriptions.empty:
        return pd.Series([], index=descriptions.index, dtype="string")
    return descriptions.map(lambda value: classify(value, rules)).astype("string")


__all__ = ["classify", "classify_series", "UNKNOWN_PAYEE", "UNKNOWN_FORMAT"]
