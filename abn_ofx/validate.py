"""Column checks for statement frames."""

from __future__ import annotations

import logging
from typing import List

import pandas as pd

logger = logging.getLogger(__name__)

AMOUNT_COLUMN = "Transactiebedrag"
DESCRIPTION_COLUMN = "Omschrijving"
DATE_COLUMN = "Transactiedatum"

# Columns the converter reads; names are matched exactly.
EXPECTED_COLUMNS = (AMOUNT_COLUMN, DESCRIPTION_COLUMN, DATE_COLUMN)


def missing_columns(df: pd.DataFrame) -> List[str]:
    present = {str(col) for col in df.columns}
    return [col for col in EXPECTED_COLUMNS if col not in present]


def check_columns(df: pd.DataFrame) -> List[str]:
    """Warn about expected columns absent from *df* and return their names.

    Missing columns never stop a conversion; the affected fields fall back to
    their defaults row by row.
    """

    missing = missing_columns(df)
    if missing:
        logger.warning(
            "Statement is missing expected columns: %s", ", ".join(missing)
        )
    return missing
