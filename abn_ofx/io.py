import logging
import zipfile
from pathlib import Path
from typing import Iterable

import pandas as pd
from openpyxl.utils.exceptions import InvalidFileException
from xlrd import XLRDError
from xlrd.compdoc import CompDocError

from abn_ofx.exceptions import InputReadError

logger = logging.getLogger(__name__)

_EXCEL_SUFFIXES: Iterable[str] = (".xls", ".xlsx", ".xlsm", ".xlsb")

# Raised by the workbook engines for damaged or truncated files.
_READ_ERRORS = (
    OSError,
    ValueError,
    ImportError,
    zipfile.BadZipFile,
    InvalidFileException,
    XLRDError,
    CompDocError,
)


def load_transactions(path: Path) -> pd.DataFrame:
    """Load the first sheet of a statement file into a DataFrame.

    Excel workbooks are read with :func:`pandas.read_excel` (first sheet only)
    and CSV exports with :func:`pandas.read_csv`.  Cells are kept as
    ``object`` dtype so date numerals and amounts reach the normalizer as the
    spreadsheet stored them.
    """

    path = Path(path)
    suffix = path.suffix.lower()
    try:
        if suffix in _EXCEL_SUFFIXES:
            df = pd.read_excel(path, sheet_name=0, dtype=object)
        elif suffix == ".csv":
            df = pd.read_csv(path, dtype=object)
        else:
            raise InputReadError(
                f"Unsupported transaction file type: {suffix or path}",
                {"path": str(path)},
            )
    except InputReadError:
        raise
    except _READ_ERRORS as exc:
        raise InputReadError(
            f"Could not read statement {path}: {exc}", {"path": str(path)}
        ) from exc

    logger.debug("Loaded %d rows from %s", len(df), path)
    return df
