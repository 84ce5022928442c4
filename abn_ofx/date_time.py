from datetime import date, datetime, timezone
from typing import Optional

import pandas as pd

# Statement dates carry no time of day; OFX wants YYYYMMDDHHMMSS.
OFX_TIME_SUFFIX = "000000"


# ---------- datetime helpers ----------
def _date_text(value) -> str:
    """Render a spreadsheet date cell as text without interpreting it.

    Cells normally hold an 8-digit ``YYYYMMDD`` numeral.  Excel may hand those
    back as floats (``20240115.0``), which are rendered as integers; real
    date cells are rendered as ``YYYYMMDD``.  Missing cells become ``""``.
    Anything else is passed through ``str`` unchanged, so malformed dates
    degrade instead of failing the conversion.
    """

    if value is None or value is pd.NaT:
        return ""
    if isinstance(value, (datetime, date)):
        return value.strftime("%Y%m%d")
    if isinstance(value, float):
        if pd.isna(value):
            return ""
        if value.is_integer():
            return str(int(value))
    return str(value)


def ofx_posted_date(value) -> str:
    """Format a source date value as an OFX ``DTPOSTED`` string."""
    return f"{_date_text(value)}{OFX_TIME_SUFFIX}"


def server_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. ``2024-01-15T10:20:30.123Z``."""

    ts = pd.Timestamp(now) if now is not None else pd.Timestamp.now(tz=timezone.utc)
    if ts.tzinfo is None:
        ts = ts.tz_localize(timezone.utc)
    else:
        ts = ts.tz_convert(timezone.utc)

    py_dt = ts.to_pydatetime()
    return f"{py_dt.strftime('%Y-%m-%dT%H:%M:%S')}.{py_dt.microsecond // 1000:03d}Z"
