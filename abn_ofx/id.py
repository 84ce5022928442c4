# ---------- ids ----------
FITID_PREFIX = "T"


def make_fitid(idx: int) -> str:
    """Sequence-derived transaction id, unique within one statement."""
    return f"{FITID_PREFIX}{idx}"
