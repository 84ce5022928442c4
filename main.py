"""
main.py

Convert an ABN AMRO transaction spreadsheet into an OFX statement that can be
imported into financial software.  The OFX file is written next to the input
with the same base name.

Usage:
    pip install -e .   # installs pandas, numpy, openpyxl, xlrd, PyYAML
    python main.py statement.xls

Environment:
    ABN_OFX_RULES      optional JSON/YAML file with payee rule overrides
    ABN_OFX_LOG_LEVEL  log level for diagnostics on stderr (default WARNING)
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

from abn_ofx.build_ofx import build_ofx
from abn_ofx.etl import load_and_prepare
from abn_ofx.exceptions import OutputWriteError, UsageError
from abn_ofx.logging_setup import configure_logging
from abn_ofx.rules import PayeeRules, load_rules

logger = logging.getLogger("abn_ofx.main")

USAGE_MESSAGE = "No input file specified. Please provide a valid .xls file path."


def output_path_for(input_path: Path) -> Path:
    return input_path.with_suffix(".ofx")


def convert_file(
    input_path: Path,
    *,
    rules: Optional[PayeeRules] = None,
    now: Optional[datetime] = None,
) -> Path:
    input_path = Path(input_path)
    out_path = output_path_for(input_path)

    transactions = load_and_prepare(input_path, rules=rules)
    ofx_text = build_ofx(transactions, now)

    try:
        out_path.write_text(ofx_text, encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(
            f"Could not write OFX file {out_path}: {exc}", {"path": str(out_path)}
        ) from exc

    logger.info("Wrote %d transactions to %s", len(transactions), out_path)
    return out_path


def _input_path(argv: Sequence[str]) -> Path:
    if not argv or not argv[0]:
        raise UsageError(USAGE_MESSAGE)
    return Path(argv[0])


def main(argv: Optional[Sequence[str]] = None) -> int:
    configure_logging()
    argv = sys.argv[1:] if argv is None else list(argv)

    try:
        input_path = _input_path(argv)
    except UsageError as exc:
        print(exc.message, file=sys.stderr)
        return 1

    rules_path = os.environ.get("ABN_OFX_RULES")
    rules = load_rules(rules_path) if rules_path else None

    out_path = convert_file(input_path, rules=rules)
    print(f"OFX file created successfully at {out_path}")
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
