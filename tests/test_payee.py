import pandas as pd
import pytest

from abn_ofx.payee import UNKNOWN_FORMAT, UNKNOWN_PAYEE, classify, classify_series
from abn_ofx.rules import DEFAULT_PAYEE_OFFSET


def _positional(prefix: str, tail: str) -> str:
    # pad the fixed-width header so the payee starts at the expected column
    return prefix.ljust(DEFAULT_PAYEE_OFFSET) + tail


def test_static_prefix_returns_display_name():
    assert classify("ABN AMRO Bank N.V. fee") == "ABN AMRO Bank N.V."
    assert classify("RENTEAFSLUITING 01-01-2024 t/m 31-03-2024") == "Renteafsluiting"


def test_positional_format_stops_at_comma():
    description = _positional("BEA, NR:12345", "SUPERMARKT XYZ, CITY")
    assert classify(description) == "SUPERMARKT XYZ"


def test_positional_format_without_comma_takes_fixed_width():
    description = _positional("GEA, NR:99", "A" * 40)
    assert classify(description) == "A" * 32


@pytest.mark.parametrize("prefix", ["BEA,", "GEA,", "APP", "eCom"])
def test_positional_formats_share_offset(prefix):
    description = _positional(prefix, "  Coffee Corner  ,Amsterdam")
    assert classify(description) == "Coffee Corner"


def test_positional_format_with_short_description_is_unknown_payee():
    assert classify("APP") == UNKNOWN_PAYEE


def test_sepa_transfer_extracts_name():
    description = "SEPA Overboeking Naam: John Doe IBAN: NL00BANK0123456789"
    assert classify(description) == "John Doe"


def test_sepa_transfer_name_runs_to_end():
    assert classify("SEPA Overboeking Naam:   Jane Roe  ") == "Jane Roe"


def test_sepa_transfer_name_before_omschrijving():
    description = (
        "SEPA Overboeking IBAN: NL00BANK0123456789 BIC: ABNANL2A "
        "Naam: Stichting Voorbeeld Omschrijving: donatie"
    )
    assert classify(description) == "Stichting Voorbeeld"


def test_sepa_transfer_without_name_is_unknown_payee():
    assert classify("SEPA Overboeking IBAN: NL00BANK0123456789") == UNKNOWN_PAYEE


def test_tagged_description_extracts_name():
    assert classify("/TRTP/SEPA/NAME/Jane Smith/IBAN/NL00BANK01/") == "Jane Smith"


def test_tagged_description_without_name_is_unknown_payee():
    assert classify("/TRTP/iDEAL/IBAN/NL00BANK01/") == UNKNOWN_PAYEE


@pytest.mark.parametrize("description", ["", None, float("nan"), "Kasopname", "sepa overboeking"])
def test_unrecognised_descriptions_are_unknown_format(description):
    assert classify(description) == UNKNOWN_FORMAT


def test_static_prefix_wins_over_later_rules():
    # starts with a static key even though it also mentions SEPA markers
    assert classify("RENTEAFSLUITING SEPA Overboeking Naam: X") == "Renteafsluiting"


def test_classify_is_deterministic():
    description = "SEPA Overboeking Naam: John Doe IBAN: NL00"
    assert {classify(description) for _ in range(5)} == {"John Doe"}


def test_classify_series_preserves_index():
    series = pd.Series(
        ["ABN AMRO Bank N.V. fee", None, "/TRTP/X/NAME/Acme/"], index=[10, 11, 12]
    )

    result = classify_series(series)

    assert list(result.index) == [10, 11, 12]
    assert list(result) == ["ABN AMRO Bank N.V.", UNKNOWN_FORMAT, "Acme"]
