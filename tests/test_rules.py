import json

import pytest

from abn_ofx.payee import classify
from abn_ofx.rules import DEFAULT_RULES, PositionalFormat, apply_rule_overrides, load_rules


def test_load_rules_without_path_returns_defaults():
    assert load_rules() is DEFAULT_RULES


def test_default_positional_formats_share_offset():
    assert [f.prefix for f in DEFAULT_RULES.positional_formats] == ["BEA,", "GEA,", "APP", "eCom"]
    assert {(f.offset, f.max_length) for f in DEFAULT_RULES.positional_formats} == {(33, 32)}


def test_load_rules_extends_static_prefixes_from_json(tmp_path):
    config_path = tmp_path / "rules.json"
    config_path.write_text(
        json.dumps(
            {
                "static_prefixes": {
                    "extend": [{"prefix": "KOSTEN", "name": "Bankkosten"}],
                }
            }
        )
    )

    custom_rules = load_rules(config_path)

    assert classify("KOSTEN januari", custom_rules) == "Bankkosten"
    assert classify("ABN AMRO Bank N.V. fee", custom_rules) == "ABN AMRO Bank N.V."


def test_load_rules_replaces_positional_formats_from_yaml(tmp_path):
    config_path = tmp_path / "rules.yaml"
    config_path.write_text(
        "positional_formats:\n"
        "  replace:\n"
        "    - prefix: 'TIKKIE'\n"
        "      offset: 7\n"
        "      max_length: 10\n"
    )

    custom_rules = load_rules(config_path)

    assert custom_rules.positional_formats == (PositionalFormat("TIKKIE", 7, 10),)
    assert classify("TIKKIE Pizza Party Friday", custom_rules) == "Pizza Part"
    assert classify("BEA, " + "x" * 40, custom_rules) == "Unknown Format"


def test_apply_rule_overrides_accepts_sequence_entries():
    rules = apply_rule_overrides(
        DEFAULT_RULES,
        {"static_prefixes": [["STORTING", "Storting"]], "positional_formats": [["PIN", 4]]},
    )

    assert rules.static_prefixes == (("STORTING", "Storting"),)
    assert rules.positional_formats == (PositionalFormat("PIN", 4, 32),)
    assert rules.sepa_pattern is DEFAULT_RULES.sepa_pattern


def test_apply_rule_overrides_empty_keeps_base():
    assert apply_rule_overrides(DEFAULT_RULES, {}) is DEFAULT_RULES


def test_empty_rule_file_keeps_defaults(tmp_path):
    config_path = tmp_path / "rules.yml"
    config_path.write_text("   \n")

    assert load_rules(config_path) is DEFAULT_RULES


def test_load_rules_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="Rule override file not found"):
        load_rules(tmp_path / "missing.json")


def test_load_rules_unsupported_format(tmp_path):
    config_path = tmp_path / "rules.toml"
    config_path.write_text("x = 1")

    with pytest.raises(ValueError, match="Unsupported rule file format"):
        load_rules(config_path)


def test_load_rules_rejects_non_mapping(tmp_path):
    config_path = tmp_path / "rules.json"
    config_path.write_text("[1, 2]")

    with pytest.raises(TypeError, match="must be a mapping"):
        load_rules(config_path)


@pytest.mark.parametrize(
    "overrides, error",
    [
        ({"static_prefixes": ["KOSTEN"]}, TypeError),
        ({"static_prefixes": [{"prefix": "KOSTEN"}]}, ValueError),
        ({"positional_formats": [{"prefix": "PIN", "max_length": 0}]}, ValueError),
        ({"positional_formats": [{"offset": 3}]}, ValueError),
    ],
)
def test_apply_rule_overrides_rejects_malformed_entries(overrides, error):
    with pytest.raises(error):
        apply_rule_overrides(DEFAULT_RULES, overrides)


def test_positional_sequence_entry_with_all_fields(tmp_path):
    config_path = tmp_path / "rules.json"
    config_path.write_text(json.dumps({"positional_formats": {"extend": [["PIN", 5, 6]]}}))

    custom_rules = load_rules(config_path)

    assert custom_rules.positional_formats[-1] == PositionalFormat("PIN", 5, 6)
    assert classify("PIN  Winkelcentrum", custom_rules) == "Winkel"


def test_positional_sequence_entry_too_long():
    with pytest.raises(TypeError, match="Positional format entries"):
        apply_rule_overrides(DEFAULT_RULES, {"positional_formats": [["PIN", 1, 2, 3]]})
