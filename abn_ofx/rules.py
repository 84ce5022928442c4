"""Rule configuration helpers for payee extraction."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Pattern, Sequence, Tuple, Union

import yaml

# Bank exports place the counterparty at a fixed column for card and app
# payments; the name runs to the next comma or at most 32 characters.
DEFAULT_PAYEE_OFFSET = 33
DEFAULT_PAYEE_MAX_LENGTH = 32


@dataclass(frozen=True)
class PositionalFormat:
    """A description prefix whose payee sits at a fixed character offset."""

    prefix: str
    offset: int = DEFAULT_PAYEE_OFFSET
    max_length: int = DEFAULT_PAYEE_MAX_LENGTH


@dataclass(frozen=True)
class PayeeRules:
    """Container for payee extraction rules, checked in declaration order."""

    static_prefixes: Tuple[Tuple[str, str], ...]
    positional_formats: Tuple[PositionalFormat, ...]
    sepa_prefix: str
    sepa_pattern: Pattern
    tagged_prefix: str
    tagged_pattern: Pattern


_DEFAULT_STATIC_PREFIXES = (
    ("ABN AMRO Bank N.V.", "ABN AMRO Bank N.V."),
    ("RENTEAFSLUITING", "Renteafsluiting"),
)

# point-of-sale, cash withdrawal, app and e-commerce payments
_DEFAULT_POSITIONAL_FORMATS = (
    PositionalFormat("BEA,"),
    PositionalFormat("GEA,"),
    PositionalFormat("APP"),
    PositionalFormat("eCom"),
)

DEFAULT_RULES = PayeeRules(
    static_prefixes=tuple(_DEFAULT_STATIC_PREFIXES),
    positional_formats=tuple(_DEFAULT_POSITIONAL_FORMATS),
    sepa_prefix="SEPA Overboeking",
    sepa_pattern=re.compile(r"Naam:\s*(\S.*?)\s*(?=IBAN|BIC|Omschrijving|$)"),
    tagged_prefix="/TRTP/",
    tagged_pattern=re.compile(r"/NAME/([^/]+)/"),
)


def load_rules(
    config_path: Optional[Union[str, Path]] = None,
    *,
    base_rules: PayeeRules = DEFAULT_RULES,
) -> PayeeRules:
    """Load :class:`PayeeRules` from an optional JSON or YAML configuration file."""

    if config_path is None:
        return base_rules

    path = Path(config_path)
    overrides = _load_config_data(path)
    return apply_rule_overrides(base_rules, overrides)


def apply_rule_overrides(base_rules: PayeeRules, overrides: Mapping[str, Any]) -> PayeeRules:
    """Create a new :class:`PayeeRules` by applying overrides to *base_rules*."""

    if not overrides:
        return base_rules

    static_prefixes = _merge_rule_sequences(
        base_rules.static_prefixes,
        overrides.get("static_prefixes"),
        _parse_static_rule,
    )
    positional_formats = _merge_rule_sequences(
        base_rules.positional_formats,
        overrides.get("positional_formats"),
        _parse_positional_rule,
    )

    return PayeeRules(
        static_prefixes=tuple(static_prefixes),
        positional_formats=tuple(positional_formats),
        sepa_prefix=base_rules.sepa_prefix,
        sepa_pattern=base_rules.sepa_pattern,
        tagged_prefix=base_rules.tagged_prefix,
        tagged_pattern=base_rules.tagged_pattern,
    )


_CONFIG_LOADERS = {
    ".json": json.loads,
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
}


def _load_config_data(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Rule override file not found: {path}")

    loader = _CONFIG_LOADERS.get(path.suffix.lower())
    if loader is None:
        raise ValueError(f"Unsupported rule file format: {path.suffix}")

    text = path.read_text(encoding="utf-8")
    data = loader(text) if text.strip() else None
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise TypeError("Rule configuration must be a mapping")
    return data


def _entries(value: Any) -> list:
    """Rule entries given either as one entry or a list of them."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _merge_rule_sequences(base_rules: Sequence[Any], override: Optional[Any], parser) -> list:
    """Apply a ``replace``/``extend`` override (or a bare replacement list)."""
    if override is None:
        return list(base_rules)

    if not isinstance(override, Mapping):
        return [parser(item) for item in _entries(override)]

    result = list(base_rules)
    if "replace" in override:
        result = [parser(item) for item in _entries(override.get("replace"))]
    result.extend(parser(item) for item in _entries(override.get("extend")))
    return result


def _parse_static_rule(entry: Any) -> Tuple[str, str]:
    if isinstance(entry, Mapping):
        prefix = entry.get("prefix")
        name = entry.get("name") or entry.get("payee")
    elif isinstance(entry, (list, tuple)) and len(entry) == 2:
        prefix, name = entry
    else:
        raise TypeError(
            f"Static prefix entries must be {{prefix, name}} or [prefix, name], got {entry!r}"
        )

    if not prefix or not name:
        raise ValueError("Static prefix entries require 'prefix' and 'name'")

    return str(prefix), str(name)


def _parse_positional_rule(entry: Any) -> PositionalFormat:
    if isinstance(entry, Mapping):
        prefix = entry.get("prefix")
        offset = entry.get("offset", DEFAULT_PAYEE_OFFSET)
        max_length = entry.get("max_length", DEFAULT_PAYEE_MAX_LENGTH)
    elif isinstance(entry, (list, tuple)) and 1 <= len(entry) <= 3:
        prefix = entry[0]
        offset = entry[1] if len(entry) > 1 else DEFAULT_PAYEE_OFFSET
        max_length = entry[2] if len(entry) > 2 else DEFAULT_PAYEE_MAX_LENGTH
    else:
        raise TypeError(
            f"Positional format entries must be a mapping or [prefix, offset, max_length], got {entry!r}"
        )

    if not prefix:
        raise ValueError("Positional format entries require a 'prefix'")

    offset = int(offset)
    max_length = int(max_length)
    if offset < 0 or max_length <= 0:
        raise ValueError(
            f"Positional format {prefix!r} needs offset >= 0 and max_length > 0"
        )
    return PositionalFormat(str(prefix), offset, max_length)


__all__ = [
    "PositionalFormat",
    "PayeeRules",
    "DEFAULT_RULES",
    "DEFAULT_PAYEE_OFFSET",
    "DEFAULT_PAYEE_MAX_LENGTH",
    "load_rules",
    "apply_rule_overrides",
]
