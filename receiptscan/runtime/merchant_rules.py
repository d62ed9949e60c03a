"""Runtime loader for merchant identity matchers."""

from __future__ import annotations

import re
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any

from receiptscan.domain.receipt import MerchantMatchers
from receiptscan.runtime.paths import get_paths


def _load_toml(path: Path) -> dict[str, Any]:
    """Load TOML file and return parsed dict; missing files map to empty dict."""
    if not path.exists():
        return {}

    with open(path, "rb") as f:
        data = tomllib.load(f)
    return data if isinstance(data, dict) else {}


def _section_values(config: dict[str, Any], section: str, key: str) -> list[str]:
    table = config.get(section, {})
    if not isinstance(table, dict):
        return []
    return [str(value) for value in table.get(key, [])]


def build_merchant_matchers(configs: tuple[dict[str, Any], ...]) -> MerchantMatchers:
    """
    Merge rule configs into one MerchantMatchers, preserving file order.

    Raises:
        re.error: if an address or phone pattern is not a valid regex
    """
    keywords: list[str] = []
    address_patterns: list[str] = []
    phone_patterns: list[str] = []
    for config in configs:
        keywords.extend(_section_values(config, "name", "keywords"))
        address_patterns.extend(_section_values(config, "address", "patterns"))
        phone_patterns.extend(_section_values(config, "phone", "patterns"))

    return MerchantMatchers(
        name_keywords=tuple(keywords),
        address_patterns=tuple(re.compile(pattern) for pattern in address_patterns),
        phone_patterns=tuple(re.compile(pattern) for pattern in phone_patterns),
    )


@lru_cache(maxsize=4)
def load_merchant_matchers(config_path: str | None = None) -> MerchantMatchers:
    """
    Load merchant matchers from merchant_rules.toml.

    Args:
        config_path: Optional TOML path override. If None, the bundled defaults
            are loaded first and the project file's entries appended.

    Returns:
        MerchantMatchers built from all loaded files.
    """
    if config_path is not None:
        rule_files = [Path(config_path)]
    else:
        p = get_paths()
        rule_files = [p.default_merchant_rules, p.merchant_rules]

    return build_merchant_matchers(tuple(_load_toml(path) for path in rule_files))
