"""
Rule registry comparison.

A registry maps rule identifiers to definitions. Only key presence is
compared; definitions are never inspected.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .errors import RegistryLoadError

logger = logging.getLogger(__name__)

RuleRegistry = Mapping[str, Any]


@dataclass(frozen=True)
class RegistryDrift:
    """Identifiers shared by two registries and those unique to each side."""

    shared: frozenset[str]
    only_primary: frozenset[str]
    only_secondary: frozenset[str]

    @property
    def in_sync(self) -> bool:
        return not self.only_primary and not self.only_secondary


def overlapping_identifiers(primary: RuleRegistry, secondary: RuleRegistry) -> set[str]:
    """
    Identifiers of ``primary`` that also exist as keys of ``secondary``.

    Used to find rules a plugin re-implements under an engine built-in's name,
    e.g. so the base rule can be switched off in favour of the plugin's.
    """
    return {rule_id for rule_id in primary if rule_id in secondary}


def registry_drift(primary: RuleRegistry, secondary: RuleRegistry) -> RegistryDrift:
    primary_ids = set(primary)
    secondary_ids = set(secondary)
    return RegistryDrift(
        shared=frozenset(overlapping_identifiers(primary, secondary)),
        only_primary=frozenset(primary_ids - secondary_ids),
        only_secondary=frozenset(secondary_ids - primary_ids),
    )


def load_registry(path: Path) -> dict[str, Any]:
    """
    Load a registry snapshot exported from an engine or plugin.

    Accepted shapes (JSON, or TOML when the suffix is ``.toml``):
    - a list of rule identifiers
    - a mapping with a top-level ``rules`` key
    - a plain identifier → definition mapping
    """
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".toml":
        import tomllib

        try:
            data: Any = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise RegistryLoadError(f"{path}: not valid TOML ({e})") from e
    else:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise RegistryLoadError(f"{path}: not valid JSON ({e})") from e

    if isinstance(data, dict) and "rules" in data:
        data = data["rules"]

    if isinstance(data, list):
        if not all(isinstance(item, str) for item in data):
            raise RegistryLoadError(f"{path}: rule list must contain only identifiers")
        registry: dict[str, Any] = {rule_id: {} for rule_id in data}
    elif isinstance(data, dict):
        registry = dict(data)
    else:
        raise RegistryLoadError(f"{path}: expected a list or mapping of rules, got {type(data).__name__}")

    logger.debug("Loaded %d rules from %s", len(registry), path)
    return registry
