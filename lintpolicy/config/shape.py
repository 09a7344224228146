"""
Structural checks on an exported LintConfig.

Problems are returned as data, never raised: the test suite (or the CLI)
decides what a divergence means.
"""

from __future__ import annotations

import difflib
import json
from collections.abc import Iterable
from dataclasses import asdict, dataclass
from typing import Any

from . import PARSER, PLUGINS, TYPESCRIPT_NAMESPACE
from .schema import SEVERITIES, LintConfig


@dataclass(frozen=True)
class ShapeProblem:
    """A single divergence from the expected configuration shape."""

    subject: str
    message: str

    def __str__(self) -> str:
        return f"[{self.subject}] {self.message}"


def rule_namespace(rule_id: str) -> str | None:
    """
    Plugin namespace of a rule identifier.

    "@typescript-eslint/no-namespace" -> "@typescript-eslint"
    "import/first" -> "import"
    "no-var" -> None
    """
    namespace, sep, _ = rule_id.rpartition("/")
    return namespace if sep else None


def validate_config_shape(
    config: LintConfig,
    *,
    parser: str = PARSER,
    namespaces: Iterable[str] = PLUGINS,
) -> list[ShapeProblem]:
    problems: list[ShapeProblem] = []

    options = config.language_options
    if options.parser != parser:
        problems.append(ShapeProblem("parser", f"expected parser '{parser}', found '{options.parser}'"))
    if not options.parser_options.get("project"):
        problems.append(ShapeProblem("parser", "type-aware parsing is not enabled (parser_options.project)"))

    expected_namespaces = set(namespaces)
    actual_namespaces = set(config.plugins)
    for missing in sorted(expected_namespaces - actual_namespaces):
        problems.append(ShapeProblem("plugins", f"missing plugin namespace '{missing}'"))
    for extra in sorted(actual_namespaces - expected_namespaces):
        problems.append(ShapeProblem("plugins", f"unexpected plugin namespace '{extra}'"))

    for rule_id, setting in config.rules.items():
        if not isinstance(setting, list) or not setting:
            problems.append(ShapeProblem(rule_id, "rule setting must be a non-empty list"))
            continue
        if setting[0] not in SEVERITIES:
            problems.append(ShapeProblem(rule_id, f"unknown severity {setting[0]!r}"))
        namespace = rule_namespace(rule_id)
        if namespace is not None and namespace not in config.plugins:
            problems.append(ShapeProblem(rule_id, f"no plugin registered for namespace '{namespace}'"))

    return problems


def check_equivalents_disabled(
    config: LintConfig,
    equivalents: Iterable[str],
    *,
    namespace: str = TYPESCRIPT_NAMESPACE,
) -> list[ShapeProblem]:
    """
    For each base rule the plugin re-implements, if the namespaced version is
    configured the base version must be configured as exactly ["off"].

    `equivalents` is the overlap of the engine's and the plugin's registries.
    """
    problems: list[ShapeProblem] = []
    for rule_id in sorted(equivalents):
        if f"{namespace}/{rule_id}" not in config.rules:
            continue
        setting = config.rules.get(rule_id)
        if setting != ["off"]:
            problems.append(
                ShapeProblem(
                    rule_id,
                    f"'{namespace}/{rule_id}' is configured, so the base rule must be ['off'] (found {setting!r})",
                )
            )
    return problems


def _render(config: LintConfig | dict[str, Any]) -> str:
    data = asdict(config) if isinstance(config, LintConfig) else config
    return json.dumps(data, indent=2, sort_keys=True, default=repr)


def diff_configs(actual: LintConfig | dict[str, Any], expected: LintConfig | dict[str, Any]) -> list[str]:
    """Unified diff between two configurations; empty when structurally equal."""
    return list(
        difflib.unified_diff(
            _render(expected).splitlines(),
            _render(actual).splitlines(),
            fromfile="expected",
            tofile="actual",
            lineterm="",
        )
    )
