"""Rule registry and exported-config check commands."""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from ..config import CONFIG, LintConfig
from ..config.shape import check_equivalents_disabled, diff_configs, validate_config_shape
from ..registry import load_registry, registry_drift


def run_overlap(engine_path: Path, plugin_path: Path, output_json: bool = False) -> int:
    """Print the rule identifiers two registry snapshots share."""
    drift = registry_drift(load_registry(engine_path), load_registry(plugin_path))

    if output_json:
        print(
            json.dumps(
                {
                    "shared": sorted(drift.shared),
                    "only_engine": sorted(drift.only_primary),
                    "only_plugin": sorted(drift.only_secondary),
                },
                indent=2,
            )
        )
        return 0

    console = Console()
    table = Table(title=f"Rules in both {engine_path.name} and {plugin_path.name}")
    table.add_column("Rule", style="bold")
    for rule_id in sorted(drift.shared):
        table.add_row(rule_id)
    console.print(table)
    console.print(
        f"{len(drift.shared)} shared, {len(drift.only_primary)} engine-only, {len(drift.only_secondary)} plugin-only",
        style="dim",
    )
    return 0


def run_config_check(
    engine_path: Path | None = None,
    plugin_path: Path | None = None,
    *,
    config: LintConfig = CONFIG,
    expected_path: Path | None = None,
) -> int:
    """Validate the exported configuration.

    Args:
        engine_path: Engine registry snapshot (enables the equivalents check)
        plugin_path: Type-aware plugin registry snapshot (enables the equivalents check)
        config: Configuration to check (defaults to the exported one)
        expected_path: Optional JSON rendering of the expected configuration

    Returns:
        Exit code (0 = clean, 1 = problems found)
    """
    console = Console(stderr=True)

    problems = validate_config_shape(config)
    if engine_path is not None and plugin_path is not None:
        drift = registry_drift(load_registry(engine_path), load_registry(plugin_path))
        problems.extend(check_equivalents_disabled(config, drift.shared))

    exit_code = 0
    if problems:
        for p in problems:
            console.print(f"ERROR: {p}", style="red")
        exit_code = 1

    if expected_path is not None:
        expected = json.loads(expected_path.read_text(encoding="utf-8"))
        diff = diff_configs(config, expected)
        if diff:
            console.print("Exported config differs from expected:", style="yellow")
            console.print(Syntax("\n".join(diff), "diff", theme="monokai"))
            exit_code = 1

    if exit_code == 0:
        console.print(f"✓ Config OK ({len(config.rules)} rules, {len(config.plugins)} plugins)", style="green")
    return exit_code
