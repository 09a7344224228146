"""Dependency pinning check command."""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console
from rich.table import Table

from ..manifest import DEV_DEPENDENCIES, PEER_DEPENDENCIES, PackageJsonReader
from ..policy import DEFAULT_POLICY, PolicyViolation, load_policy, validate_manifest


def run_deps_check(
    manifest: Path | None = None,
    policy_path: Path | None = None,
    output_json: bool = False,
) -> int:
    """Check the manifest's dependency ranges against the pinning policy.

    Args:
        manifest: package.json, or a directory to search upwards from (defaults to cwd)
        policy_path: Optional TOML policy file
        output_json: Output violations as JSON

    Returns:
        Exit code (0 = clean, 1 = violations found)
    """
    console = Console(stderr=True)

    policy = load_policy(policy_path) if policy_path is not None else DEFAULT_POLICY
    # Only the sections the policy checks have to exist.
    required = set(policy.sections)
    if policy.require_peer_dev_pins:
        required |= {PEER_DEPENDENCIES, DEV_DEPENDENCIES}

    reader = PackageJsonReader(manifest, required=sorted(required))
    violations = validate_manifest(reader, policy)

    if output_json:
        print(json.dumps([_violation_dict(v) for v in violations], indent=2))
        return 1 if violations else 0

    if not violations:
        console.print("✓ All dependency ranges follow the pinning policy", style="green")
        return 0

    table = Table(title="Pinning policy violations")
    table.add_column("Section", style="bold")
    table.add_column("Dependency")
    table.add_column("Declared")
    table.add_column("Shape")
    table.add_column("Problem")
    for v in violations:
        table.add_row(v.section, v.name, v.spec, v.classification.value, v.message)

    Console().print(table)
    console.print(f"\n✗ {len(violations)} violation(s)", style="bold red")
    return 1


def _violation_dict(v: PolicyViolation) -> dict:
    return {
        "section": v.section,
        "name": v.name,
        "spec": v.spec,
        "classification": v.classification.value,
        "message": v.message,
    }
