from __future__ import annotations

import dataclasses
import json
from pathlib import Path

from click.testing import CliRunner

from lintpolicy.cli import cli
from lintpolicy.config import CONFIG


def _manifest(write_json, dependencies: dict[str, str]) -> Path:
    return write_json(
        "pkg/package.json",
        {
            "name": "example",
            "dependencies": dependencies,
            "peerDependencies": {"eslint": "^8.0.0"},
            "devDependencies": {"eslint": "8.0.0"},
        },
    )


def test_deps_clean(write_json) -> None:
    manifest = _manifest(write_json, {"foo": "1.0.0", "bar": ">=2.0.0 <3.0.0"})

    result = CliRunner().invoke(cli, ["deps", "--manifest", str(manifest)])

    assert result.exit_code == 0, result.output


def test_deps_reports_violation_as_json(write_json) -> None:
    manifest = _manifest(write_json, {"foo": "^1.0.0 || ^2.0.0"})

    result = CliRunner().invoke(cli, ["deps", "--manifest", str(manifest), "--json"])

    assert result.exit_code == 1
    violations = json.loads(result.output)
    assert [(v["section"], v["name"], v["classification"]) for v in violations] == [
        ("dependencies", "foo", "unclassified")
    ]


def test_deps_with_policy_file(write_json, tmp_path: Path) -> None:
    manifest = _manifest(write_json, {"foo": "1.0.0"})
    policy = tmp_path / "policy.toml"
    policy.write_text('[sections]\npeerDependencies = ["pinned"]\n', encoding="utf-8")

    result = CliRunner().invoke(cli, ["deps", "--manifest", str(manifest), "--policy", str(policy)])

    assert result.exit_code == 1
    assert "eslint" in result.output


def test_deps_invalid_range_is_a_usage_error(write_json) -> None:
    manifest = _manifest(write_json, {"foo": "not-a-version"})

    result = CliRunner().invoke(cli, ["deps", "--manifest", str(manifest)])

    assert result.exit_code == 1
    assert "Invalid semver range" in result.output


def test_overlap(write_json) -> None:
    engine = write_json("engine.json", ["no-var", "dot-notation", "no-redeclare"])
    plugin = write_json("plugin.json", {"rules": {"dot-notation": {}, "no-redeclare": {}, "ban-types": {}}})

    result = CliRunner().invoke(cli, ["overlap", str(engine), str(plugin), "--json"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["shared"] == ["dot-notation", "no-redeclare"]
    assert data["only_engine"] == ["no-var"]
    assert data["only_plugin"] == ["ban-types"]


def test_config_check(write_json) -> None:
    engine = write_json("engine.json", ["no-var", "dot-notation", "no-shadow"])
    plugin = write_json("plugin.json", ["dot-notation", "no-shadow", "naming-convention"])

    result = CliRunner().invoke(
        cli,
        ["config", "--engine-registry", str(engine), "--plugin-registry", str(plugin)],
    )

    assert result.exit_code == 0, result.output


def test_config_check_needs_both_registries(write_json) -> None:
    engine = write_json("engine.json", ["no-var"])

    result = CliRunner().invoke(cli, ["config", "--engine-registry", str(engine)])

    assert result.exit_code == 2


def test_deps_malformed_manifest_is_a_usage_error(tmp_path: Path) -> None:
    manifest = tmp_path / "package.json"
    manifest.write_text('{"dependencies": ', encoding="utf-8")

    result = CliRunner().invoke(cli, ["deps", "--manifest", str(manifest)])

    assert result.exit_code == 1
    assert "not valid JSON" in result.output


def test_config_matches_expected(write_json) -> None:
    expected = write_json("expected.json", dataclasses.asdict(CONFIG))

    result = CliRunner().invoke(cli, ["config", "--expected", str(expected)])

    assert result.exit_code == 0, result.output
    assert "differs from expected" not in result.output


def test_config_drift_from_expected_is_reported(write_json) -> None:
    data = dataclasses.asdict(CONFIG)
    data["rules"]["yoda"] = ["warn", "never"]
    expected = write_json("expected.json", data)

    result = CliRunner().invoke(cli, ["config", "--expected", str(expected)])

    assert result.exit_code == 1
    assert "differs from expected" in result.output
    assert "yoda" in result.output
