"""CLI entrypoint for lintpolicy."""

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .errors import LintPolicyError


@click.group()
@click.version_option(__version__, prog_name="lintpolicy")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def cli(debug: bool) -> None:
    """lintpolicy - checks for the shared lint configuration.

    Enforce the dependency pinning policy and audit rule registries.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.option(
    "--manifest",
    "-m",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="package.json or directory to search from (defaults to cwd)",
)
@click.option(
    "--policy",
    "policy_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="TOML pinning policy (defaults to pinned-or-caret for dependencies and peerDependencies)",
)
@click.option("--json", "output_json", is_flag=True, help="Output violations as JSON")
def deps(manifest: Path | None, policy_path: Path | None, output_json: bool) -> None:
    """Check dependency ranges against the pinning policy.

    Examples:

        lintpolicy deps

        lintpolicy deps --manifest ../pkg/package.json --json
    """
    from .commands.deps import run_deps_check

    try:
        exit_code = run_deps_check(manifest, policy_path, output_json=output_json)
    except LintPolicyError as e:
        raise click.ClickException(str(e)) from e
    sys.exit(exit_code)


@cli.command()
@click.argument("engine", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("plugin", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def overlap(engine: Path, plugin: Path, output_json: bool) -> None:
    """List rule identifiers present in both registry snapshots.

    ENGINE and PLUGIN are JSON or TOML files: a list of rule ids, or a
    mapping of rule id to definition.
    """
    from .commands.config_cmd import run_overlap

    try:
        exit_code = run_overlap(engine, plugin, output_json=output_json)
    except LintPolicyError as e:
        raise click.ClickException(str(e)) from e
    sys.exit(exit_code)


@cli.command("config")
@click.option(
    "--engine-registry",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Engine rule registry snapshot",
)
@click.option(
    "--plugin-registry",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Type-aware plugin rule registry snapshot",
)
@click.option(
    "--expected",
    "expected_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON rendering of the expected config to diff against",
)
def config_check(
    engine_registry: Path | None,
    plugin_registry: Path | None,
    expected_path: Path | None,
) -> None:
    """Validate the shape of the exported lint configuration.

    With both registries, also check that every base rule with a
    type-aware equivalent is turned off.
    """
    from .commands.config_cmd import run_config_check

    if (engine_registry is None) != (plugin_registry is None):
        raise click.UsageError("--engine-registry and --plugin-registry must be given together")

    try:
        exit_code = run_config_check(engine_registry, plugin_registry, expected_path=expected_path)
    except LintPolicyError as e:
        raise click.ClickException(str(e)) from e
    sys.exit(exit_code)


def main() -> None:
    """Main entrypoint."""
    cli()


if __name__ == "__main__":
    main()
