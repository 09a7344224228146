"""
Package manifest reading.

The policy harness never looks for a manifest itself; it is handed a
ManifestReader. PackageJsonReader finds the nearest package.json on disk,
StaticManifestReader serves one already in memory.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from .errors import ManifestNotFoundError, ManifestParseError, MissingManifestFieldError

logger = logging.getLogger(__name__)

MANIFEST_NAME = "package.json"

DEPENDENCIES = "dependencies"
PEER_DEPENDENCIES = "peerDependencies"
DEV_DEPENDENCIES = "devDependencies"

DEPENDENCY_SECTIONS = (DEPENDENCIES, PEER_DEPENDENCIES, DEV_DEPENDENCIES)


@dataclass(frozen=True)
class PackageDetails:
    """A parsed manifest and its dependency mappings."""

    path: Path
    manifest: dict[str, Any]
    dependencies: dict[str, str] = field(default_factory=dict)
    peer_dependencies: dict[str, str] = field(default_factory=dict)
    dev_dependencies: dict[str, str] = field(default_factory=dict)

    def section(self, name: str) -> dict[str, str]:
        if name == DEPENDENCIES:
            return self.dependencies
        if name == PEER_DEPENDENCIES:
            return self.peer_dependencies
        if name == DEV_DEPENDENCIES:
            return self.dev_dependencies
        raise KeyError(name)


class ManifestReader(Protocol):
    """Protocol for anything that can produce PackageDetails."""

    def read(self) -> PackageDetails:
        ...


def find_manifest(start: Path) -> Path | None:
    """Find the nearest package.json by walking up from `start`."""
    cur = start.resolve()
    if cur.is_file():
        cur = cur.parent
    for p in (cur, *cur.parents):
        candidate = p / MANIFEST_NAME
        if candidate.is_file():
            return candidate
    return None


def details_from_manifest(
    data: Mapping[str, Any],
    path: Path,
    required: Iterable[str] = DEPENDENCY_SECTIONS,
) -> PackageDetails:
    """
    Build PackageDetails from a parsed manifest.

    Args:
        data: Parsed manifest mapping
        path: Where the manifest came from (for error messages)
        required: Dependency sections that must be present

    Raises:
        MissingManifestFieldError: if a required section is absent
    """
    for name in required:
        if data.get(name) is None:
            raise MissingManifestFieldError(name, path)

    def _section(name: str) -> dict[str, str]:
        raw = data.get(name)
        if not isinstance(raw, Mapping):
            return {}
        return {str(k): str(v) for k, v in raw.items()}

    return PackageDetails(
        path=path,
        manifest=dict(data),
        dependencies=_section(DEPENDENCIES),
        peer_dependencies=_section(PEER_DEPENDENCIES),
        dev_dependencies=_section(DEV_DEPENDENCIES),
    )


class PackageJsonReader:
    """Read the nearest package.json, starting from `start` (default: cwd)."""

    def __init__(self, start: Path | None = None, *, required: Iterable[str] = DEPENDENCY_SECTIONS):
        self.start = start
        self.required = tuple(required)

    def read(self) -> PackageDetails:
        start = self.start or Path.cwd()
        path = start if start.is_file() else find_manifest(start)
        if path is None:
            raise ManifestNotFoundError(start)

        logger.debug("Reading manifest %s", path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ManifestParseError(f"{path}: not valid JSON ({e})") from e
        return details_from_manifest(data, path, self.required)


class StaticManifestReader:
    """Serve an in-memory manifest."""

    def __init__(
        self,
        data: Mapping[str, Any],
        *,
        path: Path = Path(MANIFEST_NAME),
        required: Iterable[str] = DEPENDENCY_SECTIONS,
    ):
        self.data = data
        self.path = path
        self.required = tuple(required)

    def read(self) -> PackageDetails:
        return details_from_manifest(self.data, self.path, self.required)
