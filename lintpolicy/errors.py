"""Exception hierarchy for lintpolicy.

Library code raises these; the CLI layer turns them into user-facing errors.
"""

from __future__ import annotations

from pathlib import Path


class LintPolicyError(Exception):
    """Base class for all lintpolicy errors."""


class InvalidRangeError(LintPolicyError, ValueError):
    """A version-range string is not a valid semver range."""

    def __init__(self, range_str: str):
        super().__init__(f"Invalid semver range: {range_str!r}")
        self.range = range_str


class ManifestNotFoundError(LintPolicyError, FileNotFoundError):
    """No package manifest could be located."""

    def __init__(self, start: Path):
        super().__init__(f"No package.json found in {start} or any parent directory")
        self.start = start


class MissingManifestFieldError(LintPolicyError, KeyError):
    """A required dependency mapping is absent from the manifest."""

    def __init__(self, field: str, path: Path):
        super().__init__(field)
        self.field = field
        self.path = path

    def __str__(self) -> str:
        return f"{self.path}: manifest has no '{self.field}' mapping"


class RegistryLoadError(LintPolicyError, ValueError):
    """A rule registry snapshot has an unsupported shape."""


class PolicyConfigError(LintPolicyError, ValueError):
    """A pinning policy file is malformed."""


class ManifestParseError(LintPolicyError, ValueError):
    """A package manifest is not valid JSON."""
