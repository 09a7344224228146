"""Shared lint configuration and its dependency/rule policy checks."""

from .errors import (
    InvalidRangeError,
    LintPolicyError,
    ManifestNotFoundError,
    ManifestParseError,
    MissingManifestFieldError,
    PolicyConfigError,
    RegistryLoadError,
)
from .ranges import (
    RangeClassification,
    classify_range,
    extract_version_range,
    is_pinned_range,
    is_single_caret_range,
)
from .registry import overlapping_identifiers, registry_drift

__version__ = "0.1.0"

__all__ = [
    "InvalidRangeError",
    "LintPolicyError",
    "ManifestNotFoundError",
    "ManifestParseError",
    "MissingManifestFieldError",
    "PolicyConfigError",
    "RangeClassification",
    "RegistryLoadError",
    "classify_range",
    "extract_version_range",
    "is_pinned_range",
    "is_single_caret_range",
    "overlapping_identifiers",
    "registry_drift",
]
