"""
Dependency pinning policy.

Every checked dependency range must classify as one of the classifications
its manifest section allows. Anything else is a violation. Ranges that do
not parse at all raise InvalidRangeError instead of being reported.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .errors import PolicyConfigError
from .manifest import DEPENDENCIES, DEPENDENCY_SECTIONS, PEER_DEPENDENCIES, ManifestReader, PackageDetails
from .ranges import DEFAULT_PARSER, RangeClassification, RangeParser, classify_range, extract_version_range

logger = logging.getLogger(__name__)

ACCEPTED = frozenset({RangeClassification.PINNED, RangeClassification.CARET_EQUIVALENT})


def _default_sections() -> dict[str, frozenset[RangeClassification]]:
    return {DEPENDENCIES: ACCEPTED, PEER_DEPENDENCIES: ACCEPTED}


@dataclass(frozen=True)
class PinningPolicy:
    """Allowed range classifications per manifest section."""

    sections: dict[str, frozenset[RangeClassification]] = field(default_factory=_default_sections)
    require_peer_dev_pins: bool = False


DEFAULT_POLICY = PinningPolicy()


@dataclass(frozen=True)
class PolicyViolation:
    section: str
    name: str
    spec: str
    classification: RangeClassification
    message: str

    def __str__(self) -> str:
        return f"{self.section}: {self.name}@{self.spec} - {self.message}"


def check_ranges(
    section: str,
    deps: Mapping[str, str],
    allowed: Iterable[RangeClassification],
    *,
    parser: RangeParser | None = None,
) -> list[PolicyViolation]:
    """Report every dependency in `deps` whose range is not of an allowed shape."""
    allowed_set = frozenset(allowed)
    allowed_names = ", ".join(sorted(c.value for c in allowed_set)) or "nothing"

    violations: list[PolicyViolation] = []
    for name, spec in deps.items():
        classification = classify_range(extract_version_range(spec), parser)
        if classification in allowed_set:
            continue
        violations.append(
            PolicyViolation(
                section=section,
                name=name,
                spec=spec,
                classification=classification,
                message=f"range is {classification.value}; {section} allow {allowed_names}",
            )
        )
    return violations


def check_peer_dev_alignment(
    details: PackageDetails,
    *,
    parser: RangeParser | None = None,
) -> list[PolicyViolation]:
    """
    Every peer dependency must also be a pinned dev dependency whose version
    satisfies the peer range, so the test suite runs against a supported
    version of each peer.
    """
    parser = parser or DEFAULT_PARSER
    violations: list[PolicyViolation] = []

    for name, peer_spec in details.peer_dependencies.items():
        peer_range = extract_version_range(peer_spec)
        dev_spec = details.dev_dependencies.get(name)
        if dev_spec is None:
            violations.append(
                PolicyViolation(
                    section=PEER_DEPENDENCIES,
                    name=name,
                    spec=peer_spec,
                    classification=classify_range(peer_range, parser),
                    message="peer dependency is not also a dev dependency",
                )
            )
            continue

        dev_range = extract_version_range(dev_spec)
        dev_classification = classify_range(dev_range, parser)
        # "*", "x" and "" are single empty-operator comparators with no version.
        dev_version = parser.parse(dev_range)[0][0].version if dev_classification is RangeClassification.PINNED else ""
        if not dev_version:
            message = "dev dependency for a peer must be pinned"
        elif not parser.satisfies(dev_version, peer_range):
            message = f"pinned dev version {dev_version} is outside peer range {peer_range}"
        else:
            continue

        violations.append(
            PolicyViolation(
                section=PEER_DEPENDENCIES,
                name=name,
                spec=dev_spec,
                classification=dev_classification,
                message=message,
            )
        )
    return violations


def validate_manifest(
    reader: ManifestReader,
    policy: PinningPolicy = DEFAULT_POLICY,
    *,
    parser: RangeParser | None = None,
) -> list[PolicyViolation]:
    """Read the manifest once and check it against the policy."""
    details = reader.read()

    violations: list[PolicyViolation] = []
    for section, allowed in policy.sections.items():
        violations.extend(check_ranges(section, details.section(section), allowed, parser=parser))

    if policy.require_peer_dev_pins:
        violations.extend(check_peer_dev_alignment(details, parser=parser))

    logger.info("Checked %s: %d policy violation(s)", details.path, len(violations))
    return violations


def load_policy(path: Path) -> PinningPolicy:
    """
    Load a pinning policy from TOML.

    Example:

        require_peer_dev_pins = true

        [sections]
        dependencies = ["pinned"]
        peerDependencies = ["caret"]
    """
    import tomllib

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise PolicyConfigError(f"{path}: not valid TOML ({e})") from e

    raw_sections = data.get("sections", {})
    if not isinstance(raw_sections, dict):
        raise PolicyConfigError("sections must be a table")

    sections: dict[str, frozenset[RangeClassification]] = {}
    for section, names in raw_sections.items():
        if section not in DEPENDENCY_SECTIONS:
            raise PolicyConfigError(f"unknown manifest section: {section}")
        if not isinstance(names, list):
            raise PolicyConfigError(f"sections.{section} must be a list")
        try:
            sections[section] = frozenset(RangeClassification(str(n).strip().lower()) for n in names)
        except ValueError as e:
            raise PolicyConfigError(f"sections.{section}: {e}") from e

    require_peer_dev_pins = data.get("require_peer_dev_pins", False)
    if not isinstance(require_peer_dev_pins, bool):
        raise PolicyConfigError("require_peer_dev_pins must be a boolean")

    if not sections:
        sections = _default_sections()

    return PinningPolicy(sections=sections, require_peer_dev_pins=require_peer_dev_pins)
