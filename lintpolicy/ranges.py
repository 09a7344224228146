"""
Semver range classification.

A range is judged on its normalised comparator form, not on the shorthand it
was written in: ``^1.2.3``, ``~1.2.3`` and ``>=1.2.3 <2.0.0`` all reduce to a
single ``>=``/``<`` pair.

Two shapes are recognised:
- pinned: one comparator set holding one exact-version comparator
- caret-equivalent: one comparator set holding ``>=X`` then ``<Y``

Anything else is unclassified. That is a policy question for the caller,
not a parse error.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

import nodesemver

from .errors import InvalidRangeError


@dataclass(frozen=True)
class Comparator:
    """One operator/version pair. The exact-version operator is ``""``."""

    operator: str
    version: str


ComparatorSet = tuple[Comparator, ...]


class RangeClassification(str, Enum):
    PINNED = "pinned"
    CARET_EQUIVALENT = "caret"
    UNCLASSIFIED = "unclassified"


class RangeParser(Protocol):
    """Protocol for turning a range string into comparator sets."""

    def parse(self, range_str: str) -> list[ComparatorSet]:
        """
        Parse a range into OR-combined comparator sets.

        Raises:
            InvalidRangeError: if the string is not a valid range.
        """
        ...

    def satisfies(self, version: str, range_str: str) -> bool:
        """
        Check whether an exact version falls inside a range.

        Raises:
            InvalidRangeError: if the range or the version does not parse.
        """
        ...


class NodeSemverRangeParser:
    """RangeParser backed by the node-semver package (npm range semantics)."""

    def __init__(self, loose: bool = False):
        self.loose = loose

    def parse(self, range_str: str) -> list[ComparatorSet]:
        try:
            parsed = nodesemver.make_range(range_str, self.loose)
        except (ValueError, TypeError) as e:
            raise InvalidRangeError(range_str) from e

        return [tuple(_to_comparator(c) for c in comparators) for comparators in parsed.set]

    def satisfies(self, version: str, range_str: str) -> bool:
        # nodesemver.satisfies answers False for a bad range; reject it first.
        self.parse(range_str)
        try:
            return bool(nodesemver.satisfies(version, range_str, self.loose))
        except (ValueError, TypeError) as e:
            raise InvalidRangeError(version) from e


def _to_comparator(raw) -> Comparator:
    operator = raw.operator or ""
    if operator == "=":
        operator = ""
    # The "any version" comparator carries no semver object.
    version = getattr(raw.semver, "version", "") or ""
    return Comparator(operator=operator, version=str(version))


DEFAULT_PARSER: RangeParser = NodeSemverRangeParser()


def is_single_caret_range(range_str: str, parser: RangeParser | None = None) -> bool:
    """True iff the range is one half-open ``>=X <Y`` interval."""
    comparator_sets = (parser or DEFAULT_PARSER).parse(range_str)
    return (
        len(comparator_sets) == 1
        and len(comparator_sets[0]) == 2
        and comparator_sets[0][0].operator == ">="
        and comparator_sets[0][1].operator == "<"
    )


def is_pinned_range(range_str: str, parser: RangeParser | None = None) -> bool:
    """True iff the range accepts exactly one version."""
    comparator_sets = (parser or DEFAULT_PARSER).parse(range_str)
    return (
        len(comparator_sets) == 1
        and len(comparator_sets[0]) == 1
        and comparator_sets[0][0].operator == ""
    )


def classify_range(range_str: str, parser: RangeParser | None = None) -> RangeClassification:
    if is_pinned_range(range_str, parser):
        return RangeClassification.PINNED
    if is_single_caret_range(range_str, parser):
        return RangeClassification.CARET_EQUIVALENT
    return RangeClassification.UNCLASSIFIED


def extract_version_range(spec: str) -> str:
    """
    Return the range part of a ``<name>@<range>`` specifier.

    Names may contain ``@`` (``@scope/pkg``) but ranges never do, so the
    text after the last ``@`` is the range. A spec without ``@`` is
    returned unchanged.
    """
    return spec.split("@")[-1]
