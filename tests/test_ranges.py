from __future__ import annotations

import pytest

from lintpolicy.errors import InvalidRangeError
from lintpolicy.ranges import (
    NodeSemverRangeParser,
    RangeClassification,
    classify_range,
    extract_version_range,
    is_pinned_range,
    is_single_caret_range,
)


@pytest.mark.parametrize(
    "range_str",
    [
        ">=1.2.3 <2.0.0",
        ">=0.0.1 <0.0.2",
        ">=2.0.0 <3.0.0",
        "^1.2.3",
        "^0.4.0",
        "~1.2.3",
        "1.x",
    ],
)
def test_half_open_ranges_are_caret_equivalent(range_str: str) -> None:
    assert is_single_caret_range(range_str) is True
    assert is_pinned_range(range_str) is False
    assert classify_range(range_str) is RangeClassification.CARET_EQUIVALENT


@pytest.mark.parametrize("range_str", ["1.2.3", "0.0.1", "10.20.30", "=1.2.3", "1.0.0-beta.1", "*", "x", ""])
def test_exact_versions_are_pinned(range_str: str) -> None:
    assert is_pinned_range(range_str) is True
    assert is_single_caret_range(range_str) is False
    assert classify_range(range_str) is RangeClassification.PINNED


@pytest.mark.parametrize("range_str", ["1.x || 2.x", "^1.0.0 || ^2.0.0", "1.2.3 || 1.2.4"])
def test_or_combined_ranges_are_neither(range_str: str) -> None:
    assert is_single_caret_range(range_str) is False
    assert is_pinned_range(range_str) is False
    assert classify_range(range_str) is RangeClassification.UNCLASSIFIED


@pytest.mark.parametrize(
    "range_str",
    [
        ">=1.0.0",
        "<2.0.0 >=1.0.0",
        "1.2.3 - 2.3.4",
        ">1.0.0 <2.0.0",
    ],
)
def test_other_shapes_are_unclassified(range_str: str) -> None:
    assert classify_range(range_str) is RangeClassification.UNCLASSIFIED


def test_invalid_range_raises() -> None:
    with pytest.raises(InvalidRangeError) as exc_info:
        is_pinned_range("not-a-version")
    assert exc_info.value.range == "not-a-version"

    with pytest.raises(ValueError):
        is_single_caret_range("not-a-version")


def test_classifiers_are_idempotent() -> None:
    for range_str in ["^1.2.3", "1.2.3", "1.x || 2.x"]:
        first = (is_pinned_range(range_str), is_single_caret_range(range_str))
        second = (is_pinned_range(range_str), is_single_caret_range(range_str))
        assert first == second


def test_parser_exposes_normalised_comparators() -> None:
    comparator_sets = NodeSemverRangeParser().parse("^1.2.3")
    assert len(comparator_sets) == 1
    low, high = comparator_sets[0]
    assert (low.operator, low.version) == (">=", "1.2.3")
    assert high.operator == "<"
    assert high.version.startswith("2.0.0")


def test_parser_satisfies() -> None:
    parser = NodeSemverRangeParser()
    assert parser.satisfies("1.4.0", "^1.2.3") is True
    assert parser.satisfies("2.0.0", "^1.2.3") is False


def test_parser_satisfies_rejects_bad_input() -> None:
    parser = NodeSemverRangeParser()

    with pytest.raises(InvalidRangeError) as exc_info:
        parser.satisfies("1.0.0", "not-a-version")
    assert exc_info.value.range == "not-a-version"

    with pytest.raises(InvalidRangeError):
        parser.satisfies("not-a-version", "^1.0.0")


def test_any_version_ranges_have_no_version() -> None:
    for range_str in ["*", "x", ""]:
        ((comparator,),) = NodeSemverRangeParser().parse(range_str)
        assert comparator.operator == ""
        assert comparator.version == ""


def test_classifiers_use_injected_parser(fake_parser) -> None:
    assert is_pinned_range("1.0.0", fake_parser) is True
    assert is_single_caret_range("caret-ish", fake_parser) is True
    assert classify_range("three", fake_parser) is RangeClassification.UNCLASSIFIED
    assert "caret-ish" in fake_parser.calls

    with pytest.raises(InvalidRangeError):
        classify_range("unknown", fake_parser)


@pytest.mark.parametrize(
    ("spec", "expected"),
    [
        ("left-pad@1.2.3", "1.2.3"),
        ("@scope/pkg@^2.0.0", "^2.0.0"),
        ("npm:@scope/pkg@>=1.0.0 <2.0.0", ">=1.0.0 <2.0.0"),
        ("no-at-sign", "no-at-sign"),
        ("^1.2.3", "^1.2.3"),
        ("trailing@", ""),
    ],
)
def test_extract_version_range(spec: str, expected: str) -> None:
    assert extract_version_range(spec) == expected
    assert extract_version_range(spec) == extract_version_range(spec)
