from __future__ import annotations

from typing import Any

import pytest

from compatly.index import FeatureIndex, build_index
from compatly.matcher import match, match_all
from compatly.model import UsageToken
from compatly.scanner import scan


def _token(prop: str, value: str = "", line: int = 1) -> UsageToken:
    return UsageToken(property=prop, value=value, category="other", line=line)


def _record(name: str, compat: str | None = None, baseline: object = "high") -> dict[str, Any]:
    record: dict[str, Any] = {"name": name, "status": {"baseline": baseline}}
    if compat:
        record["compat_features"] = [compat]
    return record


@pytest.mark.parametrize(
    ("prop", "value", "expected"),
    [
        ("display", "flex", "flexbox"),
        ("display", "inline-flex", "flexbox"),
        ("display", "grid", "grid"),
        ("DISPLAY", "Grid", "grid"),
        ("gap", "1rem", "gap"),
        ("@container", "@container (min-width: 400px) {", "container-queries"),
        ("background", "color-mix(in srgb, red, blue)", "color-mix"),
        (":has()", "li:has(> img) {", "has"),
    ],
)
def test_special_rules(feature_index: FeatureIndex, prop: str, value: str, expected: str) -> None:
    feature = match(_token(prop, value), feature_index)
    assert feature is not None
    assert feature.identifier == expected


@pytest.mark.parametrize(
    ("prop", "expected"),
    [
        ("aspect-ratio", "aspect-ratio"),
        ("view-transition-name", "view-transitions"),
        ("anchor-name", "anchor-positioning"),
        ("grid-template-columns", "grid"),
        ("Flex", "flexbox"),
    ],
)
def test_direct_containment(feature_index: FeatureIndex, prop: str, expected: str) -> None:
    feature = match(_token(prop, "x"), feature_index)
    assert feature is not None
    assert feature.identifier == expected


@pytest.mark.parametrize(
    ("prop", "value"),
    [
        ("widows", "3"),
        ("flex-direction", "row"),
        ("display", "block"),
        ("@media", "@media screen {"),
        ("", "flex"),
    ],
)
def test_unknown_usages_are_dropped(feature_index: FeatureIndex, prop: str, value: str) -> None:
    assert match(_token(prop, value), feature_index) is None


def test_direct_containment_beats_special_rules() -> None:
    index = build_index(
        {
            "grid": _record("Grid", "css.properties.grid-template-columns"),
            "display-box": _record("Display", "css.properties.display"),
        }
    ).index

    feature = match(_token("display", "grid"), index)

    assert feature is not None
    assert feature.identifier == "display-box"


def test_direct_containment_is_independent_of_dataset_order() -> None:
    records = {
        "gap": _record("Gap", "css.properties.gap"),
        "column-gap": _record("Column gap", "css.properties.column-gap"),
    }
    forward = build_index(records).index
    backward = build_index(dict(reversed(list(records.items())))).index

    first = match(_token("gap", "1px"), forward)
    second = match(_token("gap", "1px"), backward)

    assert first is not None and second is not None
    assert first.identifier == second.identifier == "column-gap"


def test_special_rule_needs_its_feature_in_the_index() -> None:
    index = build_index({"grid": _record("Grid", "css.properties.grid-template-columns")}).index

    assert match(_token("display", "flex"), index) is None
    feature = match(_token("display", "grid"), index)
    assert feature is not None and feature.identifier == "grid"


@pytest.mark.parametrize(
    ("prop", "value", "expected"),
    [
        ("backdrop-filter", "blur(4px)", "backdrop-filter"),
        ("-webkit-backdrop-filter", "blur(4px)", "backdrop-filter"),
        ("@layer", "@layer base;", "cascade-layers"),
        ("scroll-snap-type", "x mandatory", "scroll-snap"),
        ("margin-inline", "auto", "logical-properties"),
        ("padding-block-start", "1rem", "logical-properties"),
        ("view-transition-name", "hero", "view-transitions"),
        ("position-anchor", "--tip", "anchor-positioning"),
        ("@scope", "@scope (.card) {", "scope"),
        ("@property", "@property --x {", "registered-custom-properties"),
        ("text-wrap", "balance", "text-wrap-balance"),
        ("text-wrap-style", "pretty", "text-wrap-pretty"),
        ("grid-template-rows", "subgrid", "subgrid"),
    ],
)
def test_special_rules_by_identifier(prop: str, value: str, expected: str) -> None:
    # Ids only, no compat features: nothing can match by containment of a real property.
    index = build_index({expected: _record(expected.upper())}).index
    feature = match(_token(prop, value), index)
    assert feature is not None
    assert feature.identifier == expected


def test_match_all_keeps_first_match_per_feature(feature_index: FeatureIndex) -> None:
    css = ".a { display: flex; }\n.b { display: inline-flex; gap: 1px; }\n.c { gap: 2px; }"

    results = match_all(scan(css), feature_index)

    assert [(result.feature.identifier, result.context) for result in results] == [
        ("flexbox", "Line 1"),
        ("gap", "Line 2"),
    ]
    assert results[0].css_property == "display: flex"


def test_match_all_shares_feature_instances(feature_index: FeatureIndex) -> None:
    results = match_all(scan("gap: 1px;"), feature_index)
    assert results[0].feature is feature_index["gap"]
