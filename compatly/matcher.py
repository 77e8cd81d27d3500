"""Resolve scanned usage tokens to canonical features."""

from __future__ import annotations

from collections.abc import Callable, Iterable
import logging

from .index import FeatureIndex
from .model import CanonicalFeature, MatchResult, UsageToken

LOGGER = logging.getLogger(__name__)

_Predicate = Callable[[str, str], bool]


def _starts(prefix: str) -> _Predicate:
    return lambda prop, value: prop.startswith(prefix) or value.startswith(prefix)


# (predicate(property, value), feature id). Both arguments are lowercased.
# Order is significant: the first rule whose predicate holds and whose feature
# exists in the index wins.
SPECIAL_RULES: tuple[tuple[_Predicate, str], ...] = (
    (lambda prop, value: prop == "display" and "flex" in value, "flexbox"),
    (lambda prop, value: prop == "display" and "grid" in value, "grid"),
    (lambda prop, value: prop == "gap", "gap"),
    (_starts("@container"), "container-queries"),
    (lambda prop, value: "backdrop-filter" in prop, "backdrop-filter"),
    (lambda prop, value: prop == "aspect-ratio", "aspect-ratio"),
    (_starts("@layer"), "cascade-layers"),
    (lambda prop, value: "color-mix" in value, "color-mix"),
    (lambda prop, value: "scroll-snap" in prop, "scroll-snap"),
    (
        lambda prop, value: "margin-inline" in prop or "padding-block" in prop,
        "logical-properties",
    ),
    (lambda prop, value: "view-transition" in prop, "view-transitions"),
    (lambda prop, value: "anchor" in prop, "anchor-positioning"),
    (lambda prop, value: prop == ":has()", "has"),
    (_starts("@scope"), "scope"),
    (_starts("@property"), "registered-custom-properties"),
    (lambda prop, value: prop.startswith("text-wrap") and "balance" in value, "text-wrap-balance"),
    (lambda prop, value: prop.startswith("text-wrap") and "pretty" in value, "text-wrap-pretty"),
    (lambda prop, value: prop.startswith("grid-template") and "subgrid" in value, "subgrid"),
)


def _direct_match(prop: str, index: FeatureIndex) -> CanonicalFeature | None:
    for feature in index.values():
        if prop in feature.css_property.lower():
            return feature
    return None


def _special_match(prop: str, value: str, index: FeatureIndex) -> CanonicalFeature | None:
    for predicate, feature_id in SPECIAL_RULES:
        feature = index.get(feature_id)
        if feature is not None and predicate(prop, value):
            return feature
    return None


def match(token: UsageToken, index: FeatureIndex) -> CanonicalFeature | None:
    """Return the feature a token uses, or None when no rule applies.

    Direct containment of the property name in a feature's css property is
    tried first, over the whole index in identifier order. Only when that
    finds nothing are the special-case rules consulted.
    """
    prop = token.property.strip().lower()
    if not prop:
        return None
    value = token.value.strip().lower()
    return _direct_match(prop, index) or _special_match(prop, value, index)


def match_all(tokens: Iterable[UsageToken], index: FeatureIndex) -> list[MatchResult]:
    """Match tokens in order, keeping only the first match per feature."""
    results: list[MatchResult] = []
    seen: set[str] = set()
    for token in tokens:
        feature = match(token, index)
        if feature is None:
            continue
        if feature.identifier in seen:
            continue
        seen.add(feature.identifier)
        results.append(
            MatchResult(
                feature=feature,
                css_property=token.usage_text,
                context=f"Line {token.line}" if token.line else None,
            )
        )
    LOGGER.debug("matched %d unique feature(s)", len(results))
    return results
