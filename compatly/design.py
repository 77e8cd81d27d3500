"""Synthesize stylesheet text from a design-tool feature export."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .exceptions import InputInvalidError
from .util.text import slugify

DESIGN_HEADER = "/* Generated from design export */"


@dataclass(frozen=True)
class DesignFeature:
    node_name: str
    feature_key: str
    value: str | None = None


def parse_design_payload(data: object) -> list[DesignFeature]:
    """Validate a ``{"features": [...]}`` payload and return its features."""
    if not isinstance(data, Mapping) or not isinstance(data.get("features"), list):
        raise InputInvalidError("Invalid design data: expected an object with a 'features' list")

    features: list[DesignFeature] = []
    for position, item in enumerate(data["features"]):
        if not isinstance(item, Mapping):
            raise InputInvalidError(f"Invalid design feature at position {position}")
        node_name = item.get("nodeName")
        feature_key = item.get("featureKey")
        if not isinstance(node_name, str) or not isinstance(feature_key, str):
            raise InputInvalidError(
                f"Design feature at position {position} needs 'nodeName' and 'featureKey'"
            )
        value = item.get("value")
        features.append(
            DesignFeature(
                node_name=node_name,
                feature_key=feature_key,
                value=None if value is None else str(value),
            )
        )
    return features


def _declarations(feature: DesignFeature) -> list[str]:
    value = feature.value or ""
    key = feature.feature_key
    if key == "flexbox":
        direction = "row" if "row" in value else "column"
        return ["display: flex;", f"flex-direction: {direction};"]
    if key == "gap":
        return [f"gap: {value};"]
    if key == "grid":
        return ["display: grid;", "grid-template-columns: repeat(auto-fit, minmax(200px, 1fr));"]
    if key == "backdrop-filter":
        return [f"backdrop-filter: {value};", f"-webkit-backdrop-filter: {value};"]
    if key == "aspect-ratio":
        return [f"aspect-ratio: {value.replace(':', ' / ')};"]
    if key == "border-radius":
        return [f"border-radius: {value};"]
    if key == "transform":
        return [f"transform: rotate({value});"]
    return []


def synthesize_css(features: list[DesignFeature]) -> str:
    """One rule per feature, one declaration per line so the scanner sees each."""
    blocks = [DESIGN_HEADER, ""]
    for feature in features:
        blocks.append(f".{slugify(feature.node_name)} {{")
        blocks.extend(f"  {declaration}" for declaration in _declarations(feature))
        blocks.append("}")
        blocks.append("")
    return "\n".join(blocks)
