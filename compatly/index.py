"""Normalize a web-features dataset into an immutable feature index."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
import logging
from types import MappingProxyType
from typing import cast

from .constants import DEFAULT_STATUS, STRIPPED_PROPERTY_PREFIXES, TARGET_PLATFORMS, BaselineStatus
from .exceptions import DatasetError
from .model import BrowserSupport, CanonicalFeature
from .util.text import normalize_whitespace

LOGGER = logging.getLogger(__name__)


class FeatureIndex(Mapping[str, CanonicalFeature]):
    """Read-only mapping of feature id to feature, iterated in identifier order."""

    def __init__(self, features: Mapping[str, CanonicalFeature]) -> None:
        ordered = {key: features[key] for key in sorted(features)}
        self._features: Mapping[str, CanonicalFeature] = MappingProxyType(ordered)

    def __getitem__(self, identifier: str) -> CanonicalFeature:
        return self._features[identifier]

    def __iter__(self) -> Iterator[str]:
        return iter(self._features)

    def __len__(self) -> int:
        return len(self._features)

    def __repr__(self) -> str:
        return f"FeatureIndex({len(self)} features)"


@dataclass(frozen=True)
class IndexResult:
    index: FeatureIndex
    skipped: int
    skipped_ids: tuple[str, ...] = ()


def normalize_status(baseline: object) -> BaselineStatus:
    """Map an upstream ``status.baseline`` value onto a Baseline tier."""
    if baseline is False:
        return "not-available"
    if baseline == "low":
        return "newly-available"
    if baseline == "high":
        return "widely-available"
    return DEFAULT_STATUS


def derive_css_property(identifier: str, compat_features: object) -> str:
    if not isinstance(compat_features, list) or not compat_features:
        return identifier
    first_key = compat_features[0]
    if not isinstance(first_key, str):
        return identifier
    for prefix in STRIPPED_PROPERTY_PREFIXES:
        first_key = first_key.removeprefix(prefix)
    return first_key


def _optional_text(value: object) -> str | None:
    if isinstance(value, list):
        value = value[0] if value else None
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _is_valid_record(record: object) -> bool:
    if not isinstance(record, Mapping):
        return False
    name = record.get("name")
    status = record.get("status")
    return isinstance(name, str) and bool(name.strip()) and isinstance(status, Mapping)


def _parse_support(status: Mapping[str, object]) -> BrowserSupport:
    support = status.get("support")
    if not isinstance(support, Mapping):
        return BrowserSupport()
    return BrowserSupport(
        **{platform: _optional_text(support.get(platform)) for platform in TARGET_PLATFORMS}
    )


def _build_feature(identifier: str, record: Mapping[str, object]) -> CanonicalFeature:
    name = normalize_whitespace(cast(str, record["name"]))
    status = cast(Mapping[str, object], record["status"])
    description = _optional_text(record.get("description")) or f"{name} feature"
    available_since = _optional_text(status.get("baseline_low_date")) or _optional_text(
        status.get("baseline_high_date")
    )
    return CanonicalFeature(
        identifier=identifier,
        name=name,
        css_property=derive_css_property(identifier, record.get("compat_features")),
        status=normalize_status(status.get("baseline")),
        description=description,
        support=_parse_support(status),
        available_since=available_since,
        fallback=_optional_text(record.get("fallback")),
        group=_optional_text(record.get("group")),
        spec=_optional_text(record.get("spec")),
    )


def unwrap_features(payload: object, *, source: str = "dataset") -> Mapping[str, object]:
    """Accept either a bare id->record mapping or the published data.json layout."""
    if not isinstance(payload, Mapping):
        raise DatasetError(source, reason="expected a JSON object")
    features = payload.get("features")
    if isinstance(features, Mapping):
        return cast(Mapping[str, object], features)
    if "features" in payload:
        raise DatasetError(source, reason="'features' is not an object")
    return cast(Mapping[str, object], payload)


def build_index(raw_dataset: Mapping[str, object]) -> IndexResult:
    """Build a FeatureIndex, skipping records without a name and status object."""
    features: dict[str, CanonicalFeature] = {}
    skipped_ids: list[str] = []

    for identifier, record in raw_dataset.items():
        key = str(identifier).strip()
        if not key or not _is_valid_record(record):
            LOGGER.debug("Skipping feature %r: invalid structure", identifier)
            skipped_ids.append(str(identifier))
            continue
        features[key] = _build_feature(key, cast(Mapping[str, object], record))

    index = FeatureIndex(features)
    LOGGER.info("Loaded %d features (%d skipped)", len(index), len(skipped_ids))
    return IndexResult(index=index, skipped=len(skipped_ids), skipped_ids=tuple(skipped_ids))
