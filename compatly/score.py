"""Compatibility scoring."""

from __future__ import annotations

from collections.abc import Iterable

from .classify import Buckets
from .constants import BUCKET_WEIGHTS, NOT_SUPPORTED_SENTINELS, TARGET_PLATFORMS
from .model import MatchResult, PlatformScores
from .util.text import round_half_up


def overall_score(buckets: Buckets) -> int:
    """Weighted share of matched features, 0..100; 100 when nothing matched."""
    total = buckets.total
    if total == 0:
        return 100
    weighted = (
        len(buckets.compatible) * BUCKET_WEIGHTS["compatible"]
        + len(buckets.warnings) * BUCKET_WEIGHTS["warnings"]
        + len(buckets.incompatible) * BUCKET_WEIGHTS["incompatible"]
    )
    return round_half_up(weighted / total * 100)


def is_supported(version: str | None) -> bool:
    if version is None:
        return False
    return version.strip().lower() not in NOT_SUPPORTED_SENTINELS


def platform_scores(matches: Iterable[MatchResult]) -> PlatformScores:
    """Count, per target platform, the matched features it supports."""
    counts = dict.fromkeys(TARGET_PLATFORMS, 0)
    for result in matches:
        for platform in TARGET_PLATFORMS:
            if is_supported(result.feature.support.get(platform)):
                counts[platform] += 1
    return PlatformScores(**counts)
