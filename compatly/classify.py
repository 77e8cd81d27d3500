"""Route matched features into compatibility buckets."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .model import MatchResult

_BUCKET_BY_STATUS = {
    "widely-available": "compatible",
    "newly-available": "warnings",
    "limited": "warnings",
    "not-available": "incompatible",
}


@dataclass(frozen=True)
class Buckets:
    compatible: tuple[MatchResult, ...] = ()
    warnings: tuple[MatchResult, ...] = ()
    incompatible: tuple[MatchResult, ...] = ()

    @property
    def total(self) -> int:
        return len(self.compatible) + len(self.warnings) + len(self.incompatible)


def bucket_for(status: str) -> str:
    # Index normalization guarantees one of the four tiers; anything else is
    # treated like "limited".
    return _BUCKET_BY_STATUS.get(status, "warnings")


def classify(matches: Iterable[MatchResult]) -> Buckets:
    """Split matches by Baseline status, keeping detection order in each bucket."""
    grouped: dict[str, list[MatchResult]] = {
        "compatible": [],
        "warnings": [],
        "incompatible": [],
    }
    for result in matches:
        grouped[bucket_for(result.feature.status)].append(result)
    return Buckets(
        compatible=tuple(grouped["compatible"]),
        warnings=tuple(grouped["warnings"]),
        incompatible=tuple(grouped["incompatible"]),
    )
