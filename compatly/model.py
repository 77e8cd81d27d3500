"""Data models for feature indexing and stylesheet analysis."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .constants import TARGET_PLATFORMS, BaselineStatus

TokenCategory = Literal[
    "layout",
    "color",
    "visual-effects",
    "transform",
    "spacing",
    "border",
    "at-rule",
    "selector",
    "other",
]


@dataclass(frozen=True)
class BrowserSupport:
    chrome: str | None = None
    firefox: str | None = None
    safari: str | None = None
    edge: str | None = None

    def get(self, platform: str) -> str | None:
        if platform not in TARGET_PLATFORMS:
            return None
        return getattr(self, platform)


@dataclass(frozen=True)
class CanonicalFeature:
    identifier: str
    name: str
    css_property: str
    status: BaselineStatus
    description: str
    support: BrowserSupport
    available_since: str | None = None
    fallback: str | None = None
    group: str | None = None
    spec: str | None = None


@dataclass(frozen=True)
class UsageToken:
    property: str
    value: str
    category: TokenCategory
    line: int

    @property
    def usage_text(self) -> str:
        """Source text shown for a match: the declaration, or the whole line."""
        if self.category in ("at-rule", "selector"):
            return self.value
        return f"{self.property}: {self.value}"


@dataclass(frozen=True)
class MatchResult:
    feature: CanonicalFeature
    css_property: str
    context: str | None = None


@dataclass(frozen=True)
class PlatformScores:
    chrome: int
    firefox: int
    safari: int
    edge: int

    def as_dict(self) -> dict[str, int]:
        return {
            "chrome": self.chrome,
            "firefox": self.firefox,
            "safari": self.safari,
            "edge": self.edge,
        }


@dataclass(frozen=True)
class AnalysisReport:
    compatible: tuple[MatchResult, ...]
    warnings: tuple[MatchResult, ...]
    incompatible: tuple[MatchResult, ...]
    score: int
    platform_scores: PlatformScores
    tokens: tuple[UsageToken, ...] = ()

    @property
    def scanned(self) -> int:
        return len(self.tokens)

    @property
    def total_matched(self) -> int:
        return len(self.compatible) + len(self.warnings) + len(self.incompatible)

    def matches(self) -> tuple[MatchResult, ...]:
        """All matches, bucket by bucket."""
        return self.compatible + self.warnings + self.incompatible
