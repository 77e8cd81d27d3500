"""Constants used across pycompatly."""

from __future__ import annotations

from typing import Final, Literal

BaselineStatus = Literal["widely-available", "newly-available", "limited", "not-available"]

DATASET_URL: Final[str] = "https://unpkg.com/web-features/data.json"

TARGET_PLATFORMS: Final[tuple[str, ...]] = (
    "chrome",
    "firefox",
    "safari",
    "edge",
)

DEFAULT_STATUS: Final[BaselineStatus] = "limited"

STRIPPED_PROPERTY_PREFIXES: Final[tuple[str, ...]] = (
    "css.properties.",
    "css.selectors.",
    "css.types.",
)

NOT_SUPPORTED_SENTINELS: Final[frozenset[str]] = frozenset({"", "false", "no"})

BUCKET_WEIGHTS: Final[dict[str, float]] = {
    "compatible": 1.0,
    "warnings": 0.5,
    "incompatible": 0.0,
}

STATUS_ICON_MAP: Final[dict[str, str]] = {
    "widely-available": "✅",
    "newly-available": "🆕",
    "limited": "⚠️",
    "not-available": "❌",
}

STATUS_STYLE_MAP: Final[dict[str, str]] = {
    "widely-available": "green",
    "newly-available": "blue",
    "limited": "yellow",
    "not-available": "red",
}

SKIPPED_ENTRIES_LINE: Final[str] = (
    "{count} dataset entries were skipped (missing name or status)."
)

MAX_INPUT_CHARS: Final[int] = 2_000_000
DEFAULT_TIMEOUT_SECONDS: Final[float] = 10.0
