"""Text utility helpers."""

from __future__ import annotations

import math
import re

_WHITESPACE_RE = re.compile(r"\s+")
_SLUG_STRIP_RE = re.compile(r"[^a-z0-9-]")


def normalize_whitespace(value: str) -> str:
    """Collapse repeated whitespace and trim ends."""
    return _WHITESPACE_RE.sub(" ", value).strip()


def slugify(value: str) -> str:
    """Lowercase, hyphenate whitespace and drop anything outside [a-z0-9-]."""
    return _SLUG_STRIP_RE.sub("", _WHITESPACE_RE.sub("-", value.strip().lower()))


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values, like JavaScript's Math.round."""
    return int(math.floor(value + 0.5))


def ellipsize(value: str, width: int) -> str:
    """Shorten long strings while preserving suffix visibility."""
    if width <= 0:
        return ""
    if len(value) <= width:
        return value
    if width <= 1:
        return "…"
    return f"{value[: width - 1]}…"
