"""Serialize an AnalysisReport to JSON and Markdown."""

from __future__ import annotations

import json
from typing import Any

from .constants import TARGET_PLATFORMS
from .model import AnalysisReport, CanonicalFeature, MatchResult, UsageToken

_PLATFORM_LABELS = {
    "chrome": "Chrome",
    "firefox": "Firefox",
    "safari": "Safari",
    "edge": "Edge",
}


def feature_to_dict(feature: CanonicalFeature) -> dict[str, Any]:
    return {
        "id": feature.identifier,
        "name": feature.name,
        "cssProperty": feature.css_property,
        "status": feature.status,
        "availableSince": feature.available_since,
        "description": feature.description,
        "fallback": feature.fallback,
        "browserSupport": {
            platform: feature.support.get(platform) for platform in TARGET_PLATFORMS
        },
        "group": feature.group,
        "spec": feature.spec,
    }


def match_to_dict(result: MatchResult) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "feature": feature_to_dict(result.feature),
        "cssProperty": result.css_property,
    }
    if result.context:
        payload["context"] = result.context
    return payload


def token_to_dict(token: UsageToken) -> dict[str, Any]:
    return {
        "property": token.property,
        "value": token.value,
        "category": token.category,
        "line": token.line,
    }


def report_to_dict(report: AnalysisReport) -> dict[str, Any]:
    return {
        "compatible": [match_to_dict(item) for item in report.compatible],
        "warnings": [match_to_dict(item) for item in report.warnings],
        "incompatible": [match_to_dict(item) for item in report.incompatible],
        "score": report.score,
        "browserScores": report.platform_scores.as_dict(),
        "scanned": report.scanned,
        "detectedFeatures": [token_to_dict(token) for token in report.tokens],
    }


def render_json(report: AnalysisReport) -> str:
    return json.dumps(report_to_dict(report), indent=2, ensure_ascii=False)


def _bullets(lines: list[str]) -> str:
    return "\n".join(lines) if lines else "None"


def render_markdown(report: AnalysisReport) -> str:
    """Markdown report: summary counts, per-browser support, bucket details and usages."""
    platform_rows = [
        f"| {_PLATFORM_LABELS[platform]} | {count} / {report.total_matched} |"
        for platform, count in report.platform_scores.as_dict().items()
    ]

    compatible = [f"- {item.feature.name} (`{item.css_property}`)" for item in report.compatible]
    warnings: list[str] = []
    for item in report.warnings:
        line = f"- {item.feature.name} ({item.feature.status}): {item.feature.description}"
        if item.feature.fallback:
            line = f"{line} | Fallback: {item.feature.fallback}"
        warnings.append(line)
    incompatible = [
        f"- {item.feature.name}: {item.feature.description}" for item in report.incompatible
    ]
    detected = [
        f"- **{token.property}**: {token.value} ({token.category})" for token in report.tokens
    ]

    if report.incompatible:
        recommendation = (
            "Some features are not available in all target browsers. "
            "Provide fallbacks or avoid them."
        )
    elif report.warnings:
        recommendation = (
            "Some features have limited browser support. Consider providing fallbacks."
        )
    else:
        recommendation = "All detected features are widely supported!"

    sections = [
        "# CSS Baseline Compatibility Report",
        "## Summary",
        "\n".join(
            [
                f"- Total Features Analyzed: {report.scanned}",
                f"- Compatible Features: {len(report.compatible)}",
                f"- Features with Warnings: {len(report.warnings)}",
                f"- Incompatible Features: {len(report.incompatible)}",
                f"- Overall Score: {report.score}/100",
            ]
        ),
        "## Browser Support",
        "\n".join(
            ["| Browser | Supported Features |", "|---------|--------------------|", *platform_rows]
        ),
        "## Compatible Features",
        _bullets(compatible),
        "## Warnings",
        _bullets(warnings),
        "## Incompatible Features",
        _bullets(incompatible),
        "## Detected Features",
        "\n".join(detected) if detected else "No features detected",
        "## Recommendations",
        recommendation,
    ]
    return "\n\n".join(sections)
