from __future__ import annotations

from typing import Any

import pytest

from compatly.index import FeatureIndex, build_index


def _support(**versions: str) -> dict[str, str]:
    return dict(versions)


def make_raw_dataset() -> dict[str, Any]:
    return {
        "flexbox": {
            "name": "Flexbox",
            "description": "Flexbox is a one-dimensional layout system.",
            "compat_features": ["css.properties.flex"],
            "group": ["layout"],
            "spec": "https://drafts.csswg.org/css-flexbox-1/",
            "status": {
                "baseline": "high",
                "baseline_low_date": "2015-09-30",
                "baseline_high_date": "2018-03-30",
                "support": _support(chrome="29", edge="12", firefox="28", safari="9"),
            },
        },
        "gap": {
            "name": "Gap",
            "compat_features": ["css.properties.gap"],
            "status": {
                "baseline": "low",
                "baseline_low_date": "2021-04-26",
                "support": _support(chrome="84", edge="84", firefox="63", safari="14.1"),
            },
        },
        "grid": {
            "name": "Grid",
            "description": "CSS grid is a two-dimensional layout system.",
            "compat_features": ["css.properties.grid-template-columns"],
            "status": {
                "baseline": "high",
                "support": _support(chrome="57", edge="16", firefox="52", safari="10.1"),
            },
        },
        "container-queries": {
            "name": "Container queries",
            "compat_features": ["css.at-rules.container"],
            "status": {
                "baseline": "low",
                "support": _support(chrome="105", edge="105", firefox="110", safari="16"),
            },
        },
        "has": {
            "name": ":has()",
            "compat_features": ["css.selectors.has"],
            "status": {
                "baseline": "low",
                "support": _support(chrome="105", edge="105", firefox="121", safari="15.4"),
            },
        },
        "color-mix": {
            "name": "color-mix()",
            "compat_features": ["css.types.color.color-mix"],
            "status": {
                "baseline": "low",
                "support": _support(chrome="111", edge="111", firefox="113", safari="16.2"),
            },
        },
        "aspect-ratio": {
            "name": "aspect-ratio",
            "compat_features": ["css.properties.aspect-ratio"],
            "status": {
                "baseline": "high",
                "support": _support(chrome="88", edge="88", firefox="89", safari="15"),
            },
        },
        "view-transitions": {
            "name": "View transitions",
            "compat_features": ["css.properties.view-transition-name"],
            "status": {"support": _support(chrome="111", edge="111")},
        },
        "anchor-positioning": {
            "name": "Anchor positioning",
            "description": "Anchor positioning places an element relative to another.",
            "compat_features": ["css.properties.anchor-name"],
            "status": {"baseline": False, "support": _support(chrome="125", edge="125")},
        },
    }


@pytest.fixture
def raw_dataset() -> dict[str, Any]:
    return make_raw_dataset()


@pytest.fixture
def feature_index(raw_dataset: dict[str, Any]) -> FeatureIndex:
    return build_index(raw_dataset).index
