"""The scan -> match -> classify -> score pipeline."""

from __future__ import annotations

import logging

from .classify import classify
from .index import FeatureIndex
from .matcher import match_all
from .model import AnalysisReport
from .scanner import scan
from .score import overall_score, platform_scores

LOGGER = logging.getLogger(__name__)


def analyze(text: str, index: FeatureIndex) -> AnalysisReport:
    """Analyze stylesheet text against a prebuilt feature index.

    Pure and synchronous: the index is only read, so one index can serve any
    number of concurrent calls.
    """
    tokens = scan(text)
    matches = match_all(tokens, index)
    buckets = classify(matches)
    LOGGER.debug(
        "scanned %d token(s): %d compatible, %d warnings, %d incompatible",
        len(tokens),
        len(buckets.compatible),
        len(buckets.warnings),
        len(buckets.incompatible),
    )
    return AnalysisReport(
        compatible=buckets.compatible,
        warnings=buckets.warnings,
        incompatible=buckets.incompatible,
        score=overall_score(buckets),
        platform_scores=platform_scores(matches),
        tokens=tuple(tokens),
    )
