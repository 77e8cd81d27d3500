"""Loading the web-features dataset from disk or the network."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .constants import DATASET_URL
from .exceptions import ContentError, DatasetError
from .http import fetch_json
from .index import IndexResult, build_index, unwrap_features

LOGGER = logging.getLogger(__name__)


def load_dataset_file(path: str | Path) -> Any:
    """Read a dataset JSON file."""
    source = Path(path)
    try:
        raw = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise DatasetError(str(source), reason=exc.strerror or exc.__class__.__name__) from exc
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise DatasetError(str(source), reason=f"not valid JSON ({exc.msg})") from exc


def fetch_dataset(url: str = DATASET_URL) -> Any:
    """Download the published web-features data.json."""
    try:
        return fetch_json(url)
    except ContentError as exc:
        raise DatasetError(url, reason="response was not valid JSON") from exc


def load_index(path: str | Path | None = None, url: str | None = None) -> IndexResult:
    """Build the feature index from a local file when given, else from ``url``."""
    if path is not None:
        source = str(path)
        payload = load_dataset_file(path)
    else:
        source = url or DATASET_URL
        payload = fetch_dataset(source)
    LOGGER.debug("building feature index from %s", source)
    return build_index(unwrap_features(payload, source=source))
