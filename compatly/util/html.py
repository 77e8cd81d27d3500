"""HTML helpers built around justhtml."""

from __future__ import annotations

import logging
import os
from typing import Any

from justhtml import JustHTML

Node = Any
LOGGER = logging.getLogger(__name__)


def parse_document(html: str) -> JustHTML:
    """Parse HTML without sanitization to preserve all structural tags."""
    return JustHTML(html, sanitize=False, safe=False)


def all_nodes(node: Node, selector: str) -> list[Node]:
    """Return all selector matches, guarding selector/runtime errors."""
    try:
        if hasattr(node, "query"):
            return list(node.query(selector))
    except Exception:
        return []
    return []


def raw_text(node: Node | None) -> str:
    """Concatenate the unnormalized data of a node's direct text children."""
    if node is None:
        return ""
    parts: list[str] = []
    for child in getattr(node, "children", None) or []:
        if getattr(child, "name", None) == "#text":
            data = getattr(child, "data", None)
            if isinstance(data, str):
                parts.append(data)
    return "".join(parts)


def extract_style_text(html: str) -> str:
    """Collect the contents of every inline <style> block, separated by blank lines."""
    doc = parse_document(html)
    blocks = [raw_text(node) for node in all_nodes(doc, "style")]
    debug_log(f"extracted {len(blocks)} style block(s)")
    return "\n\n".join(block for block in blocks if block.strip())


def debug_enabled() -> bool:
    """Check debug mode env flag."""
    return os.environ.get("COMPATLY_DEBUG", "").strip() == "1"


def debug_log(message: str) -> None:
    """Emit debug logs to stderr in debug mode only."""
    if debug_enabled():
        LOGGER.debug("%s", message)
