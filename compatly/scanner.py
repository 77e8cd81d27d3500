"""Line-oriented stylesheet scanner.

This is a heuristic, not a CSS grammar. Each line is looked at on its own:

- declarations spread over several lines yield only their first line,
- nested block scope is not tracked,
- ``{``, ``}`` and ``;`` inside strings are treated as structure.

The scanner is total: malformed input yields fewer tokens, never an exception.
"""

from __future__ import annotations

import re

from .model import TokenCategory, UsageToken

_SEGMENT_RE = re.compile(r"([^{};]*)([{};]|$)")
_DECLARATION_RE = re.compile(r"^\s*([a-z-]+)\s*:\s*(.+?)\s*$", re.IGNORECASE)
_AT_RULE_RE = re.compile(r"^@([a-z-]+)", re.IGNORECASE)
_COMMENT_PREFIXES = ("/*", "//")
_SELECTOR_TAIL_RE = re.compile(r"^[\w-]+(?:\([^)]*\))?\s*,")

_CATEGORY_KEYWORDS: tuple[tuple[tuple[str, ...], TokenCategory], ...] = (
    (("grid", "flex", "gap"), "layout"),
    (("color",), "color"),
    (("filter",), "visual-effects"),
    (("transform",), "transform"),
    (("margin", "padding"), "spacing"),
    (("border",), "border"),
)


def categorize_property(name: str) -> TokenCategory:
    """Coarse category for a property name, by substring."""
    lowered = name.lower()
    if lowered.startswith("@"):
        return "at-rule"
    for keywords, category in _CATEGORY_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return category
    return "other"


def _looks_like_selector(segment: str, value: str) -> bool:
    if value.startswith(":"):
        return True
    if not segment.rstrip().endswith(","):
        return False
    # Pseudo-classes never have whitespace after the colon; declarations usually do.
    if segment.partition(":")[2][:1].isspace():
        return False
    return _SELECTOR_TAIL_RE.match(value) is not None


def _declarations(line: str, opens_block: bool = False) -> list[tuple[str, str]]:
    found: list[tuple[str, str]] = []
    for match in _SEGMENT_RE.finditer(line):
        segment, terminator = match.group(1), match.group(2)
        # Text before "{" is a selector or at-rule prelude, even when the brace
        # sits on the next line.
        if terminator == "{" or (opens_block and not terminator) or not segment.strip():
            continue
        declaration = _DECLARATION_RE.match(segment)
        # "a:hover,", "a:not(.x)," and "a::before" are selectors, not declarations.
        if declaration and not _looks_like_selector(segment, declaration.group(2)):
            found.append((declaration.group(1), declaration.group(2)))
        if not terminator:
            break
    return found


def scan_line(line: str, line_number: int, opens_block: bool = False) -> list[UsageToken]:
    """Tokens found on a single source line.

    ``opens_block`` says the next non-blank line starts with ``{``, so whatever
    trails this line is a selector.
    """
    trimmed = line.strip()
    if not trimmed or trimmed.startswith(_COMMENT_PREFIXES):
        return []

    tokens = [
        UsageToken(
            property=name,
            value=value,
            category=categorize_property(name),
            line=line_number,
        )
        for name, value in _declarations(trimmed, opens_block)
    ]

    at_rule = _AT_RULE_RE.match(trimmed)
    if at_rule:
        tokens.append(
            UsageToken(
                property=f"@{at_rule.group(1)}",
                value=trimmed,
                category="at-rule",
                line=line_number,
            )
        )

    if ":has(" in trimmed:
        tokens.append(
            UsageToken(property=":has()", value=trimmed, category="selector", line=line_number)
        )

    return tokens


def _block_openers(lines: list[str]) -> list[bool]:
    """For each line, whether the next non-blank line starts with ``{``."""
    flags = [False] * len(lines)
    opens = False
    for position in range(len(lines) - 1, -1, -1):
        flags[position] = opens
        if lines[position].strip():
            opens = lines[position].lstrip().startswith("{")
    return flags


def scan(text: str) -> list[UsageToken]:
    """Extract candidate feature usages from stylesheet text, in source order."""
    lines = text.split("\n")
    tokens: list[UsageToken] = []
    for line_number, (line, opens_block) in enumerate(zip(lines, _block_openers(lines)), start=1):
        tokens.extend(scan_line(line, line_number, opens_block))
    return tokens
