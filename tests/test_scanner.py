from __future__ import annotations

import pytest

from compatly.model import UsageToken
from compatly.scanner import categorize_property, scan, scan_line


@pytest.mark.parametrize(
    ("name", "category"),
    [
        ("grid-template-columns", "layout"),
        ("flex-direction", "layout"),
        ("column-gap", "layout"),
        ("background-color", "color"),
        ("backdrop-filter", "visual-effects"),
        ("transform-origin", "transform"),
        ("margin-inline", "spacing"),
        ("padding-block", "spacing"),
        ("border-radius", "border"),
        ("widows", "other"),
        ("@media", "at-rule"),
    ],
)
def test_categorize_property(name: str, category: str) -> None:
    assert categorize_property(name) == category


def test_scan_multiline_rule() -> None:
    css = ".card {\n  display: grid;\n  gap: 1rem\n}\n"

    tokens = scan(css)

    assert tokens == [
        UsageToken(property="display", value="grid", category="other", line=2),
        UsageToken(property="gap", value="1rem", category="layout", line=3),
    ]


def test_scan_single_line_rule_yields_each_declaration() -> None:
    tokens = scan(".c { display: flex; gap: 1rem; }")

    assert [(token.property, token.value) for token in tokens] == [
        ("display", "flex"),
        ("gap", "1rem"),
    ]
    assert all(token.line == 1 for token in tokens)


def test_scan_skips_blank_and_comment_lines() -> None:
    css = "\n   \n/* display: flex; */\n// gap: 1rem;\ncolor: red;"

    tokens = scan(css)

    assert len(tokens) == 1
    assert tokens[0].property == "color"
    assert tokens[0].line == 5


def test_scan_at_rules() -> None:
    tokens = scan("@container (min-width: 400px) {\n@layer base, components;\n")

    assert [(token.property, token.category, token.line) for token in tokens] == [
        ("@container", "at-rule", 1),
        ("@layer", "at-rule", 2),
    ]
    assert tokens[0].value == "@container (min-width: 400px) {"


def test_scan_has_selector_adds_token() -> None:
    tokens = scan_line("li:has(> img) { opacity: 0.5; }", 7)

    assert [(token.property, token.category) for token in tokens] == [
        ("opacity", "other"),
        (":has()", "selector"),
    ]
    assert tokens[1].value == "li:has(> img) { opacity: 0.5; }"
    assert tokens[1].line == 7


@pytest.mark.parametrize(
    "line",
    [
        "a:hover {",
        "a:hover,",
        "a::before {",
        "p::first-line",
        ".card > .title {",
        "}",
    ],
)
def test_selectors_are_not_declarations(line: str) -> None:
    assert scan_line(line, 1) == []


@pytest.mark.parametrize(
    "text",
    [
        "}}}{{{;;;",
        "::::",
        "color:",
        ": red;",
        "\"{;}\" : 'x'",
        "ünïcødé: ☃;",
        "\x00\x01\x02",
        "@",
        "\r\n\r\n",
    ],
)
def test_scan_never_raises_on_malformed_input(text: str) -> None:
    assert isinstance(scan(text), list)


def test_scan_handles_windows_line_endings() -> None:
    tokens = scan("a {\r\n  gap: 2px;\r\n}\r\n")
    assert [(token.property, token.value, token.line) for token in tokens] == [("gap", "2px", 2)]


def test_usage_text() -> None:
    declaration, at_rule = scan("gap: 1rem;\n@layer base;")
    assert declaration.usage_text == "gap: 1rem"
    assert at_rule.usage_text == "@layer base;"


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("  background: color-mix(in srgb, red 50%, blue),", "background"),
        ("  transition: opacity .3s,", "transition"),
        ("  font-family: Inter,", "font-family"),
    ],
)
def test_first_line_of_multiline_value_is_a_declaration(line: str, expected: str) -> None:
    tokens = scan_line(line, 2)
    assert [token.property for token in tokens] == [expected]


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("a:not(.x),", []),
        ("a:hover, a:focus,", []),
        ("li:has(> img),", [":has()"]),
    ],
)
def test_selector_lists_are_not_declarations(line: str, expected: list[str]) -> None:
    assert [token.property for token in scan_line(line, 1)] == expected


def test_multiline_value_keeps_its_function() -> None:
    css = ".hero {\n  background: color-mix(in srgb, red 50%, blue),\n    url(a.png);\n}\n"

    tokens = scan(css)

    assert [(token.property, token.line) for token in tokens] == [("background", 2)]
    assert "color-mix(" in tokens[0].value


def test_selector_with_brace_on_next_line() -> None:
    css = "a:hover\n\n{\n  color: red;\n}\n"

    tokens = scan(css)

    assert [(token.property, token.line) for token in tokens] == [("color", 4)]


def test_declaration_before_closing_brace_is_kept() -> None:
    tokens = scan(".a {\n  gap: 1rem\n}\n.b\n{\n  display: grid\n}")
    assert [(token.property, token.line) for token in tokens] == [("gap", 2), ("display", 6)]
