"""Terminal renderer for analysis reports."""

from __future__ import annotations

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .constants import STATUS_ICON_MAP, STATUS_STYLE_MAP
from .model import AnalysisReport, MatchResult
from .util.text import ellipsize

_DESCRIPTION_WIDTH = 90


def _score_style(score: int) -> str:
    if score >= 80:
        return "bold green"
    if score >= 50:
        return "bold yellow"
    return "bold red"


def _match_lines(item: MatchResult) -> list[Text]:
    feature = item.feature
    icon = STATUS_ICON_MAP.get(feature.status, "❓")
    context = f"  [{item.context}]" if item.context else ""
    lines = [
        Text.assemble(
            f"  {icon} ",
            (feature.name, "bold"),
            (f" ({feature.status})", STATUS_STYLE_MAP.get(feature.status, "")),
            (context, "dim"),
        ),
        Text(f"      {item.css_property}", style="cyan"),
    ]
    if feature.status != "widely-available":
        lines.append(Text(f"      {ellipsize(feature.description, _DESCRIPTION_WIDTH)}"))
    if feature.fallback:
        lines.append(Text(f"      Fallback: {feature.fallback}", style="italic"))
    return lines


def _section(title: str, items: tuple[MatchResult, ...], style: str) -> list[Text]:
    lines = [Text(f"{title} ({len(items)})", style=style)]
    if not items:
        lines.append(Text("  None", style="dim"))
    for item in items:
        lines.extend(_match_lines(item))
    return lines


def _platform_table(report: AnalysisReport) -> Table:
    table = Table(title="Browser support", title_justify="left", show_edge=False)
    table.add_column("Browser", style="bold")
    table.add_column("Supported features", justify="right")
    for platform, count in report.platform_scores.as_dict().items():
        table.add_row(platform.capitalize(), f"{count} / {report.total_matched}")
    return table


def render_report(report: AnalysisReport) -> Group:
    """Render an analysis report as a Rich renderable group."""
    lines: list[Text] = [
        Text.assemble("Score: ", (f"{report.score}/100", _score_style(report.score))),
        Text(
            f"{report.scanned} usage(s) scanned, {report.total_matched} known feature(s) matched",
            style="dim",
        ),
        Text(""),
    ]
    lines.extend(_section("Compatible", report.compatible, "bold green"))
    lines.append(Text(""))
    lines.extend(_section("Warnings", report.warnings, "bold yellow"))
    lines.append(Text(""))
    lines.extend(_section("Incompatible", report.incompatible, "bold red"))

    body = Group(*lines, Text(""), _platform_table(report))
    return Group(Panel(body, border_style="blue", title="Baseline compatibility"))
