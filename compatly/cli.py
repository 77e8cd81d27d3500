"""Console script for pycompatly."""

from __future__ import annotations

import json
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from ._version import __version__ as _version
from .analyze import analyze
from .constants import DATASET_URL, MAX_INPUT_CHARS, SKIPPED_ENTRIES_LINE
from .dataset import load_index
from .design import parse_design_payload, synthesize_css
from .exceptions import CompatlyError, InputInvalidError
from .export import render_json, render_markdown
from .http import fetch_page, use_shared_client
from .render_basic import render_report
from .util.html import debug_enabled, extract_style_text

_OUTPUT_FORMATS = ("rich", "json", "markdown")


def _configure_logging() -> None:
    if not debug_enabled():
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _read_files(paths: tuple[str, ...]) -> str:
    chunks: list[str] = []
    for path in paths:
        try:
            with click.open_file(path, "r", encoding="utf-8") as handle:
                chunks.append(handle.read())
        except (OSError, UnicodeDecodeError) as exc:
            raise InputInvalidError(f"Could not read {path}: {exc}") from exc
    return "\n".join(chunks)


def _read_design(path: str) -> str:
    try:
        with open(path, encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, ValueError) as exc:
        raise InputInvalidError(f"Could not read design export {path}: {exc}") from exc
    return synthesize_css(parse_design_payload(data))


def _check_size(css: str) -> str:
    if len(css) > MAX_INPUT_CHARS:
        raise InputInvalidError(
            f"Stylesheet input is too large ({len(css)} characters, limit {MAX_INPUT_CHARS})"
        )
    return css


def _collect_css(paths: tuple[str, ...], page_url: str | None, design_file: str | None) -> str:
    if page_url:
        return _check_size(extract_style_text(fetch_page(page_url)))
    if design_file:
        return _check_size(_read_design(design_file))
    return _check_size(_read_files(paths))


@click.argument(
    "paths",
    metavar="[CSS_FILE]...",
    nargs=-1,
    required=False,
    type=click.Path(exists=True, dir_okay=False, allow_dash=True),
)
@click.option("--url", "page_url", metavar="URL", help="Scan the inline <style> blocks of a page.")
@click.option(
    "--design",
    "design_file",
    type=click.Path(exists=True, dir_okay=False),
    help="Design-tool export (JSON feature list) to synthesize CSS from.",
)
@click.option(
    "--dataset",
    "dataset_path",
    envvar="COMPATLY_DATASET",
    type=click.Path(exists=True, dir_okay=False),
    help="Local web-features data.json to use instead of downloading it.",
)
@click.option(
    "--dataset-url",
    envvar="COMPATLY_DATASET_URL",
    default=DATASET_URL,
    show_default=True,
    help="Where to download web-features data.json from.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(_OUTPUT_FORMATS),
    default="rich",
    show_default=True,
    help="Output format.",
)
@click.option(
    "--fail-under",
    type=click.IntRange(0, 100),
    default=None,
    help="Exit with status 1 when the score is below this value.",
)
@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(_version, "-v", "--version")
def main(
    paths: tuple[str, ...],
    page_url: str | None,
    design_file: str | None,
    dataset_path: str | None,
    dataset_url: str,
    output_format: str,
    fail_under: int | None,
) -> None:
    """
    Check a stylesheet's Baseline browser compatibility

    \b
    Example usages:
      compatly styles.css
      cat styles.css | compatly --format json
      compatly --url https://example.com
      compatly --design export.json --format markdown
      compatly styles.css --fail-under 80
    """
    _configure_logging()
    console = Console()
    err_console = Console(stderr=True)

    sources = sum(1 for source in (paths, page_url, design_file) if source)
    if sources > 1:
        raise click.UsageError("Use only one input: CSS files, --url, or --design.")
    if sources == 0:
        if sys.stdin.isatty():
            raise click.UsageError("Provide a CSS file, '-' for stdin, --url, or --design.")
        paths = ("-",)

    try:
        with use_shared_client():
            index_result = load_index(dataset_path, url=dataset_url)
            css = _collect_css(paths, page_url, design_file)
    except CompatlyError as exc:
        raise click.ClickException(str(exc)) from exc

    if index_result.skipped:
        err_console.print(
            Text(SKIPPED_ENTRIES_LINE.format(count=index_result.skipped), style="dim")
        )

    report = analyze(css, index_result.index)

    if output_format == "json":
        click.echo(render_json(report))
    elif output_format == "markdown":
        click.echo(render_markdown(report))
    else:
        console.print(render_report(report))

    if fail_under is not None and report.score < fail_under:
        err_console.print(
            Text(f"Score {report.score} is below the required {fail_under}.", style="red")
        )
        raise SystemExit(1)
