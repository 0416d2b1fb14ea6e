"""
Legible Command Line Interface (CLI).

Terminal front end built on `typer` and `rich`.

Usage
-----
    # Readability scores for a local document
    $ legible scores samples/essay.txt

    # Scores for a web page, as JSON
    $ legible url https://example.org/article --json

    # Reading time at a custom speed
    $ legible reading-time samples/essay.txt --speed 300
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from legible.core.calculator import ReadabilityCalculator
from legible.core.contracts.resource import (
    RESOURCE_TYPE_FILE,
    RESOURCE_TYPE_URL,
    FileResource,
    UrlResource,
)
from legible.core.contracts.scores import ReadabilityMetadata
from legible.core.errors import LegibleError
from legible.core.settings import configured_reading_speed, get_logger, load_settings
from legible.extraction.content import LocalContentExtractor
from legible.extraction.extractor import ReadabilityExtractor

# Make `.env` values visible before settings are first read.
load_dotenv()

app = typer.Typer(
    help="Legible: readability scores and reading time for documents.",
    rich_markup_mode="markdown",
    no_args_is_help=True,
)
console = Console()
logger = get_logger(__name__)

_LABELS = {
    "fleschkincaidreadingease": "Flesch-Kincaid reading ease",
    "fleschkincaidgradelevel": "Flesch-Kincaid grade level",
    "gunningfogscore": "Gunning Fog score",
    "colemanliauindex": "Coleman-Liau index",
    "smogindex": "SMOG index",
    "automatedreadabilityindex": "Automated readability index",
    "dalechallreadabilityscore": "Dale-Chall score",
    "dalechalldifficultwordcount": "Dale-Chall difficult words",
    "spachereadabilityscore": "Spache score",
    "spachedifficultwordcount": "Spache difficult words",
    "wordcount": "Words",
    "averagewordspersentence": "Average words per sentence",
    "readingtime": "Reading time",
}


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #


def _build_extractor(speed: int | None) -> ReadabilityExtractor:
    """Wire an extractor from settings, overriding the reading speed if given."""
    config = load_settings()
    calculator = ReadabilityCalculator(
        (lambda: speed) if speed is not None else configured_reading_speed,
        normalise=config.normalise_scores,
        precision=config.score_precision,
    )
    return ReadabilityExtractor(
        LocalContentExtractor(timeout_seconds=config.url_timeout), calculator
    )


def _fail(title: str, exc: Exception) -> typer.Exit:
    console.print(Panel(str(exc), title=f"[bold red]{title}[/bold red]", border_style="red"))
    return typer.Exit(code=1)


def _render_metadata(metadata: ReadabilityMetadata | None, source: str, as_json: bool) -> None:
    if metadata is None:
        if as_json:
            console.print_json(json.dumps(None))
        else:
            console.print(f"[yellow]No readable text found in {source}.[/yellow]")
        return

    if as_json:
        console.print_json(json.dumps(metadata.record()))
        return

    table = Table(title=f"Readability of {source}", title_justify="left")
    table.add_column("Measure")
    table.add_column("Value", justify="right")
    for key, value in metadata.scores.model_dump().items():
        shown = ReadabilityCalculator.format_time(value) if key == "readingtime" else str(value)
        table.add_row(_LABELS.get(key, key), shown)
    console.print(table)
    console.print(f"[dim]resource hash: {metadata.resourcehash}[/dim]")


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #

FileArgument = Annotated[
    Path,
    typer.Argument(
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Path to the input document (TXT, HTML, PDF, DOCX).",
    ),
]
SpeedOption = Annotated[
    int | None,
    typer.Option("--speed", "-s", min=1, help="Reading speed in words per minute."),
]
JsonOption = Annotated[
    bool,
    typer.Option("--json", help="Print the metadata record as JSON."),
]


@app.command()  # type: ignore[misc]
def scores(file: FileArgument, speed: SpeedOption = None, as_json: JsonOption = False) -> None:
    """Compute readability scores for a local document."""
    extractor = _build_extractor(speed)
    resource = FileResource.from_path(file)

    try:
        if not extractor.validate_resource(resource, RESOURCE_TYPE_FILE):
            raise _fail("Unsupported file", ValueError(f"Cannot read text from {file.name}"))
        metadata = extractor.extract_file_metadata(resource)
    except LegibleError as exc:
        logger.debug("Scoring %s failed: %s", file, exc)
        raise _fail("Extraction Error", exc) from exc

    _render_metadata(metadata, file.name, as_json)


@app.command()  # type: ignore[misc]
def url(
    address: Annotated[str, typer.Argument(metavar="URL", help="http(s) URL to score.")],
    speed: SpeedOption = None,
    as_json: JsonOption = False,
) -> None:
    """Compute readability scores for the document behind a URL."""
    extractor = _build_extractor(speed)
    resource = UrlResource(externalurl=address)

    try:
        if not extractor.validate_resource(resource, RESOURCE_TYPE_URL):
            raise _fail("Unsupported URL", ValueError(f"Cannot read text from {address}"))
        metadata = extractor.extract_url_metadata(resource)
    except LegibleError as exc:
        logger.debug("Scoring %s failed: %s", address, exc)
        raise _fail("Extraction Error", exc) from exc

    _render_metadata(metadata, address, as_json)


@app.command("reading-time")  # type: ignore[misc]
def reading_time(
    file: FileArgument, speed: SpeedOption = None, as_json: JsonOption = False
) -> None:
    """Estimate how long a local document takes to read."""
    extractor = _build_extractor(speed)
    resource = FileResource.from_path(file)

    try:
        text = extractor.content_extractor.extract_file_content(resource)
    except LegibleError as exc:
        raise _fail("Extraction Error", exc) from exc

    calculator = extractor.calculator
    seconds = calculator.calculate_reading_time(calculator.clean_for_calculation(text))
    formatted = calculator.format_time(seconds)

    if as_json:
        console.print_json(
            json.dumps(
                {
                    "seconds": seconds,
                    "formatted": formatted,
                    "reading_speed": calculator.get_reading_speed(),
                }
            )
        )
        return
    console.print(
        f"[bold]{file.name}[/bold]: {formatted} "
        f"[dim]({seconds}s at {calculator.get_reading_speed()} wpm)[/dim]"
    )


if __name__ == "__main__":
    app()
