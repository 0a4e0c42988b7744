"""CLI interface."""
from __future__ import annotations

import asyncio
import logging
from typing import Optional

import typer
from pydantic import ValidationError

from storyteller.locales import list_locales
from storyteller.orchestrator.pipeline import PipelineError, StoryPipeline
from storyteller.progress import LoadingState, ProgressTracker
from storyteller.tools.file_storage import load_result, result_to_json, save_result_images, write_result
from storyteller.utils.file_utils import slugify

app = typer.Typer(add_completion=False)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _echo_progress(previous: LoadingState, current: LoadingState) -> None:
    typer.echo(f"[{current.value}]", err=True)


@app.command()
def generate(
    location: str = typer.Option(..., "--location", "-l", help="Place name, e.g. 'Gamcheon Culture Village'."),
    emotion: str = typer.Option(..., "--emotion", "-e", help="How you feel, e.g. 'nostalgia'."),
    locale: str = typer.Option("en", "--locale", help="Response language code."),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write the result JSON to this file."),
    save_images: bool = typer.Option(False, "--save-images", help="Decode generated images into the output dir."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Research a place, plan a story and scout the neighbourhood."""
    _configure_logging(verbose)
    if not location.strip() or not emotion.strip():
        raise typer.BadParameter("Provide a non-empty --location and --emotion")
    tracker = ProgressTracker()
    tracker.subscribe(_echo_progress)
    try:
        result = asyncio.run(StoryPipeline().run(location, emotion, locale, tracker=tracker))
    except PipelineError as exc:
        typer.echo(exc.message, err=True)
        raise typer.Exit(code=1)
    if output:
        write_result(output, result)
    if save_images:
        for path in save_result_images(slugify(location), result):
            typer.echo(f"saved {path}", err=True)
    typer.echo(result_to_json(result))


@app.command()
def dietary(
    result_file: str = typer.Argument(..., help="Result JSON written by 'generate --output'."),
    locale: str = typer.Option("en", "--locale", help="Response language code."),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write the updated result here."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Look up vegan, halal and kosher places for a finished story."""
    _configure_logging(verbose)
    try:
        result = load_result(result_file)
    except (FileNotFoundError, ValidationError) as exc:
        raise typer.BadParameter(f"Cannot read result file {result_file}: {exc}")
    updated = asyncio.run(StoryPipeline().load_dietary(result, locale))
    if updated is None:
        typer.echo("Dietary lookup failed; result unchanged.", err=True)
        raise typer.Exit(code=1)
    if output:
        write_result(output, updated)
    typer.echo(result_to_json(updated))


@app.command()
def locales():
    """List supported locales."""
    for entry in list_locales():
        suffix = " (rtl)" if entry["rtl"] else ""
        typer.echo(f"{entry['code']}\t{entry['name']}{suffix}")


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host"),
    port: int = typer.Option(8000, "--port"),
):
    """Run the HTTP API."""
    import uvicorn

    uvicorn.run("storyteller.server:app", host=host, port=port)


if __name__ == "__main__":
    app()
