from __future__ import annotations

import logging
from typing import Annotated

import typer
from rich.console import Console

from . import __version__, demo, ui
from .app import config
from .data import examples
from .monad.result import Err, Ok

logger = logging.getLogger(__name__)

console = Console()

app = typer.Typer(
    name="monado",
    help="Learn the Maybe and Result monads from real before/after examples.",
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=config.LOG_FORMAT,
        force=True,
    )


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]Monado[/bold blue] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging.")
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version and exit."
        ),
    ] = False,
) -> None:
    """Explore the Maybe and Result monads."""
    _setup_logging(verbose)


@app.command()
def maybe(
    lang: Annotated[
        str | None, typer.Option("--lang", "-l", help="Preferred language for the examples.")
    ] = None,
) -> None:
    """Explain the Maybe monad with examples taken from this tool."""
    selected = demo.select_language(lang)
    ui.display_language(console, "The Maybe monad", selected)

    match examples.maybe_real_world_examples():
        case Ok(items):
            ui.display_examples(console, items)
        case Err(message):
            ui.display_error(console, "Failed to load examples", message)
            raise typer.Exit(code=1)


@app.command()
def result(
    lang: Annotated[
        str | None, typer.Option("--lang", "-l", help="Preferred language for the examples.")
    ] = None,
) -> None:
    """Explain the Result monad with examples taken from this tool."""
    params = {} if lang is None else {"lang": lang}
    selected = demo.resolve_language(params)
    ui.display_language(console, "The Result monad", selected)

    match examples.result_real_world_examples():
        case Ok(items):
            ui.display_examples(console, items)
        case Err(message):
            ui.display_error(console, "Failed to load examples", message)
            raise typer.Exit(code=1)


@app.command(name="demo")
def run_demo(
    operation: Annotated[
        str,
        typer.Argument(
            help=f"One of: {', '.join(config.DEMO_OPERATIONS)}.", metavar="OPERATION"
        ),
    ],
    text: Annotated[str, typer.Argument(help="Input to run through the pipeline.", metavar="INPUT")],
) -> None:
    """Run an input through one of the interactive demo pipelines."""
    outcome = demo.process_demo_input(text, operation)
    if outcome is None:
        ui.display_error(console, "Nothing to run", "Both an operation and an input are required.")
        raise typer.Exit(code=1)

    ui.display_demo_outcome(console, operation, outcome)
    if not outcome.succeeded:
        raise typer.Exit(code=1)


@app.command()
def comparison() -> None:
    """Show the same problem solved with and without monads."""
    match examples.before_after_comparison():
        case Ok(before_after):
            ui.display_comparison(console, before_after)
        case Err(message):
            ui.display_error(console, "Failed to load comparison", message)
            raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
