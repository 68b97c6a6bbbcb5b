"""Rich rendering for catalog entries and demo outcomes."""

from collections.abc import Sequence

from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from .app import config
from .data.models import CodeExample, Comparison
from .demo import DemoOutcome


def _snippet(code: str) -> Syntax:
    return Syntax(code, config.SNIPPET_LEXER, theme=config.RICH_SYNTAX_THEME, line_numbers=False)


def _bullets(items: Sequence[str], marker: str = "•") -> Text:
    return Text("\n".join(f"{marker} {item}" for item in items))


def display_language(console: Console, heading: str, language: str) -> None:
    console.print(Rule(f"[bold magenta]{heading}[/bold magenta]"))
    console.print(f"[bold]Selected language:[/bold] [green]{escape(language)}[/green]")


def display_example(console: Console, example: CodeExample) -> None:
    console.print(Rule(f"[bold cyan]{example.title}[/bold cyan]"))
    console.print(f"[dim]{example.location}[/dim]")
    console.print(f"[bold]Problem:[/bold] {example.problem}")

    if example.without_monad is not None:
        console.print(
            Panel(_snippet(example.without_monad), title="Without monad", border_style="red")
        )
    console.print(Panel(_snippet(example.with_monad), title="With monad", border_style="green"))

    if example.benefits:
        console.print(Panel(_bullets(example.benefits, "✓"), title="Benefits", border_style="blue"))


def display_examples(console: Console, examples: Sequence[CodeExample]) -> None:
    for example in examples:
        display_example(console, example)


def display_comparison(console: Console, comparison: Comparison) -> None:
    console.print(Rule(f"[bold magenta]{comparison.scenario}[/bold magenta]"))
    table = Table(show_header=True, header_style="bold", expand=True)
    table.add_column("Without monads", ratio=1)
    table.add_column("With monads", ratio=1)
    table.add_row(_snippet(comparison.without_monads), _snippet(comparison.with_monads))
    console.print(table)
    if comparison.improvements:
        console.print(
            Panel(_bullets(comparison.improvements), title="Improvements", border_style="green")
        )


def display_demo_outcome(console: Console, operation: str, outcome: DemoOutcome) -> None:
    style = "green" if outcome.succeeded else "red"
    console.print(
        Panel(
            Group(Text(outcome.message, style=f"bold {style}"), _bullets(outcome.steps)),
            title=Text(operation, style="bold"),
            border_style=style,
        )
    )


def display_error(console: Console, heading: str, message: str) -> None:
    console.print(Panel(f"[bold red]{heading}:[/bold red]\n{escape(message)}", border_style="red"))


__all__ = [
    "display_comparison",
    "display_demo_outcome",
    "display_error",
    "display_example",
    "display_examples",
    "display_language",
]
