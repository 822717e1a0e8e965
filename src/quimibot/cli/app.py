"""Main CLI application using Typer."""
import asyncio
import logging
import os
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from ..chat import ChatPanel, ChatSession, context_label
from ..chat.models import DisplayMessage
from ..config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV, setup_logging
from ..llm import LLMError
from ..periodic import (
    CATEGORY_COLORS,
    CATEGORY_LABELS,
    STATE_LABELS,
    STATE_SYMBOLS,
    ChemicalElement,
    ElementCategory,
    ElementFilter,
    MatterState,
    load_elements,
)
from ..replies import ShaperConfig, render_markdown, shape_reply
from .providers import api_key_env, get_llm

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="quimibot",
    help="Periodic table browser with the QuimiBot chemistry assistant",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()

logger = logging.getLogger(__name__)

EXIT_COMMANDS = {"/salir", "/exit", "/quit"}
CLEAR_COMMAND = "/clear"


@app.callback()
def configure(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging"
    )
):
    """Configure logging before any command runs."""
    level = "DEBUG" if verbose else os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    setup_logging(level)


def _read_text(path: Path | None) -> str:
    if path is None:
        return sys.stdin.read()
    return path.read_text(encoding="utf-8")


def _load_catalog(data: Path) -> list[ChemicalElement]:
    try:
        return load_elements(data)
    except (OSError, ValueError) as e:
        console.print(f"[red]Error: could not load elements from {data}: {e}[/red]")
        raise typer.Exit(code=1)


def find_element(elements: list[ChemicalElement], key: str) -> ChemicalElement | None:
    """Look up an element by symbol, name or atomic number."""
    wanted = key.strip().lower()
    for element in elements:
        if wanted in (element.symbol.lower(), element.name.lower(), str(element.atomic_number)):
            return element
    return None


def _require_element(elements: list[ChemicalElement], key: str) -> ChemicalElement:
    element = find_element(elements, key)
    if element is None:
        console.print(f"[red]Error: element not found: {key}[/red]")
        raise typer.Exit(code=1)
    return element


def _print_bubble(message: DisplayMessage) -> None:
    if message.role == "bot":
        console.print(Panel(Markdown(message.text), title="QuimiBot", border_style="cyan"))
    else:
        console.print(f"[bold magenta]Tú:[/bold magenta] {message.text}")


@app.command()
def shape(
    path: Path | None = typer.Argument(
        None,
        exists=True,
        dir_okay=False,
        help="File with the raw reply (reads stdin when omitted)"
    ),
    max_lines: int = typer.Option(6, "--max-lines", help="Line cap for prose replies"),
    max_chars: int = typer.Option(520, "--max-chars", help="Character cap for prose replies"),
    table_max_chars: int = typer.Option(2400, "--table-max-chars", help="Character cap for table replies"),
):
    """Shape a raw model reply into a concise chat reply."""
    config = ShaperConfig(max_lines=max_lines, max_chars=max_chars, table_max_chars=table_max_chars)
    typer.echo(shape_reply(_read_text(path), config))


@app.command()
def render(
    path: Path | None = typer.Argument(
        None,
        exists=True,
        dir_okay=False,
        help="File with markdown text (reads stdin when omitted)"
    ),
    shaped: bool = typer.Option(
        False,
        "--shape",
        "-s",
        help="Shape the text before rendering"
    ),
):
    """Render chat markdown as HTML."""
    text = _read_text(path)
    if shaped:
        text = shape_reply(text)
    typer.echo(render_markdown(text))


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question for QuimiBot"),
    element: str | None = typer.Option(
        None,
        "--element",
        "-e",
        help="Context label, e.g. 'Oro (Au)'"
    ),
    html: bool = typer.Option(False, "--html", help="Print the reply as HTML"),
):
    """Ask QuimiBot a single question."""
    async def _ask():
        llm = get_llm(console)
        if llm is None:
            raise typer.Exit(code=1)

        async with ChatSession(llm) as session:
            try:
                reply = await session.send(question, element_context=element)
            except LLMError as e:
                console.print(f"[red]Error: {e}[/red]")
                raise typer.Exit(code=1)

        if html:
            typer.echo(render_markdown(reply))
        else:
            console.print(Markdown(reply))

    asyncio.run(_ask())


@app.command()
def chat(
    data: Path | None = typer.Option(
        None,
        "--data",
        "-d",
        exists=True,
        dir_okay=False,
        help="Element dataset (JSON) used to resolve --element"
    ),
    element: str | None = typer.Option(
        None,
        "--element",
        "-e",
        help="Element symbol, name or number to use as context"
    ),
):
    """Start an interactive conversation with QuimiBot."""
    selected = None
    if element:
        if data is None:
            console.print("[red]Error: --element requires --data[/red]")
            raise typer.Exit(code=1)
        selected = _require_element(_load_catalog(data), element)

    async def _chat():
        llm = get_llm(console)
        session = ChatSession(llm) if llm is not None else None
        panel = ChatPanel(session, missing_key_env=api_key_env())

        _print_bubble(panel.messages[0])
        if selected is not None:
            console.print(f"[dim]Contexto: {context_label(selected)}[/dim]")
        console.print("[dim]/clear para reiniciar, /salir para terminar[/dim]")

        try:
            while True:
                try:
                    text = console.input("[bold magenta]> [/bold magenta]")
                except (EOFError, KeyboardInterrupt):
                    break

                command = text.strip().lower()
                if command in EXIT_COMMANDS:
                    break
                if command == CLEAR_COMMAND:
                    await panel.clear()
                    console.print("[dim]Conversación reiniciada[/dim]")
                    continue

                with console.status("Pensando..."):
                    reply = await panel.submit(text, element=selected)
                if reply is not None:
                    _print_bubble(reply)
        finally:
            if session is not None:
                await session.close()

    asyncio.run(_chat())


@app.command()
def elements(
    data: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="Element dataset (JSON array)"
    ),
    search: str = typer.Option("", "--search", "-q", help="Name, symbol or atomic number prefix"),
    category: ElementCategory | None = typer.Option(None, "--category", "-c", help="Element family"),
    state: MatterState | None = typer.Option(None, "--state", "-s", help="State at room temperature"),
):
    """List elements matching a search and filters."""
    element_filter = ElementFilter(search=search, category=category, state=state)
    matches = element_filter.apply(_load_catalog(data))

    if not matches:
        console.print("[yellow]No elements found[/yellow]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Nº", style="dim", width=4)
    table.add_column("Símbolo", width=7)
    table.add_column("Nombre")
    table.add_column("Familia")
    table.add_column("Estado", width=12)
    table.add_column("Masa", justify="right")

    for el in matches:
        color = CATEGORY_COLORS[el.category]
        table.add_row(
            str(el.atomic_number),
            f"[bold {color}]{el.symbol}[/]",
            el.name,
            f"[{color}]{CATEGORY_LABELS[el.category]}[/]",
            f"{STATE_SYMBOLS[el.state]} {STATE_LABELS[el.state]}",
            f"{el.atomic_mass:.3f}",
        )

    console.print(table)
    if element_filter.is_active:
        console.print(f"[dim]{len(matches)} filtrados[/dim]")


@app.command()
def compare(
    data: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="Element dataset (JSON array)"
    ),
    first: str = typer.Argument(..., help="First element (symbol, name or number)"),
    second: str = typer.Argument(..., help="Second element (symbol, name or number)"),
):
    """Ask QuimiBot to compare two elements."""
    catalog = _load_catalog(data)
    pair = (_require_element(catalog, first), _require_element(catalog, second))

    async def _compare():
        llm = get_llm(console)
        if llm is None:
            raise typer.Exit(code=1)

        session = ChatSession(llm)
        try:
            panel = ChatPanel(session, missing_key_env=api_key_env())
            with console.status(f"Comparando {context_label(compare=pair)}..."):
                reply = await panel.compare(*pair)
        finally:
            await session.close()

        if reply is not None:
            _print_bubble(reply)
            if reply.text.startswith("❌"):
                raise typer.Exit(code=1)

    asyncio.run(_compare())


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
