"""ABOUTME: CLI entry point for dexsearch commands.
ABOUTME: Provides search, learn, weakness, effectiveness, shell, and fetch commands via Typer."""

import asyncio
import logging
from collections.abc import Callable
from pathlib import Path

import typer
from rich.console import Console

from dexsearch import markup
from dexsearch.commands import CommandProcessor, Reply
from dexsearch.data.holder import DexHolder
from dexsearch.data.models import LearnsetContext
from dexsearch.errors import DexSearchError
from dexsearch.logs import init_logging
from dexsearch.lookups.learn import learn as learn_moves
from dexsearch.settings import settings

app = typer.Typer(
    name="dexsearch",
    help="Search the Pokedex by type, tier, colour, ability, moves, and generation.",
    no_args_is_help=True,
)

console = Console()

DexDirOption = typer.Option(None, "--dex-dir", "-d", help="Dataset directory (defaults to data/dex)")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Initialize logging for every command."""
    init_logging(settings.logging_config_path)
    if verbose:
        logging.getLogger("dexsearch").setLevel(logging.DEBUG)


def _load_holder(dex_dir: Path | None) -> DexHolder:
    """Load the dataset or exit with an error."""
    from dexsearch.data.loader import load_dex  # noqa: PLC0415

    try:
        return DexHolder(load_dex(dex_dir))
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error loading dataset:[/] {e}")
        raise typer.Exit(1) from None


def _print_reply(reply: Reply | None) -> None:
    if reply is None:
        return
    console.print(markup.to_console(reply.text) if reply.markup else reply.text)


def _run(func: Callable[[], str]) -> None:
    """Print the markup a lookup returns, or its error in red with exit code 1."""
    try:
        console.print(markup.to_console(func()))
    except DexSearchError as e:
        console.print(f"[red]{markup.to_console(markup.text(e))}[/]")
        raise typer.Exit(1) from None


@app.command()
def search(
    query: str = typer.Argument(..., help='Comma-separated parameters, e.g. "fire type, ou, flamethrower"'),
    all_results: bool = typer.Option(False, "--all-results", help='Show every match, same as adding "all"'),
    dex_dir: Path | None = DexDirOption,
) -> None:
    """Search for Pokemon matching every given parameter."""
    processor = CommandProcessor(_load_holder(dex_dir))
    if all_results and not processor.search_engine.query_requests_all(query):
        query = f"{query}, all"
    _run(lambda: processor.search_engine.evaluate(query))


@app.command()
def learn(
    species: str = typer.Argument(..., help="Pokemon to check"),
    moves: list[str] = typer.Argument(..., help="Moves it should learn together"),
    all_sources: bool = typer.Option(False, "--all", "-a", help="List every source instead of truncating"),
    level: int | None = typer.Option(None, "--level", "-l", help="Only count level-up moves up to this level"),
    no_transfer: bool = typer.Option(False, "--no-transfer", help="Only count current-generation sources"),
    dex_dir: Path | None = DexDirOption,
) -> None:
    """Show whether, and how, a Pokemon can learn the given moves."""
    holder = _load_holder(dex_dir)
    context = LearnsetContext(level=level, no_transfer=no_transfer)
    _run(lambda: learn_moves(holder.snapshot(), species, moves, context=context, exhaustive=all_sources))


@app.command()
def weakness(
    target: str = typer.Argument(..., help='Pokemon or types, e.g. "Charizard" or "fire/flying"'),
    dex_dir: Path | None = DexDirOption,
) -> None:
    """Show the types a Pokemon or typing is weak to."""
    processor = CommandProcessor(_load_holder(dex_dir))
    _print_reply(processor.handle(f"/weakness {target}"))


@app.command()
def effectiveness(
    target: str = typer.Argument(..., help='Attacker and defender, e.g. "ice, garchomp" or "rock, fire, flying"'),
    dex_dir: Path | None = DexDirOption,
) -> None:
    """Show how effective an attacking type is against a Pokemon or typing."""
    processor = CommandProcessor(_load_holder(dex_dir))
    _print_reply(processor.handle(f"/effectiveness {target}"))


@app.command()
def shell(dex_dir: Path | None = DexDirOption) -> None:
    """Read "/command args" lines and answer them; "/reload" reloads the dataset, "/quit" exits."""
    holder = _load_holder(dex_dir)
    processor = CommandProcessor(holder)
    console.print(f"[blue]Commands:[/] {', '.join('/' + name for name in processor.command_names)}")

    while True:
        try:
            line = console.input("[bold]> [/]").strip()
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        if line in ("/quit", "/exit"):
            break
        if line == "/reload":
            try:
                dex = holder.reload(dex_dir)
            except (FileNotFoundError, ValueError) as e:
                console.print(f"[red]Reload failed, keeping the current dataset:[/] {e}")
            else:
                console.print(f"[green]Reloaded:[/] {dex!r}")
            continue
        if not line:
            continue

        reply = processor.handle(line)
        if reply is None:
            console.print("[yellow]Not a command. Start the line with / or ![/]")
        else:
            _print_reply(reply)


@app.command()
def fetch(
    force: bool = typer.Option(False, "--force", "-f", help="Re-download cached files"),
    dex_dir: Path | None = DexDirOption,
) -> None:
    """Download the dataset files listed in configs/sources.yml."""
    from dexsearch.data.fetcher import fetch_dex_files  # noqa: PLC0415

    try:
        paths = asyncio.run(fetch_dex_files(output_dir=dex_dir, force=force))
    except Exception as e:
        console.print(f"[red]Error fetching data:[/] {e}")
        raise typer.Exit(1) from None

    console.print(f"[green]Fetched {len(paths)} files:[/]")
    for name, path in paths.items():
        console.print(f"  {name}: {path}")


if __name__ == "__main__":
    app()
