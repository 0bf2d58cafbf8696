"""deckcraft CLI: Typer-based command line interface."""

import random
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

app = typer.Typer(
    name="deckcraft",
    help="Build, shuffle, sort and convert decks of playing cards",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output"),
):
    from deckcraft import config
    from deckcraft.logging_utils import setup_logging
    setup_logging("DEBUG" if verbose else config.LOG_LEVEL)


def _read_deck(file: Path, fmt: Optional[str]):
    from deckcraft.errors import DeckcraftError
    from deckcraft.models.deck import Deck
    from deckcraft.serialization import format_for_path

    fmt = fmt or format_for_path(file)
    try:
        return Deck.loads(file.read_text(encoding="utf-8"), fmt)
    except DeckcraftError as e:
        console.print(f"[red]Error reading {file.name}:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def _write_deck(deck, output: Optional[Path], fmt: Optional[str]) -> None:
    from deckcraft.errors import DeckcraftError
    from deckcraft.serialization import format_for_path

    fmt = fmt or (format_for_path(output) if output else "text")
    try:
        text = deck.dumps(fmt)
    except DeckcraftError as e:
        console.print(f"[red]Error writing deck:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if output is None:
        # Plain print keeps the output machine-readable
        typer.echo(text.rstrip("\n"))
        return
    output.write_text(text if text.endswith("\n") else text + "\n", encoding="utf-8")
    console.print(f"[green]Wrote {len(deck)} cards to[/green] [cyan]{output}[/cyan]")


def _rng(seed: Optional[int]):
    return random.Random(seed) if seed is not None else None


@app.command()
def new(
    factory: str = typer.Option("standard52", "--factory", "-f",
                                help="standard52, standard54, pinochle or shoe"),
    decks: int = typer.Option(0, "--decks", help="Decks in a shoe (default from config)"),
    shuffle: bool = typer.Option(False, "--shuffle", help="Shuffle the new deck"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for the shuffle"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write to file"),
    fmt: Optional[str] = typer.Option(None, "--format", help="text, csv, json or yaml"),
):
    """Create a fresh deck from a factory."""
    from deckcraft.factories import FACTORIES, Shoe
    from deckcraft.models.deck import Deck

    key = factory.lower()
    if key not in FACTORIES:
        console.print(f"[red]Unknown factory: {factory}[/red]")
        console.print(f"Valid factories: {', '.join(FACTORIES)}")
        raise typer.Exit(1)

    if key == "shoe" and decks:
        maker = Shoe(decks=decks)
    else:
        maker = FACTORIES[key]()

    deck = Deck.from_factory(maker)
    if shuffle:
        deck.shuffle(_rng(seed))
    _write_deck(deck, output, fmt)


@app.command("shuffle")
def shuffle_deck(
    file: Path = typer.Argument(..., help="Deck file", exists=True, readable=True),
    method: str = typer.Option("fisher-yates", "--method", "-m",
                               help="fisher-yates, riffle or overhand"),
    times: int = typer.Option(1, "--times", "-n", min=1, help="How many passes"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    output: Optional[Path] = typer.Option(None, "--output", "-o"),
    fmt: Optional[str] = typer.Option(None, "--format"),
):
    """Shuffle a deck."""
    deck = _read_deck(file, fmt)
    rng = _rng(seed)
    passes = {
        "fisher-yates": deck.shuffle,
        "riffle": deck.riffle,
        "overhand": deck.overhand,
    }
    if method not in passes:
        console.print(f"[red]Unknown shuffle method: {method}[/red]")
        console.print(f"Valid methods: {', '.join(passes)}")
        raise typer.Exit(1)

    for _ in range(times):
        passes[method](rng)
    _write_deck(deck, output, fmt)


@app.command()
def cut(
    file: Path = typer.Argument(..., help="Deck file", exists=True, readable=True),
    position: int = typer.Argument(..., help="Cards from this position move to the top"),
    output: Optional[Path] = typer.Option(None, "--output", "-o"),
    fmt: Optional[str] = typer.Option(None, "--format"),
):
    """Cut a deck at a position."""
    from deckcraft.errors import DeckIndexError

    deck = _read_deck(file, fmt)
    try:
        deck.cut(position)
    except DeckIndexError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
    _write_deck(deck, output, fmt)


@app.command("sort")
def sort_deck(
    file: Path = typer.Argument(..., help="Deck file", exists=True, readable=True),
    comparator: str = typer.Option("standard", "--comparator", "-c",
                                   help="standard, ace-low, bridge or trump"),
    trump: Optional[str] = typer.Option(None, "--trump", help="Trump suit for --comparator trump"),
    output: Optional[Path] = typer.Option(None, "--output", "-o"),
    fmt: Optional[str] = typer.Option(None, "--format"),
):
    """Sort a deck by a comparator."""
    from deckcraft.errors import ParseError
    from deckcraft.models.card import Suit
    from deckcraft.ordering import (
        AceLowComparator, BridgeComparator, StandardComparator, TrumpComparator,
    )

    deck = _read_deck(file, fmt)
    key = comparator.lower()
    if key == "trump":
        if not trump:
            console.print("[red]--trump is required with --comparator trump[/red]")
            raise typer.Exit(1)
        try:
            chosen = TrumpComparator(Suit.from_symbol(trump))
        except ParseError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            raise typer.Exit(1)
    else:
        comparators = {
            "standard": StandardComparator,
            "ace-low": AceLowComparator,
            "bridge": BridgeComparator,
        }
        if key not in comparators:
            console.print(f"[red]Unknown comparator: {comparator}[/red]")
            console.print(f"Valid comparators: {', '.join(list(comparators) + ['trump'])}")
            raise typer.Exit(1)
        chosen = comparators[key]()

    deck.sort_by_comparator(chosen)
    _write_deck(deck, output, fmt)


@app.command()
def deal(
    file: Path = typer.Argument(..., help="Deck file", exists=True, readable=True),
    count: int = typer.Option(1, "--count", "-n", min=0, help="Cards to deal"),
    bottom: bool = typer.Option(False, "--bottom", help="Deal from the bottom"),
    output: Optional[Path] = typer.Option(None, "--output", "-o",
                                          help="Write the remaining deck here"),
    fmt: Optional[str] = typer.Option(None, "--format"),
):
    """Deal cards; prints them and writes what is left."""
    from deckcraft.formatters.table import TableFormatter

    deck = _read_deck(file, fmt)
    dealt = deck.deal_n_bottom(count) if bottom else deck.deal_n(count)
    if len(dealt) < count:
        console.print(f"[yellow]Only {len(dealt)} of {count} cards were available.[/yellow]")

    TableFormatter(console).print_dealt(dealt, len(deck))
    if output is not None:
        _write_deck(deck, output, fmt)


@app.command()
def convert(
    file: Path = typer.Argument(..., help="Deck file", exists=True, readable=True),
    to: str = typer.Option(..., "--to", "-t", help="text, csv, json or yaml"),
    source_fmt: Optional[str] = typer.Option(None, "--from", help="Input format"),
    output: Optional[Path] = typer.Option(None, "--output", "-o"),
):
    """Convert a deck file between formats."""
    deck = _read_deck(file, source_fmt)
    _write_deck(deck, output, to)


@app.command()
def show(
    file: Path = typer.Argument(..., help="Deck file", exists=True, readable=True),
    ascii_faces: bool = typer.Option(False, "--ascii", help="Draw card faces"),
    summary: bool = typer.Option(False, "--summary", help="Show counts instead of cards"),
    fmt: Optional[str] = typer.Option(None, "--format"),
):
    """Display a deck."""
    from deckcraft.formatters import TableFormatter, TextFormatter

    deck = _read_deck(file, fmt)
    if ascii_faces:
        console.print(TextFormatter().card_faces(deck), highlight=False)
    elif summary:
        TableFormatter(console).print_summary(deck)
    else:
        TableFormatter(console).print_deck(deck, title=file.name)


if __name__ == "__main__":
    app()
