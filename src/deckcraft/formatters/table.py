"""Rich table formatting for terminal output."""

from collections import Counter
from typing import Iterable

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from deckcraft.models.card import Card, Color
from deckcraft.models.deck import Deck


def _styled(card: Card) -> str:
    style = "red" if card.color is Color.RED else "bold"
    return f"[{style}]{card.to_short()}[/{style}]"


class TableFormatter:
    """Format decks as Rich tables for terminal display."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def print_deck(self, deck: Deck, title: str = "Deck") -> None:
        """Print every card with its position, rank, suit and color."""
        if deck.is_empty():
            self.console.print("[dim]The deck is empty.[/dim]")
            return

        table = Table(title=f"{title} ({len(deck)} cards)")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Card", justify="center")
        table.add_column("Rank", style="cyan")
        table.add_column("Suit")
        table.add_column("Color")

        for position, card in enumerate(deck):
            table.add_row(
                str(position),
                _styled(card),
                card.rank.label if card.rank else "joker",
                card.suit.label if card.suit else "-",
                card.color.name.lower() if card.color else "-",
            )

        self.console.print(table)

    def print_summary(self, deck: Deck) -> None:
        """Print card counts per suit plus jokers and duplicates."""
        by_suit = Counter(c.suit.label for c in deck if not c.is_joker)
        jokers = sum(1 for c in deck if c.is_joker)
        duplicates = len(deck) - len(set(deck))

        table = Table(title="Deck Summary")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right", style="green")
        table.add_row("Cards", str(len(deck)))
        for suit, count in sorted(by_suit.items()):
            table.add_row(suit.capitalize(), str(count))
        table.add_row("Jokers", str(jokers))
        table.add_row("Duplicates", str(duplicates))

        self.console.print(table)

    def print_dealt(self, cards: Iterable[Card], remaining: int) -> None:
        cards = list(cards)
        body = " ".join(_styled(c) for c in cards) if cards else "[dim]nothing to deal[/dim]"
        self.console.print(Panel(body, title=f"Dealt {len(cards)}",
                                 subtitle=f"{remaining} left", border_style="green"))
