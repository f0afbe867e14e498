"""Display utilities for the terminal blackjack UI."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from blackjack.cards import Card, Suit
from blackjack.game import Outcome
from blackjack.table import Action, HandView, TableState


SUIT_COLORS = {
    Suit.HEARTS: "red",
    Suit.DIAMONDS: "red",
    Suit.CLUBS: "white",
    Suit.SPADES: "white",
}

ACTION_KEYS = {Action.HIT: "h", Action.STAND: "s"}


def render_card(card: Card) -> str:
    """Render a single card with color (red for hearts/diamonds)."""
    color = SUIT_COLORS[card.suit]
    return f"[{color}][{card}][/{color}]"


def render_hand(hand: HandView) -> str:
    """Render a hand's cards comma-joined, or a placeholder when empty."""
    if not hand.cards:
        return "[dim][ - ][/dim]"
    return ", ".join(render_card(card) for card in hand.cards)


def render_total(hand: HandView) -> str:
    """Render a hand total, marking soft hands and busts."""
    if hand.is_bust:
        return f"[bold red]{hand.total} (bust)[/bold red]"
    if hand.soft:
        return f"[cyan]{hand.total} (soft)[/cyan]"
    return f"[bold]{hand.total}[/bold]"


def render_table(table_state: TableState) -> Table:
    """Render both hands and their totals."""
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("Label", style="dim")
    table.add_column("Cards")
    table.add_column("Total")

    table.add_row("[green]You[/green]", render_hand(table_state.player), render_total(table_state.player))
    table.add_row("[red]Dealer[/red]", render_hand(table_state.dealer), render_total(table_state.dealer))
    return table


def render_action_menu(table_state: TableState) -> str:
    """Build the prompt line for the valid actions."""
    options = [
        f"[cyan]{ACTION_KEYS[action]}[/cyan] to {str(action).lower()}"
        for action in table_state.valid_actions
    ]
    return "[bold]Enter " + " or ".join(options) + ":[/bold]"


def render_result(outcome: Outcome, table_state: TableState) -> Panel:
    """Render the result of a finished game."""
    lines = [
        f"Dealer: {render_hand(table_state.dealer)}  {render_total(table_state.dealer)}",
        f"You:    {render_hand(table_state.player)}  {render_total(table_state.player)}",
        "",
    ]

    if outcome.player_won:
        style = "green"
    elif outcome.player_lost:
        style = "red"
    else:
        style = "yellow"
    lines.append(f"[bold {style}]{outcome}[/bold {style}]")

    return Panel("\n".join(lines), title="Result", border_style=style)


def render_session_summary(name: str, wins: int, losses: int, pushes: int) -> Table:
    """Render win/loss/push counts for a run of games."""
    table = Table(title=f"Session: {name}")
    table.add_column("Wins", style="green", justify="right")
    table.add_column("Losses", style="red", justify="right")
    table.add_column("Pushes", style="yellow", justify="right")
    table.add_row(str(wins), str(losses), str(pushes))
    return table


def print_divider(console: Console, char: str = "─", width: int = 50) -> None:
    """Print a horizontal divider."""
    console.print(f"[dim]{char * width}[/dim]")
