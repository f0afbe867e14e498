"""Single-player blackjack against an automated dealer."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from agents.base import BaseAgent
from agents.human_agent import HumanAgent
from agents.random_agent import DealerMimicAgent, RandomAgent, StandAgent
from blackjack.cards import OutOfCardsError
from blackjack.game import BlackjackGame
from config.settings import AGENT_CHOICES, Config, load_config
from simulation.runner import GameRunner
from ui.display import print_divider, render_result, render_session_summary
from utils.logging import setup_logging

app = typer.Typer(
    name="blackjack",
    help="Single-player blackjack against an automated dealer.",
)
console = Console()


def _load(config_path: Optional[str]) -> Config:
    """Load configuration and set up logging, exiting on bad input."""
    try:
        config = load_config(config_path) if config_path else Config()
    except (FileNotFoundError, ValueError, TypeError) as e:
        console.print(f"[red]Invalid configuration: {e}[/red]")
        raise typer.Exit(1)
    setup_logging(config.logging.level, console=console)
    return config


def _make_agent(name: str, seed: Optional[int]) -> BaseAgent:
    if name == "dealer":
        return DealerMimicAgent()
    if name == "random":
        return RandomAgent(seed=seed)
    if name == "stand":
        return StandAgent()
    console.print(f"[red]Unknown agent '{name}'. Choose from: {', '.join(AGENT_CHOICES)}[/red]")
    raise typer.Exit(1)


@app.command()
def play(
    games: int = typer.Option(1, "--games", "-n", help="Number of games to play"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config file"),
) -> None:
    """Play blackjack interactively against the dealer."""
    config = _load(config_path)
    if seed is None:
        seed = config.game.seed

    if games < 1:
        console.print("[red]--games must be positive[/red]")
        raise typer.Exit(1)

    human = HumanAgent(name="You", console=console)
    runner = GameRunner(config.game, seed=seed)
    game_interrupted = False

    console.print("\n[bold blue]Blackjack[/bold blue]")
    console.print("[dim]Type 'q' to quit at any time.[/dim]\n")

    try:
        for game_number in range(1, games + 1):
            human.game_number = game_number
            game: BlackjackGame = runner.new_game()
            result = game.play(human)
            human.notify_result(result.outcome)

            console.print(render_result(result.outcome, game.table_state()))

            if game_number < games:
                console.print("\n[dim]Press Enter for next game (or 'q' to quit)...[/dim]")
                try:
                    inp = console.input()
                except EOFError:
                    break
                if inp.strip().lower() in ("q", "quit", "exit"):
                    break
    except KeyboardInterrupt:
        game_interrupted = True
    except OutOfCardsError as e:
        console.print(f"[red]Game abandoned: {e}[/red]")
        raise typer.Exit(1)

    if game_interrupted:
        console.print("\n[yellow]Game interrupted.[/yellow]")

    if human.games_played > 1:
        console.print()
        print_divider(console, "=")
        console.print(render_session_summary(human.name, human.wins, human.losses, human.pushes))


@app.command()
def simulate(
    games: Optional[int] = typer.Option(None, "--games", "-g", help="Number of games (default: from config)"),
    agent_name: Optional[str] = typer.Option(
        None, "--agent", "-a", help=f"Player policy ({', '.join(AGENT_CHOICES)})"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config file"),
    progress: bool = typer.Option(True, "--progress/--no-progress", help="Show progress bar"),
) -> None:
    """Run automated games and report outcome statistics."""
    config = _load(config_path)
    num_games = games if games is not None else config.simulation.num_games
    agent_name = agent_name or config.simulation.agent
    if seed is None:
        seed = config.game.seed

    if num_games < 1:
        console.print("[red]--games must be positive[/red]")
        raise typer.Exit(1)

    agent = _make_agent(agent_name, seed)
    runner = GameRunner(config.game, seed=seed)

    console.print(f"\n[bold blue]Simulating {num_games} games[/bold blue] with {agent}")
    try:
        session = runner.run_session(agent, num_games=num_games, show_progress=progress)
    except OutOfCardsError as e:
        console.print(f"[red]Simulation aborted: {e}[/red]")
        raise typer.Exit(1)

    stats = session.summary()

    table = Table(title="Results")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("Games", str(stats["num_games"]))
    table.add_row("Win rate", f"{stats['win_rate']:.1%}")
    table.add_row("Loss rate", f"{stats['loss_rate']:.1%}")
    table.add_row("Push rate", f"{stats['push_rate']:.1%}")
    table.add_row("Mean score", f"{stats['mean_score']:+.3f} ± {stats['score_std']:.3f}")
    table.add_row("Player bust rate", f"{stats['player_bust_rate']:.1%}")
    table.add_row("Dealer bust rate", f"{stats['dealer_bust_rate']:.1%}")
    table.add_row("Avg player total", f"{stats['avg_player_total']:.2f}")
    table.add_row("Avg dealer total", f"{stats['avg_dealer_total']:.2f}")
    table.add_row("Avg player hits", f"{stats['avg_player_hits']:.2f}")
    console.print(table)

    outcomes = Table(title="Outcomes")
    outcomes.add_column("Outcome", style="cyan")
    outcomes.add_column("Count", justify="right")
    for name, count in sorted(stats["outcomes"].items(), key=lambda kv: -kv[1]):
        outcomes.add_row(name.replace("_", " "), str(count))
    console.print(outcomes)


@app.command()
def info(
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config file"),
) -> None:
    """Show the effective configuration."""
    config = _load(config_path)
    source = Path(config_path).name if config_path else "defaults"

    console.print(f"\n[bold blue]Configuration[/bold blue] ({source})")
    console.print("=" * 50)

    table = Table()
    table.add_column("Category", style="cyan")
    table.add_column("Setting", style="white")
    table.add_column("Value", style="green")

    table.add_row("Game", "Dealer stands on", str(config.game.dealer_stand_total))
    table.add_row("Game", "Dealer hits soft 17", str(config.game.dealer_hits_soft_17))
    table.add_row("Game", "Seed", str(config.game.seed))
    table.add_row("Simulation", "Games", str(config.simulation.num_games))
    table.add_row("Simulation", "Agent", config.simulation.agent)
    table.add_row("Logging", "Level", config.logging.level)

    console.print(table)


def main() -> None:
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
