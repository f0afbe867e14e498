"""Human player agent for interactive terminal blackjack."""

from rich.console import Console

from agents.base import BaseAgent
from blackjack.table import Action, TableState
from ui.display import ACTION_KEYS, print_divider, render_action_menu, render_table


class HumanAgent(BaseAgent):
    """Agent that prompts a human player for decisions via terminal."""

    def __init__(
        self,
        name: str = "You",
        console: Console | None = None,
    ) -> None:
        super().__init__(name)
        self.console = console or Console()
        self.game_number: int = 1
        self._actions_by_key = {key: action for action, key in ACTION_KEYS.items()}

    def decide(self, table_state: TableState) -> Action:
        """Display game state and prompt human for action."""
        self._display_game_state(table_state)
        return self._get_player_action(table_state)

    def _display_game_state(self, table_state: TableState) -> None:
        """Render the current game state."""
        self.console.print(f"[bold blue]BLACKJACK - Game #{self.game_number}[/bold blue]", justify="center")
        print_divider(self.console)
        self.console.print(render_table(table_state))
        print_divider(self.console)

    def _get_player_action(self, table_state: TableState) -> Action:
        """Prompt until a valid action is entered."""
        self.console.print(render_action_menu(table_state))

        while True:
            try:
                raw = self.console.input("[bold]> [/bold]").strip().lower()
            except EOFError:
                # Handle Ctrl+D
                self.console.print("\n[yellow]Exiting...[/yellow]")
                raise KeyboardInterrupt

            if raw in ("q", "quit", "exit"):
                self.console.print("[yellow]Exiting...[/yellow]")
                raise KeyboardInterrupt

            action = self._actions_by_key.get(raw)
            if action is not None and action in table_state.valid_actions:
                return action

            keys = "/".join(ACTION_KEYS[a] for a in table_state.valid_actions)
            self.console.print(f"[red]Invalid choice. Enter {keys}.[/red]")
