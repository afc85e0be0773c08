"""
Display management for the extractor CLI with Rich components.
"""

from typing import Any, Callable, List, Optional

from rich import box
from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from ..core.interfaces import Notifier
from ..core.settings import Settings
from ..models.search_results import SearchResult


class DisplayManager(Notifier):
    """Notifications, search result tables and prompts using Rich."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)

    def notify(self, message: str, success: bool = True) -> None:
        if success:
            self.console.print(f"[bold green]✓[/bold green] {escape(message)}", highlight=False, emoji=False)
        else:
            self.console.print(f"[bold red]✗[/bold red] {escape(message)}", highlight=False, emoji=False)

    def create_header_panel(self, title: str, subtitle: Optional[str] = None) -> Panel:
        """Create a styled header panel."""
        header_text = Text(title, style="bold cyan")
        if subtitle:
            header_text.append(f"\n{subtitle}", style="dim")
        return Panel(
            Align.center(header_text),
            border_style="cyan",
            box=box.ROUNDED,
            padding=(1, 2)
        )

    def show_loading_spinner(self, message: str, task_func: Callable, *args, **kwargs) -> Any:
        """Show a loading spinner while executing a task."""
        with self.console.status(f"[bold cyan]{escape(message)}[/bold cyan]", spinner="dots"):
            return task_func(*args, **kwargs)

    def display_search_results(self, results: List[SearchResult]):
        """Display search results in a table."""
        if not results:
            self.console.print("[bold red]✗[/bold red] No results found.")
            return

        self.console.print()
        self.console.print(self.create_header_panel(
            "💿 DISCOGS SEARCH RESULTS",
            f"Found {len(results)} result{'s' if len(results) != 1 else ''}"
        ))
        self.console.print()

        table = Table(
            show_header=True,
            header_style="bold magenta",
            box=box.ROUNDED,
            border_style="blue",
            show_lines=True
        )
        table.add_column("#", style="bold white", width=4, justify="center")
        table.add_column("Release", style="white", no_wrap=False)

        for i, result in enumerate(results, 1):
            cell = Text(result.get_display_name(), style="bold white")
            cell.append(f"\n{result.get_subtitle()}", style="dim")
            table.add_row(str(i), cell)

        self.console.print(table)
        self.console.print()

    def get_user_selection(self, results: List[SearchResult]) -> Optional[SearchResult]:
        """Ask the user to pick a result; None if cancelled."""
        if not results:
            return None

        self.console.print(
            f"[bold blue]ℹ[/bold blue] Select a release ([cyan]1-{len(results)}[/cyan], or [red]'q'[/red] to quit):"
        )
        while True:
            choice = Prompt.ask("[bold]Your choice[/bold]", default="", console=self.console)

            if choice.lower() in ['q', 'quit', 'exit']:
                self.console.print("[yellow]⚠[/yellow] Selection cancelled.")
                return None

            try:
                choice_num = int(choice)
            except ValueError:
                self.console.print("[bold red]✗[/bold red] Please enter a valid number or 'q' to quit")
                continue

            if 1 <= choice_num <= len(results):
                selected = results[choice_num - 1]
                self.console.print(
                    f"[bold green]✓[/bold green] Selected: [white]{escape(selected.get_display_name())}[/white]",
                    emoji=False
                )
                return selected
            self.console.print(f"[bold red]✗[/bold red] Please enter a number between 1 and {len(results)}")

    def ask(self, prompt: str) -> str:
        return Prompt.ask(f"[bold]{prompt}[/bold]", console=self.console)

    def display_settings(self, settings: Settings, settings_path: str):
        """Show the current settings, hiding the API secret."""
        table = Table(show_header=True, header_style="bold magenta", box=box.ROUNDED, border_style="blue")
        table.add_column("Setting", style="cyan", no_wrap=True)
        table.add_column("Value", style="white")

        for key, value in settings.to_dict().items():
            if key == "api_secret" and value:
                value = "*" * 8
            table.add_row(key, Text(value or "—"))

        self.console.print(table)
        self.console.print(f"  [dim]Path: {escape(settings_path)}[/dim]")
