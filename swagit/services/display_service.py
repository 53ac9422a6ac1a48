"""Display service for sync results and workflow messages"""
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from swagit.formatters import format_status_line
from swagit.models.branch import BranchState, BranchStatus
from swagit.logging_config import get_logger

logger = get_logger(__name__)


class DisplayService:
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def show_current_branch(self, branch_name: str) -> None:
        self.console.print(f"[blue]Info:[/blue] Current branch is [magenta]{escape(branch_name)}[/magenta]")

    def show_success(self, message: str) -> None:
        self.console.print(f"[green]{escape(message)}[/green]")

    def show_info(self, message: str) -> None:
        self.console.print(f"[blue]{escape(message)}[/blue]")

    def show_message(self, message: str) -> None:
        self.console.print(escape(message))

    def display_sync_results(self, statuses: List[BranchStatus]) -> None:
        """Print one line per status, then a short summary."""
        for status in statuses:
            self.console.print(format_status_line(status))

        merged = sum(1 for s in statuses if s.state == BranchState.MERGED)
        if merged:
            self.console.print(f"\n[green]Deleted {merged} merged branches[/green]")
        elif not any(s.state == BranchState.MODIFIED for s in statuses):
            self.console.print("\n[blue]No merged branches to clean up[/blue]")
