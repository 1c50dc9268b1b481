"""Display and formatting service for branch information"""
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from git_batch_branch.constants import (
    BRANCH_COLUMNS,
    CLI_COLORS,
    LEGEND_TEXT,
    SYMBOL_DELETE,
    SYMBOL_FAILURE,
    SYMBOL_SUCCESS,
)
from git_batch_branch.formatters import (
    format_action_label,
    format_branch_name,
    format_branch_state,
    format_failure_line,
    format_stats_rows,
    get_branch_prefix,
    get_branch_style_type,
)
from git_batch_branch.models.branch import Branch
from git_batch_branch.models.results import BatchDeleteResult, FilterStats


class DisplayService:
    """Renders branch lists, statistics and delete results with rich."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def display_branch_table(self, branches: List[Branch], title: Optional[str] = None,
                             show_legend: bool = False) -> None:
        """Display a numbered table of branches."""
        if not branches:
            self.console.print("[blue]ℹ[/blue] No branches found")
            return

        table = Table(title=title or f"Branches ({len(branches)})", title_style="bold blue")
        for col in BRANCH_COLUMNS:
            table.add_column(col.label, min_width=col.width or None)

        for index, branch in enumerate(branches, start=1):
            table.add_row(
                str(index),
                f"{get_branch_prefix(branch)} {escape(format_branch_name(branch))}",
                format_branch_state(branch),
                escape(branch.last_commit),
                branch.last_commit_date,
                style=CLI_COLORS.get(get_branch_style_type(branch)),
            )

        self.console.print(table)
        if show_legend:
            self.console.print(LEGEND_TEXT, style="dim")

    def display_stats(self, stats: FilterStats) -> None:
        """Display branch statistics."""
        self.console.print("\n[cyan]📊 BRANCH STATISTICS:[/cyan]")
        for label, value, color in format_stats_rows(stats):
            self.console.print(f"{label}: [{color}]{value}[/{color}]")

    def display_delete_preview(self, branches: List[Branch]) -> None:
        """Display the branches a deletion would touch."""
        if not branches:
            self.console.print("[yellow]⚠[/yellow] No branches to delete")
            return

        self.console.print("\n[yellow]⚠️  BRANCHES TO BE DELETED:[/yellow]")
        for branch in branches:
            self.console.print(f"[red]{SYMBOL_DELETE}[/red] {escape(format_branch_name(branch))}")
        self.console.print(f"\n[yellow]Total branches to delete:[/yellow] {len(branches)}")

    def display_delete_results(self, result: BatchDeleteResult) -> None:
        """Display a batch delete result, failures first."""
        action = format_action_label(result.dry_run)

        self.console.print("\n[cyan]📋 DELETE RESULTS:[/cyan]")
        self.console.print(f"Total processed: {result.total}")
        self.console.print(f"Successfully {action}: [green]{result.success}[/green]")
        self.console.print(f"Failed: [red]{result.failed}[/red]")

        if result.failures:
            self.console.print("\n[red]❌ FAILED:[/red]")
            for failure in result.failures:
                self.console.print(f"[red]{SYMBOL_FAILURE}[/red] {escape(format_failure_line(failure))}")

        if result.succeeded:
            self.console.print(f"\n[green]✅ SUCCESSFULLY {action.upper()}:[/green]")
            for success in result.succeeded:
                self.console.print(f"[green]{SYMBOL_SUCCESS}[/green] {escape(success.branch_name)}")

        if result.dry_run:
            self.console.print(
                "\n[yellow]⚠[/yellow] This was a dry run. No branches were actually deleted."
            )

    def info(self, message: str) -> None:
        self.console.print(f"[blue]ℹ[/blue] {escape(message)}")

    def success(self, message: str) -> None:
        self.console.print(f"[green]{SYMBOL_SUCCESS}[/green] {escape(message)}")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    def error(self, message: str) -> None:
        self.console.print(f"[red]{SYMBOL_FAILURE}[/red] {escape(message)}")
