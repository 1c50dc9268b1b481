"""Command-line interface for git-batch-branch"""

import argparse
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from git_batch_branch.cli.args import parse_args
from git_batch_branch.config import Config
from git_batch_branch.constants import MESSAGE_NO_MATCHES
from git_batch_branch.core import BranchManager
from git_batch_branch.exceptions import InvalidFilterConfigError
from git_batch_branch.logging_config import get_logger, setup_logging
from git_batch_branch.models.options import DeleteOptions, FilterOptions
from git_batch_branch.services.display_service import DisplayService
from git_batch_branch.services.filter_service import FilterService
from git_batch_branch.services.git import GitOperations
from git_batch_branch.services.prompt_service import PromptService

console = Console()


class CommandContext:
    """Everything a subcommand needs, built once per invocation."""

    def __init__(self, manager: BranchManager, config: Config, display: DisplayService,
                 prompts: PromptService):
        self.manager = manager
        self.config = config
        self.display = display
        self.prompts = prompts


def build_filter_options(parsed_args: argparse.Namespace, config: Config) -> FilterOptions:
    """Collect filter options; commands without filter flags get an empty filter."""
    options = FilterOptions(
        keyword=getattr(parsed_args, "keyword", None),
        regex=getattr(parsed_args, "regex", None),
        exclude=getattr(parsed_args, "exclude", False),
        include_merged=getattr(parsed_args, "include_merged", None),
        case_sensitive=config.case_sensitive,
    )
    validation = FilterService.validate_filter_options(options)
    if not validation.valid:
        raise InvalidFilterConfigError(validation.error)
    return options


def run_delete(ctx: CommandContext, filter_options: FilterOptions) -> int:
    """Delete branches picked by a filter or, without one, interactively."""
    config = ctx.config
    delete_options = DeleteOptions(dry_run=config.dry_run, force=config.force, verbose=config.verbose)

    ctx.display.display_stats(ctx.manager.get_branch_stats(filter_options))

    if filter_options.keyword or filter_options.regex:
        filtered = ctx.manager.get_filtered_branches(filter_options)
        if not filtered:
            ctx.display.warning(MESSAGE_NO_MATCHES)
            return 0

        ctx.display.display_delete_preview(filtered)
        if not config.force and not config.dry_run:
            if not ctx.prompts.confirm_deletion([b.name for b in filtered]):
                ctx.display.info("Operation cancelled")
                return 0

        result = ctx.manager.delete_branches_by_filter(filter_options, delete_options)
        ctx.display.display_delete_results(result)
        return 0

    if not config.interactive:
        ctx.display.error("Interactive selection needs a terminal; pass --filter or --regex")
        return 1

    deletable = ctx.manager.get_filtered_branches(filter_options)
    if not deletable:
        ctx.display.info("No branches available for deletion")
        return 0

    selected = ctx.prompts.select_branches(deletable)
    if not selected:
        ctx.display.info("No branches selected")
        return 0

    if not ctx.prompts.confirm_deletion(selected, dry_run=config.dry_run):
        ctx.display.info("Operation cancelled")
        return 0
    if config.force and not config.dry_run and not ctx.prompts.confirm_force_deletion(selected):
        ctx.display.info("Operation cancelled")
        return 0

    result = ctx.manager.delete_branches(selected, delete_options)
    ctx.display.display_delete_results(result)
    return 0


def run_switch(ctx: CommandContext, branch_name: Optional[str] = None) -> int:
    """Switch to a named branch, or ask which one."""
    if branch_name is None:
        if not ctx.config.interactive:
            ctx.display.error("Branch name required when not running in a terminal")
            return 1
        branches = ctx.manager.get_all_branches()
        if not branches:
            ctx.display.info("No branches found")
            return 0
        branch_name = ctx.prompts.select_branch_to_switch(branches)
        if branch_name is None:
            ctx.display.info("Operation cancelled")
            return 0

    if not ctx.manager.switch_branch(branch_name):
        ctx.display.error(f"Failed to switch to branch: {branch_name}")
        return 1

    if ctx.manager.needs_refresh:
        ctx.manager.refresh_branches()
    ctx.display.success(f"Successfully switched to branch: {branch_name}")
    return 0


def run_list(ctx: CommandContext, filter_options: FilterOptions) -> int:
    """Show branches (filtered when any filter flag is given) and statistics."""
    has_filter = (
        filter_options.keyword
        or filter_options.regex
        or filter_options.include_merged is not None
    )
    if has_filter:
        branches = ctx.manager.get_filtered_branches(filter_options)
        ctx.display.display_branch_table(branches, title=f"Matching branches ({len(branches)})")
    else:
        ctx.display.display_branch_table(ctx.manager.get_all_branches(), show_legend=True)

    ctx.display.display_stats(ctx.manager.get_branch_stats(filter_options))
    return 0


def run_branch(ctx: CommandContext) -> int:
    """Show statistics, then ask whether to delete or switch."""
    ctx.display.display_stats(ctx.manager.get_branch_stats())
    if not ctx.config.interactive:
        ctx.display.error("Interactive mode needs a terminal; use the delete, switch or list command")
        return 1

    mode = ctx.prompts.select_mode()
    if mode == "delete":
        return run_delete(ctx, FilterOptions())
    if mode == "switch":
        return run_switch(ctx)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    parsed_args = None
    try:
        parsed_args = parse_args(argv)

        setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

        config = Config(
            repo_path=parsed_args.path,
            main_branch=parsed_args.main_branch,
            interactive=sys.stdin.isatty(),
            dry_run=getattr(parsed_args, "dry_run", False),
            force=getattr(parsed_args, "force", False),
            case_sensitive=getattr(parsed_args, "case_sensitive", False),
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )

        if parsed_args.debug:
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}")

        filter_options = build_filter_options(parsed_args, config)

        provider = GitOperations(config.repo_path, config, logger=get_logger(GitOperations.__module__))
        manager = BranchManager(provider, logger=get_logger(BranchManager.__module__))
        manager.initialize()

        display = DisplayService(console)
        ctx = CommandContext(manager, config, display, PromptService(console, display))

        if parsed_args.command == "delete":
            return run_delete(ctx, filter_options)
        if parsed_args.command == "switch":
            return run_switch(ctx, parsed_args.name)
        if parsed_args.command == "list":
            return run_list(ctx, filter_options)
        return run_branch(ctx)
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if parsed_args is not None and parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
