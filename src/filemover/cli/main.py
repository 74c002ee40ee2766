"""Main CLI interface for filemover using Click."""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.markup import escape

from .. import __version__
from ..config import FileMoverConfig, get_config_manager
from ..core import FileMoverError, MoveSpec
from ..discovery import plan_moves
from ..mover import ConsolePrompter, ExecuteOptions, LocalFileSystem, execute_plan
from ..utils.logging import get_console, get_logger, setup_logging

# Operator output and log records share one console
console = get_console()
logger = get_logger(__name__)


def _print_error(message: str):
    console.print(f"[error]✗ Error:[/error] {escape(message)}", soft_wrap=True)


def _load_config(ctx) -> FileMoverConfig:
    """Load configuration and apply logging settings, exiting on invalid config."""
    try:
        config_manager = get_config_manager(ctx.obj.get("config_path"))
        config = config_manager.load()
    except ValueError as e:
        _print_error(str(e))
        sys.exit(1)

    setup_logging(
        level=ctx.obj.get("log_level") or config.logging.level,
        log_dir=config.logging.log_dir,
        max_bytes=config.logging.max_bytes,
        backup_count=config.logging.backup_count,
        console_enabled=config.logging.console_enabled,
        file_enabled=config.logging.file_enabled,
    )
    return config


def _run_move(
    ctx,
    source: Path,
    destination: Path,
    extension: str,
    dry: bool,
    date_mode: bool,
    continue_on_error: Optional[bool],
    confirm_plan: Optional[bool],
):
    """Plan and execute a move, then exit with the run's status."""
    config = _load_config(ctx)

    if not extension.strip():
        raise click.BadParameter("extension must not be empty", param_hint="'-t' / '--type'")

    spec = MoveSpec(
        source_root=source,
        destination_root=destination,
        extension=extension,
        dry_run=dry,
        date_mode=date_mode,
    )

    options = ExecuteOptions(
        affirmative_token=config.prompts.affirmative_token,
        continue_on_error=(
            config.behavior.continue_on_error if continue_on_error is None else continue_on_error
        ),
        confirm_plan=config.behavior.confirm_plan if confirm_plan is None else confirm_plan,
    )

    filesystem = LocalFileSystem()

    try:
        move_plan = plan_moves(
            spec,
            filesystem=filesystem,
            ignored_prefixes=config.behavior.ignored_prefixes,
        )
    except FileMoverError as e:
        _print_error(str(e))
        logger.debug(f"Discovery failed: {e}")
        sys.exit(1)

    report = execute_plan(
        move_plan,
        spec,
        filesystem=filesystem,
        prompter=ConsolePrompter(console),
        console=console,
        options=options,
    )

    if report.exit_code:
        logger.debug(f"Run failed: {report.message}")
    sys.exit(report.exit_code)


def move_options(func):
    """Options shared by the flat and date-partitioned move commands."""
    func = click.option(
        "--continue-on-error/--halt-on-error",
        default=None,
        help="Keep going after a failed move (default: halt, or the config value)",
    )(func)
    func = click.option(
        "--dry",
        "-d",
        is_flag=True,
        help="Dry run, do not move files but show what would be moved",
    )(func)
    func = click.option(
        "--type",
        "-t",
        "extension",
        required=True,
        help="Type of file to move (e.g. .jpg, .png, .txt)",
    )(func)
    func = click.argument("destination", type=click.Path(path_type=Path))(func)
    func = click.argument("source", type=click.Path(path_type=Path))(func)
    return func


@click.group()
@click.version_option(version=__version__, prog_name="filemover")
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Override the configured logging level",
)
@click.pass_context
def cli(ctx, config: Optional[Path], log_level: Optional[str]):
    """
    filemover - move files of one type from a folder to another.

    Every destructive step asks for confirmation first.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config
    ctx.obj["log_level"] = log_level


@cli.command(name="mv")
@move_options
@click.pass_context
def mv_command(
    ctx,
    source: Path,
    destination: Path,
    extension: str,
    dry: bool,
    continue_on_error: Optional[bool],
):
    """
    Move files from one directory to another.

    Moves the files directly inside SOURCE whose name ends with the given
    type into DESTINATION. Subdirectories are not searched.

    \b
    Examples:
        filemover mv ~/Downloads ~/Pictures -t .jpg
        filemover mv ./inbox ./archive -t .pdf --dry
    """
    _run_move(ctx, source, destination, extension, dry, False, continue_on_error, None)


@cli.command(name="mv-date")
@move_options
@click.option(
    "--confirm/--no-confirm",
    "confirm_plan",
    default=None,
    help="Ask once before moving anything (default: the config value)",
)
@click.pass_context
def mv_date_command(
    ctx,
    source: Path,
    destination: Path,
    extension: str,
    dry: bool,
    continue_on_error: Optional[bool],
    confirm_plan: Optional[bool],
):
    """
    Move files into year/month folders.

    Walks SOURCE recursively, skipping entries whose name starts with '@',
    and moves every file with the given extension to
    DESTINATION/<year>/<month>/<name>. Year and month come from the first
    four-digit and two-digit folder names in the file's path; missing parts
    are left out.

    \b
    Examples:
        filemover mv-date /volume1/photo /volume2/archive -t mp4
        filemover mv-date ./camera ./sorted -t .jpg --dry
    """
    _run_move(ctx, source, destination, extension, dry, True, continue_on_error, confirm_plan)


@cli.group(name="config")
def config_group():
    """Manage filemover configuration."""
    pass


@config_group.command(name="show")
@click.pass_context
def config_show(ctx):
    """Display current configuration."""
    console.print("\n[heading]filemover Configuration[/heading]\n")

    config_manager = get_config_manager(ctx.obj.get("config_path"))
    try:
        config = config_manager.load()
    except ValueError as e:
        _print_error(str(e))
        sys.exit(1)

    console.print("[heading]Prompts:[/heading]")
    console.print(f"  Affirmative answer: {config.prompts.affirmative_token!r}")

    console.print("\n[heading]Behavior:[/heading]")
    console.print(f"  Continue on error: {config.behavior.continue_on_error}")
    console.print(f"  Confirm plan: {config.behavior.confirm_plan}")
    console.print(f"  Ignored prefixes: {', '.join(config.behavior.ignored_prefixes) or '-'}")

    console.print("\n[heading]Logging:[/heading]")
    console.print(f"  Level: {config.logging.level}")
    console.print(f"  Log dir: {config.logging.log_dir}")
    console.print(f"  File logging: {config.logging.file_enabled}")

    source = config_manager.config_path or "defaults (no config file found)"
    console.print(f"\n[dim]Config file: {source}[/dim]")


if __name__ == "__main__":
    cli()
