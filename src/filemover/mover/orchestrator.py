"""Move orchestrator: executes a MovePlan behind operator confirmation gates."""

import errno
from dataclasses import dataclass

from rich.console import Console
from rich.table import Table

from ..core.errors import DestinationCreationError, MoveFailedError
from ..core.models import MoveOutcome, MovePlan, MoveSpec, OutcomeKind, PlannedMove, RunReport, RunStatus
from ..utils.logging import get_console, get_logger
from .filesystem import FileSystem, LocalFileSystem, entry_exists, stat_if_exists
from .prompt import ConsolePrompter, Prompter, confirm

logger = get_logger(__name__)

RULE = "=" * 80


@dataclass(frozen=True)
class ExecuteOptions:
    """Knobs for plan execution."""

    affirmative_token: str = "y"
    # Default is to halt on the first failed move
    continue_on_error: bool = False
    # Ask once before the first move
    confirm_plan: bool = False


def _say(console: Console, text: str, style: str | None = None):
    """Print operator output verbatim; paths may contain markup characters."""
    console.print(text, style=style, markup=False, highlight=False, soft_wrap=True)


def _print_plan(console: Console, move_plan: MovePlan, spec: MoveSpec):
    verb = "would" if spec.dry_run else "will"
    _say(console, RULE)
    _say(console, f"Here are the files that {verb} be moved:")
    for move in move_plan:
        _say(console, f"{move.source_path} => {move.destination_path}")
    _say(console, RULE)


def _report_dry_run(
    console: Console,
    move_plan: MovePlan,
    spec: MoveSpec,
    filesystem: FileSystem,
) -> RunReport:
    """Describe what a real run would do without touching the filesystem."""
    _say(console, "This is a dry run, nothing will be changed in the filesystem", style="yellow")

    if spec.date_mode:
        return RunReport(RunStatus.DRY_RUN)

    destination = spec.destination_root
    try:
        if not entry_exists(filesystem, destination):
            _say(
                console,
                f"Destination folder {destination} does not exist, "
                "it would be created if you proceed",
            )
            return RunReport(RunStatus.DRY_RUN)

        existing = set(filesystem.list_directory(destination))
    except OSError as e:
        logger.debug(f"Could not inspect {destination}: {e}")
        _say(console, f"✗ Could not inspect {destination}: {e}", style="bold red")
        return RunReport(RunStatus.FAILED, message=str(e))

    overwritten = [
        move.destination_path.name
        for move in move_plan
        if move.destination_path.name in existing
    ]
    if overwritten:
        _say(console, "The following files would be overwritten (if you proceed):")
        for name in overwritten:
            _say(console, f"  • {name}")
    else:
        _say(console, "No files in the destination folder would be overwritten")

    return RunReport(RunStatus.DRY_RUN)


def _ensure_destinations(
    move_plan: MovePlan,
    filesystem: FileSystem,
    prompter: Prompter,
    options: ExecuteOptions,
) -> bool:
    """
    Make sure every destination folder exists, asking before creating any.

    Returns:
        False if the operator declined to create a folder

    Raises:
        DestinationCreationError: If a folder cannot be checked or created
    """
    for folder in move_plan.destination_folders():
        try:
            if entry_exists(filesystem, folder):
                continue
        except OSError as e:
            raise DestinationCreationError(folder, e) from e

        question = f"Destination folder {folder} does not exist, create it? (y/n) "
        if not confirm(prompter, question, options.affirmative_token):
            return False

        try:
            filesystem.create_directory(folder, recursive=True)
        except OSError as e:
            raise DestinationCreationError(folder, e) from e

        logger.info(f"Created folder: {folder}")

    return True


def _move_one(filesystem: FileSystem, move: PlannedMove):
    try:
        filesystem.move_entry(move.source_path, move.destination_path)
    except OSError as e:
        raise MoveFailedError(move.source_path, move.destination_path, e) from e


def _execute_move(
    move: PlannedMove,
    filesystem: FileSystem,
    prompter: Prompter,
    console: Console,
    options: ExecuteOptions,
) -> MoveOutcome:
    destination = move.destination_path

    try:
        existing = stat_if_exists(filesystem, destination)

        if existing is not None and existing.is_directory:
            # shutil.move would put the file inside the folder instead of replacing it
            error = IsADirectoryError(errno.EISDIR, "Destination is a directory", str(destination))
            logger.debug(f"Cannot move {move.source_path}: {error}")
            _say(console, f"✗ Cannot overwrite {destination}: it is a directory", style="bold red")
            return MoveOutcome.failed(move, error)

        if existing is not None:
            question = f"File {destination} already exists, overwrite? (y/n) "
            if not confirm(prompter, question, options.affirmative_token):
                logger.info(f"Skipped {move.source_path}: destination exists")
                _say(console, f"Skipping {destination}", style="yellow")
                return MoveOutcome.skipped(move, "overwrite declined")

        _move_one(filesystem, move)

    except MoveFailedError as e:
        logger.debug(str(e))
        _say(console, f"✗ {e}", style="bold red")
        return MoveOutcome.failed(move, e.error)
    except OSError as e:
        logger.debug(f"Could not check {destination}: {e}")
        _say(console, f"✗ Could not check {destination}: {e}", style="bold red")
        return MoveOutcome.failed(move, e)

    logger.info(f"Moved: {move.source_path} -> {destination}")
    _say(console, f"Moved {move.source_path} to {destination}")
    return MoveOutcome.moved(move)


def _print_summary(console: Console, report: RunReport):
    table = Table(title="Move Summary", show_header=True, header_style="bold cyan")
    table.add_column("Result", style="cyan")
    table.add_column("Count", style="green", justify="right")

    table.add_row("Moved", str(report.moved))
    table.add_row("Skipped", str(report.skipped))
    table.add_row("Failed", str(report.failed))

    console.print(table)


def execute_plan(
    move_plan: MovePlan,
    spec: MoveSpec,
    filesystem: FileSystem | None = None,
    prompter: Prompter | None = None,
    console: Console | None = None,
    options: ExecuteOptions | None = None,
) -> RunReport:
    """
    Execute a move plan, asking the operator before anything destructive.

    Steps: empty-plan guard, plan listing, dry-run report, optional plan
    confirmation, destination folder creation, then per-file overwrite
    check and move.

    Args:
        move_plan: Moves produced by discovery
        spec: MoveSpec the plan was built from
        filesystem: Filesystem to act on (defaults to the local disk)
        prompter: Source of operator answers (defaults to the terminal)
        console: Console for operator output
        options: Execution options

    Returns:
        RunReport describing how the run ended
    """
    filesystem = filesystem or LocalFileSystem()
    console = console or get_console()
    prompter = prompter or ConsolePrompter(console)
    options = options or ExecuteOptions()

    if not move_plan:
        message = f"No files found in {spec.source_root} for type {spec.extension}"
        _say(console, message, style="yellow")
        return RunReport(RunStatus.NOTHING_TO_DO, message=message)

    if spec.dry_run or spec.date_mode:
        _print_plan(console, move_plan, spec)

    if spec.dry_run:
        return _report_dry_run(console, move_plan, spec, filesystem)

    if options.confirm_plan and not confirm(
        prompter, "Do you want to proceed? (y/n) ", options.affirmative_token
    ):
        _say(console, "Aborting", style="yellow")
        return RunReport(RunStatus.DECLINED, message="Operator declined to proceed")

    try:
        if not _ensure_destinations(move_plan, filesystem, prompter, options):
            _say(console, "Aborting", style="yellow")
            return RunReport(RunStatus.DECLINED, message="Operator declined to create destination")
    except DestinationCreationError as e:
        logger.debug(str(e))
        _say(console, f"✗ {e}", style="bold red")
        return RunReport(RunStatus.FAILED, message=str(e))

    report = RunReport(RunStatus.COMPLETED)

    for index, move in enumerate(move_plan):
        outcome = _execute_move(move, filesystem, prompter, console, options)
        report.outcomes.append(outcome)

        if outcome.kind == OutcomeKind.FAILED and not options.continue_on_error:
            remaining = len(move_plan) - index - 1
            report.status = RunStatus.FAILED
            report.message = outcome.reason
            if remaining:
                _say(console, f"Stopping, {remaining} remaining file(s) were not moved", style="bold red")
            _print_summary(console, report)
            return report

    if report.failed:
        report.status = RunStatus.FAILED
        report.message = f"{report.failed} file(s) could not be moved"

    _print_summary(console, report)
    if report.success:
        _say(console, "✓ Done", style="bold green")
    return report
