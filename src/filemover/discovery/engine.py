"""Discovery engine: turns a MoveSpec into an ordered MovePlan."""

import re
from collections.abc import Iterator, Sequence
from pathlib import Path

from ..core.errors import DiscoveryError, SourceNotADirectoryError
from ..core.models import MovePlan, MoveSpec, PlannedMove
from ..mover.filesystem import FileSystem, LocalFileSystem
from ..utils.logging import get_logger

logger = get_logger(__name__)

# Synology-style sidecar folders such as @eaDir
DEFAULT_IGNORED_PREFIXES = ("@",)

YEAR_SEGMENT = re.compile(r"[0-9]{4}")
MONTH_SEGMENT = re.compile(r"[0-9]{2}")


def infer_date_segments(path: Path) -> tuple[str | None, str | None]:
    """
    Infer year and month from the directory segments of a path.

    The first segment made of exactly four digits is the year and the first
    made of exactly two digits is the month. The file name is not inspected
    and values are not checked against real calendar ranges.

    Args:
        path: Full path of a discovered file

    Returns:
        Tuple of (year, month); either may be None
    """
    year = None
    month = None
    for segment in Path(path).parent.parts:
        if year is None and YEAR_SEGMENT.fullmatch(segment):
            year = segment
        elif month is None and MONTH_SEGMENT.fullmatch(segment):
            month = segment
    return year, month


def resolve_dated_destination(source_path: Path, destination_root: Path) -> Path:
    """Build ``destination_root[/year][/month]/name`` for a discovered file."""
    year, month = infer_date_segments(source_path)

    destination = Path(destination_root)
    if year:
        destination = destination / year
    if month:
        destination = destination / month

    return destination / Path(source_path).name


def _list(filesystem: FileSystem, directory: Path) -> list[str]:
    try:
        return filesystem.list_directory(directory)
    except OSError as e:
        raise DiscoveryError(directory, e) from e


def _check_source_root(filesystem: FileSystem, source_root: Path):
    try:
        entry = filesystem.stat_entry(source_root)
    except OSError as e:
        raise SourceNotADirectoryError(source_root) from e

    if not entry.is_directory:
        raise SourceNotADirectoryError(source_root)


def _plan_flat(filesystem: FileSystem, spec: MoveSpec) -> Iterator[PlannedMove]:
    """Immediate children whose name ends with the extension, no recursion."""
    for name in _list(filesystem, spec.source_root):
        if name.endswith(spec.extension):
            yield PlannedMove(
                source_path=spec.source_root / name,
                destination_path=spec.destination_root / name,
            )


def _plan_dated(
    filesystem: FileSystem,
    spec: MoveSpec,
    directory: Path,
    ignored_prefixes: tuple[str, ...],
) -> Iterator[PlannedMove]:
    """Depth-first walk; each subtree is exhausted before its next sibling."""
    for name in _list(filesystem, directory):
        if ignored_prefixes and name.startswith(ignored_prefixes):
            logger.debug(f"Ignoring {directory / name}")
            continue

        path = directory / name
        try:
            entry = filesystem.stat_entry(path)
        except OSError as e:
            raise DiscoveryError(path, e) from e

        if entry.is_directory:
            yield from _plan_dated(filesystem, spec, path, ignored_prefixes)
        elif entry.is_file and path.suffix == spec.date_extension:
            yield PlannedMove(
                source_path=path,
                destination_path=resolve_dated_destination(path, spec.destination_root),
            )


def plan_moves(
    spec: MoveSpec,
    filesystem: FileSystem | None = None,
    ignored_prefixes: Sequence[str] = DEFAULT_IGNORED_PREFIXES,
) -> MovePlan:
    """
    Discover the files to move and where each one goes.

    Args:
        spec: What to move and how
        filesystem: Filesystem to read from (defaults to the local disk)
        ignored_prefixes: Entry name prefixes skipped in date mode

    Returns:
        MovePlan in traversal order

    Raises:
        SourceNotADirectoryError: If the source root is missing or not a directory
        DiscoveryError: If a directory cannot be listed or an entry cannot be inspected
    """
    filesystem = filesystem or LocalFileSystem()

    _check_source_root(filesystem, spec.source_root)

    if spec.date_mode:
        moves = _plan_dated(filesystem, spec, spec.source_root, tuple(ignored_prefixes))
    else:
        moves = _plan_flat(filesystem, spec)

    plan = MovePlan(tuple(moves))

    logger.info(
        f"Planned {len(plan)} move(s) from {spec.source_root} "
        f"({'date' if spec.date_mode else 'flat'} mode, type {spec.extension})"
    )
    return plan
