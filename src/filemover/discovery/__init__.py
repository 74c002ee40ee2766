"""Discovery engine: find files to move and resolve their destinations."""

from .engine import (
    DEFAULT_IGNORED_PREFIXES,
    infer_date_segments,
    plan_moves,
    resolve_dated_destination,
)

__all__ = [
    "DEFAULT_IGNORED_PREFIXES",
    "plan_moves",
    "infer_date_segments",
    "resolve_dated_destination",
]
