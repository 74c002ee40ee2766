"""
filemover - interactive file mover.

Moves files of one type from a source folder to a destination folder,
optionally sorting them into year/month folders inferred from their path.
"""

__version__ = "1.0.0"
__author__ = "filemover Team"
__license__ = "MIT"

from .utils.logging import get_logger

from .core import (
    FileMoverError,
    MoveOutcome,
    MovePlan,
    MoveSpec,
    PlannedMove,
    RunReport,
    RunStatus,
)
from .discovery import plan_moves
from .mover import ExecuteOptions, LocalFileSystem, execute_plan

__all__ = [
    "get_logger",
    # Model
    "MoveSpec",
    "PlannedMove",
    "MovePlan",
    "MoveOutcome",
    "RunReport",
    "RunStatus",
    "FileMoverError",
    # Discovery
    "plan_moves",
    # Execution
    "ExecuteOptions",
    "LocalFileSystem",
    "execute_plan",
]
