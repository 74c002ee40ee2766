"""Mover module: filesystem access, operator prompts and plan execution."""

from .filesystem import EntryStat, FileSystem, LocalFileSystem, entry_exists, stat_if_exists
from .orchestrator import ExecuteOptions, execute_plan
from .prompt import ConsolePrompter, Prompter, confirm

__all__ = [
    # Filesystem
    "EntryStat",
    "FileSystem",
    "LocalFileSystem",
    "entry_exists",
    "stat_if_exists",
    # Prompts
    "Prompter",
    "ConsolePrompter",
    "confirm",
    # Orchestrator
    "ExecuteOptions",
    "execute_plan",
]
