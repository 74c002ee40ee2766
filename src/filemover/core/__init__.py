"""Core data model and error types."""

from .errors import (
    DestinationCreationError,
    DiscoveryError,
    FileMoverError,
    MoveFailedError,
    SourceNotADirectoryError,
)
from .models import (
    MoveOutcome,
    MovePlan,
    MoveSpec,
    OutcomeKind,
    PlannedMove,
    RunReport,
    RunStatus,
)

__all__ = [
    # Model
    "MoveSpec",
    "PlannedMove",
    "MovePlan",
    "MoveOutcome",
    "OutcomeKind",
    "RunReport",
    "RunStatus",
    # Errors
    "FileMoverError",
    "SourceNotADirectoryError",
    "DiscoveryError",
    "DestinationCreationError",
    "MoveFailedError",
]
