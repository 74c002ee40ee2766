"""Data model shared by discovery and move execution."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MoveSpec(BaseModel):
    """
    What to move, from where, and how.

    Built once from caller input and never changed during a run.
    """

    model_config = ConfigDict(frozen=True)

    source_root: Path = Field(description="Directory files are taken from")
    destination_root: Path = Field(description="Directory files are moved into")
    extension: str = Field(description="Extension filter, e.g. '.jpg' or 'mp4'")
    dry_run: bool = Field(default=False, description="Report only, never touch the filesystem")
    date_mode: bool = Field(
        default=False, description="Walk recursively and partition destinations by year/month"
    )

    @field_validator("extension")
    @classmethod
    def extension_not_empty(cls, v: str) -> str:
        """Reject an empty extension filter."""
        if not v.strip():
            raise ValueError("extension must not be empty")
        return v

    @property
    def date_extension(self) -> str:
        """Extension in ``Path.suffix`` form, with exactly one leading dot."""
        return "." + self.extension.lstrip(".")


@dataclass(frozen=True)
class PlannedMove:
    """One resolved source to destination pair awaiting execution."""

    source_path: Path
    destination_path: Path

    @property
    def destination_folder(self) -> Path:
        """Get the destination folder."""
        return self.destination_path.parent


@dataclass(frozen=True)
class MovePlan:
    """Planned moves in discovery order."""

    moves: tuple[PlannedMove, ...] = ()

    def __iter__(self) -> Iterator[PlannedMove]:
        return iter(self.moves)

    def __len__(self) -> int:
        return len(self.moves)

    def __bool__(self) -> bool:
        return bool(self.moves)

    def destination_folders(self) -> list[Path]:
        """Distinct destination folders, in the order they are first needed."""
        folders: list[Path] = []
        seen: set[Path] = set()
        for move in self.moves:
            folder = move.destination_folder
            if folder not in seen:
                seen.add(folder)
                folders.append(folder)
        return folders


class OutcomeKind(str, Enum):
    """What happened to a single planned move."""

    MOVED = "moved"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class MoveOutcome:
    """Result of executing one planned move."""

    move: PlannedMove
    kind: OutcomeKind
    reason: str | None = None
    error: OSError | None = None

    @classmethod
    def moved(cls, move: PlannedMove) -> "MoveOutcome":
        return cls(move=move, kind=OutcomeKind.MOVED)

    @classmethod
    def skipped(cls, move: PlannedMove, reason: str) -> "MoveOutcome":
        return cls(move=move, kind=OutcomeKind.SKIPPED, reason=reason)

    @classmethod
    def failed(cls, move: PlannedMove, error: OSError) -> "MoveOutcome":
        return cls(move=move, kind=OutcomeKind.FAILED, reason=str(error), error=error)


class RunStatus(str, Enum):
    """How a run ended."""

    COMPLETED = "completed"
    NOTHING_TO_DO = "nothing_to_do"
    DRY_RUN = "dry_run"
    DECLINED = "declined"
    FAILED = "failed"


@dataclass
class RunReport:
    """Outcome of executing a plan, used to decide the process exit status."""

    status: RunStatus
    outcomes: list[MoveOutcome] = field(default_factory=list)
    message: str | None = None

    def _count(self, kind: OutcomeKind) -> int:
        return sum(1 for outcome in self.outcomes if outcome.kind == kind)

    @property
    def moved(self) -> int:
        return self._count(OutcomeKind.MOVED)

    @property
    def skipped(self) -> int:
        return self._count(OutcomeKind.SKIPPED)

    @property
    def failed(self) -> int:
        return self._count(OutcomeKind.FAILED)

    @property
    def success(self) -> bool:
        return self.status != RunStatus.FAILED

    @property
    def exit_code(self) -> int:
        """Declines, dry runs and empty plans all count as success."""
        return 0 if self.success else 1
