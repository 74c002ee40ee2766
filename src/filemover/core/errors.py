"""Error types raised by filemover."""

from pathlib import Path


class FileMoverError(Exception):
    """Base error for the project."""


class SourceNotADirectoryError(FileMoverError):
    """The source root is missing or is not a directory."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"{path} is not a directory")


class DiscoveryError(FileMoverError):
    """A directory could not be listed or inspected during discovery."""

    def __init__(self, path: Path, error: OSError):
        self.path = path
        self.error = error
        super().__init__(f"Could not read {path}: {error}")


class DestinationCreationError(FileMoverError):
    """A destination folder could not be created."""

    def __init__(self, path: Path, error: OSError):
        self.path = path
        self.error = error
        super().__init__(f"Could not create {path}: {error}")


class MoveFailedError(FileMoverError):
    """A single file could not be moved."""

    def __init__(self, source: Path, destination: Path, error: OSError):
        self.source = source
        self.destination = destination
        self.error = error
        super().__init__(f"Could not move {source} to {destination}: {error}")
