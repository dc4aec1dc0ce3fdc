"""Search domain models for directory traversal.

This module defines the value types produced while walking a directory
tree: the entry type classification, the per-entry traversal record, and
the recoverable error reported when a single entry cannot be read.
"""

from dataclasses import dataclass
from enum import Enum


class EntryType(str, Enum):
    """Type of a filesystem entry.

    The values double as the literals accepted by ``--type``.

    Attributes:
        DIRECTORY: Directory.
        REGULAR_FILE: Regular file.
        SYMBOLIC_LINK: Symbolic link, whatever it points to.
    """

    DIRECTORY = "d"
    REGULAR_FILE = "f"
    SYMBOLIC_LINK = "l"


@dataclass(frozen=True, slots=True)
class TraversalEntry:
    """A filesystem object visited during a walk.

    Attributes:
        path: Full path string, built by joining names onto the root.
        name: Base name (final path segment).
        entry_type: Classification, or None for special files
            (FIFOs, sockets, devices).
        depth: Distance from the root (0 for the root itself).
    """

    path: str
    name: str
    entry_type: EntryType | None
    depth: int = 0

    def __post_init__(self) -> None:
        """Validate traversal entry data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)
        if self.depth < 0:
            msg = f"Depth cannot be negative, got {self.depth}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class WalkError:
    """A recoverable failure encountered while walking.

    Attributes:
        path: Path of the entry or directory that could not be read.
        message: Description of the underlying I/O failure.
    """

    path: str
    message: str

    @classmethod
    def from_os_error(cls, path: str, exc: OSError) -> "WalkError":
        """Build a WalkError from an OSError raised for ``path``."""
        return cls(path=path, message=exc.strerror or str(exc))

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"
