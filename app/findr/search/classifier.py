"""Entry classification.

Maps a filesystem entry's own status (``lstat``, never following links)
to exactly one EntryType. Symlinks are checked first so a link is
classified by itself, not by what it points to.
"""

import os
import stat

from findr.search.models import EntryType


def classify_mode(mode: int) -> EntryType | None:
    """Classify an entry from its ``st_mode``.

    Checks in order:
    1. Symbolic link
    2. Directory
    3. Regular file

    Args:
        mode: ``st_mode`` taken from the entry's own (non-following) stat.

    Returns:
        EntryType classification, or None for any other kind of entry.
    """
    if stat.S_ISLNK(mode):
        return EntryType.SYMBOLIC_LINK
    if stat.S_ISDIR(mode):
        return EntryType.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryType.REGULAR_FILE
    return None


def classify(path: str | os.PathLike[str]) -> EntryType | None:
    """Classify a path by reading its own status.

    Args:
        path: Path to classify.

    Returns:
        EntryType classification, or None for special files.

    Raises:
        OSError: If the path cannot be stat'ed.
    """
    return classify_mode(os.lstat(path).st_mode)
