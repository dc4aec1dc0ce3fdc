"""Recursive directory walker.

Walks a directory tree depth-first, parent before children, yielding a
TraversalEntry for the root and every entry below it. Failures to read a
single entry or directory are reported through a callback and skipped so
the rest of the tree is still visited.
"""

import logging
import os
from collections.abc import Callable, Iterator

from findr.search.classifier import classify_mode
from findr.search.models import EntryType, TraversalEntry, WalkError

logger = logging.getLogger(__name__)

ErrorHandler = Callable[[WalkError], None]


def walk(
    root: str,
    *,
    on_error: ErrorHandler | None = None,
    sort_entries: bool = True,
) -> Iterator[TraversalEntry]:
    """Walk the tree below ``root``.

    The root is always yielded first. A root that is a symlink to a
    directory is descended into; symlinks below the root are yielded but
    never followed.

    Args:
        root: Root path, kept exactly as given in yielded paths.
        on_error: Called once per recoverable failure.
        sort_entries: Visit directory children in name order. If False,
            children come in the order the OS lists them.

    Yields:
        TraversalEntry for each reachable entry.
    """
    try:
        root_stat = os.lstat(root)
    except OSError as e:
        _report(WalkError.from_os_error(root, e), on_error)
        return

    yield TraversalEntry(
        path=root,
        name=_base_name(root),
        entry_type=classify_mode(root_stat.st_mode),
        depth=0,
    )

    if not os.path.isdir(root):
        return

    stack: list[Iterator[TraversalEntry]] = [
        iter(_read_directory(root, 1, on_error, sort_entries)),
    ]
    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue

        yield entry

        if entry.entry_type == EntryType.DIRECTORY:
            stack.append(iter(_read_directory(entry.path, entry.depth + 1, on_error, sort_entries)))


def _read_directory(
    path: str,
    depth: int,
    on_error: ErrorHandler | None,
    sort_entries: bool,
) -> list[TraversalEntry]:
    """Read and classify the direct children of a directory.

    Args:
        path: Directory to list.
        depth: Depth assigned to the children.
        on_error: Error callback for unreadable directories and children.
        sort_entries: Sort children by name.

    Returns:
        Classified children. Empty if the directory cannot be read.
    """
    try:
        with os.scandir(path) as it:
            dir_entries = list(it)
    except OSError as e:
        _report(WalkError.from_os_error(path, e), on_error)
        return []

    if sort_entries:
        dir_entries.sort(key=lambda d: d.name)

    children: list[TraversalEntry] = []
    for dir_entry in dir_entries:
        child_path = os.path.join(path, dir_entry.name)
        try:
            mode = dir_entry.stat(follow_symlinks=False).st_mode
        except OSError as e:
            _report(WalkError.from_os_error(child_path, e), on_error)
            continue

        children.append(
            TraversalEntry(
                path=child_path,
                name=dir_entry.name,
                entry_type=classify_mode(mode),
                depth=depth,
            )
        )
    return children


def _report(error: WalkError, on_error: ErrorHandler | None) -> None:
    logger.debug("Skipping unreadable entry: %s", error)
    if on_error is not None:
        on_error(error)


def _base_name(path: str) -> str:
    """Final segment of ``path``, or the path itself when it has none.

    Only trailing separators are dropped; ``.`` and ``..`` are not final
    segments, so roots like ``.`` or ``x/..`` are named by their full path.
    """
    name = os.path.basename(path.rstrip(os.sep))
    if name in ("", ".", ".."):
        return path
    return name
