"""Search run orchestration.

Runs the walker over each configured root, keeps the entries accepted by
the filters, and prints one newline-joined block of paths per root.
"""

import logging
from collections.abc import Callable

import typer

from findr.search.config import FindConfig
from findr.search.filters import is_included
from findr.search.walker import ErrorHandler, walk

logger = logging.getLogger(__name__)


def find_matches(
    root: str,
    config: FindConfig,
    *,
    on_error: ErrorHandler | None = None,
    sort_entries: bool = True,
) -> list[str]:
    """Collect the paths under ``root`` that pass the configured filters.

    Args:
        root: Root path to walk.
        config: Filters to apply.
        on_error: Called for each recoverable traversal failure.
        sort_entries: Visit directory children in name order.

    Returns:
        Matching full paths in traversal order.
    """
    matches = [
        entry.path
        for entry in walk(root, on_error=on_error, sort_entries=sort_entries)
        if is_included(entry, config)
    ]
    logger.debug("Found %d matching entries under %s", len(matches), root)
    return matches


def run(
    config: FindConfig,
    *,
    on_error: ErrorHandler | None = None,
    sort_entries: bool = True,
    echo: Callable[[str], object] = typer.echo,
) -> None:
    """Search every root in order and print the results.

    Each root gets its own output block, even when nothing matched
    (an empty line is printed in that case).

    Args:
        config: Validated search configuration.
        on_error: Called for each recoverable traversal failure.
        sort_entries: Visit directory children in name order.
        echo: Output function receiving one block per root.
    """
    for root in config.paths:
        matches = find_matches(root, config, on_error=on_error, sort_entries=sort_entries)
        echo("\n".join(matches))
