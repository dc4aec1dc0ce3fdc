"""Rich console formatting utilities.

Provides the shared stderr console and message printers used by the CLI.
User-supplied text (paths, patterns) is never interpreted as markup or
emoji codes.
"""

import sys

from rich.console import Console
from rich.markup import escape

from findr.core.theme import ThemeColors, get_rich_theme
from findr.search.models import WalkError


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise so piped or redirected stderr stays plain.
    """
    if sys.stderr.isatty():
        return "truecolor"
    return None


# Shared stderr console, themed with defaults until settings are loaded
err_console = Console(
    theme=get_rich_theme(),
    stderr=True,
    emoji=False,
    color_system=_detect_color_system(),
)


def apply_theme(colors: ThemeColors) -> None:
    """Switch the stderr console to the given colors."""
    err_console.push_theme(get_rich_theme(colors))


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}", soft_wrap=True)


def print_diagnostic(error: WalkError) -> None:
    """Print one recoverable traversal error as a single stderr line."""
    err_console.print(str(error), style="warning", markup=False, highlight=False, soft_wrap=True)
