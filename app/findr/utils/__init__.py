"""Utility modules for findr.

This module exports commonly used utility functions.
"""

from findr.utils.formatting import (
    apply_theme,
    err_console,
    print_diagnostic,
    print_error,
)
from findr.utils.log import configure_logging

__all__ = [
    "apply_theme",
    "configure_logging",
    "err_console",
    "print_diagnostic",
    "print_error",
]
