"""Directory search module.

This module provides entry classification, filter predicates, the
directory walker, and the run orchestrator for the search domain.
"""

from findr.search.classifier import classify_mode
from findr.search.config import ConfigError, FindConfig, build_config
from findr.search.filters import is_included, matches_name, matches_type
from findr.search.finder import find_matches, run
from findr.search.models import EntryType, TraversalEntry, WalkError
from findr.search.walker import walk

__all__ = [
    "ConfigError",
    "EntryType",
    "FindConfig",
    "TraversalEntry",
    "WalkError",
    "build_config",
    "classify_mode",
    "find_matches",
    "is_included",
    "matches_name",
    "matches_type",
    "run",
    "walk",
]
