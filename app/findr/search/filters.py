"""Entry filter predicates.

Each criterion is an OR over its configured values, and an empty list of
values always passes. ``is_included`` ANDs the criteria together.
"""

import re
from collections.abc import Collection

from findr.search.config import FindConfig
from findr.search.models import EntryType, TraversalEntry


def matches_type(entry: TraversalEntry, entry_types: Collection[EntryType]) -> bool:
    """Check an entry against the type filters.

    Unclassified entries (special files) match no explicit type, so they
    only pass when no type filter is configured.
    """
    if not entry_types:
        return True
    return entry.entry_type is not None and entry.entry_type in entry_types


def matches_name(entry: TraversalEntry, names: Collection[re.Pattern[str]]) -> bool:
    """Check an entry's base name against the name patterns.

    Patterns are searched, not anchored: ``mod`` matches ``module.txt``.
    """
    if not names:
        return True
    return any(pattern.search(entry.name) for pattern in names)


def is_included(entry: TraversalEntry, config: FindConfig) -> bool:
    """Decide whether an entry belongs in the results."""
    return matches_type(entry, config.entry_types) and matches_name(entry, config.names)
