"""Search configuration.

This module provides the immutable configuration consumed by a single
search run, and ``build_config`` which validates raw command-line input
into it. All validation happens here, before any filesystem access.
"""

import re
from collections.abc import Iterable
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from findr.search.models import EntryType

DEFAULT_PATH = "."


class ConfigError(Exception):
    """Raised when command-line input cannot be turned into a FindConfig."""


class FindConfig(BaseModel):
    """Configuration for one search run.

    Attributes:
        paths: Root paths to search, in the order given.
        names: Compiled name patterns (any one may match).
        entry_types: Entry types to keep (any one may match).
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    paths: Annotated[
        tuple[str, ...],
        Field(min_length=1, description="Root paths to search"),
    ] = (DEFAULT_PATH,)
    names: Annotated[
        tuple[re.Pattern[str], ...],
        Field(description="Base name patterns"),
    ] = ()
    entry_types: Annotated[
        tuple[EntryType, ...],
        Field(description="Entry type filters"),
    ] = ()


def compile_name(raw: str) -> re.Pattern[str]:
    """Compile a ``--name`` pattern.

    Raises:
        ConfigError: If the pattern is not a valid regular expression.
    """
    try:
        return re.compile(raw)
    except re.error as e:
        raise ConfigError(f'Invalid --name "{raw}"') from e


def parse_entry_type(raw: str | EntryType) -> EntryType:
    """Convert a ``--type`` value into an EntryType.

    Raises:
        ConfigError: If the value is not one of d, f or l.
    """
    try:
        return EntryType(raw)
    except ValueError:
        raise ConfigError(f'Invalid --type "{raw}"') from None


def build_config(
    paths: Iterable[str] | None = None,
    names: Iterable[str] | None = None,
    entry_types: Iterable[str | EntryType] | None = None,
) -> FindConfig:
    """Validate raw input into a FindConfig.

    Args:
        paths: Root paths. Defaults to the current directory when empty.
        names: Raw regular expressions for base name matching.
        entry_types: Raw type literals (``d``, ``f``, ``l``) or EntryTypes.

    Returns:
        Validated, immutable FindConfig.

    Raises:
        ConfigError: On the first invalid name pattern or type value.
    """
    root_paths = tuple(paths or ()) or (DEFAULT_PATH,)
    patterns = tuple(compile_name(name) for name in names or ())
    types = tuple(parse_entry_type(value) for value in entry_types or ())

    return FindConfig(paths=root_paths, names=patterns, entry_types=types)
