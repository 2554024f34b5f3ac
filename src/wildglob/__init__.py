"""wildglob - Single-token wildcard glob matching."""

from __future__ import annotations

# Matching
from wildglob.matcher import WILDCARD, GlobMatcher, Pattern, compile_pattern, match_pattern

# Config
from wildglob.config import Config

# Filtering
from wildglob.filter import ALL, EntryFilter, filter_entries

# Errors
from wildglob.errors import (
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    GlobError,
    InvalidWildcardError,
)

__version__ = "0.1.0"

__all__ = [
    # Matching
    "WILDCARD",
    "GlobMatcher",
    "Pattern",
    "compile_pattern",
    "match_pattern",
    # Config
    "Config",
    # Filtering
    "ALL",
    "EntryFilter",
    "filter_entries",
    # Errors
    "ErrorCodes",
    "GlobError",
    "ConfigError",
    "ConfigNotFoundError",
    "InvalidWildcardError",
]
