"""joker - Shell-style wildcard matching with full-string semantics."""

from __future__ import annotations

# Core
from joker.wildcard import Wildcard, compile, escape, quote
from joker.compiler import translate

# Collections
from joker.wildcard_list import WildcardList

# Config
from joker.config import Config

# Errors
from joker.errors import (
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    InvalidInputError,
    PatternFileError,
    WildcardError,
)

# Utilities
from joker.utils.pattern import filter_names, match_pattern

__version__ = "0.1.0"

__all__ = [
    # Core
    "Wildcard",
    "compile",
    "quote",
    "escape",
    "translate",
    # Collections
    "WildcardList",
    # Config
    "Config",
    # Errors
    "ErrorCodes",
    "WildcardError",
    "InvalidInputError",
    "ConfigError",
    "ConfigNotFoundError",
    "PatternFileError",
    # Utilities
    "match_pattern",
    "filter_names",
]
