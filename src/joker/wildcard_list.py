"""Ordered wildcard collections with first-match-wins lookup.

A WildcardList can be built in code or loaded from a YAML document of the
form::

    version: "1.0"
    casefold: false
    patterns:
      - "*.log"
      - source: "Fairy?ake*"
        casefold: true
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from joker.config import Config
from joker.errors import InvalidInputError, PatternFileError
from joker.wildcard import Wildcard

__all__ = ["PatternEntry", "PatternFile", "WildcardList"]


class PatternEntry(BaseModel):
    """A pattern written as a mapping, with an optional per-pattern flag."""

    model_config = ConfigDict(extra="forbid")

    source: str
    casefold: bool | None = None


class PatternFile(BaseModel):
    """Schema of a pattern list document."""

    model_config = ConfigDict(extra="forbid")

    version: str = "1.0"
    casefold: bool = False
    patterns: list[str | PatternEntry]


class WildcardList:
    """An ordered list of wildcards where the first matching entry wins.

    Thread safety:
        Internally synchronized. Lookups work on a snapshot, so ``add``,
        ``remove`` and ``reload`` may run concurrently with them.
    """

    def __init__(
        self,
        patterns: Iterable[str | Wildcard] = (),
        casefold: bool = False,
    ) -> None:
        """Initialize the list.

        Args:
            patterns: Wildcards or wildcard sources, in priority order.
            casefold: Flag used for entries given as plain strings.
        """
        self.casefold: bool = bool(casefold)
        self._patterns: list[Wildcard] = [self._coerce(p) for p in patterns]
        self._yaml_path: str | None = None
        self._logger: logging.Logger = logging.getLogger("joker.wildcard_list")
        self._lock = threading.Lock()

    def _coerce(self, pattern: str | Wildcard) -> Wildcard:
        if isinstance(pattern, Wildcard):
            return pattern
        return Wildcard(pattern, self.casefold)

    @classmethod
    def from_dict(cls, data: Any) -> WildcardList:
        """Build a list from a mapping shaped like a pattern list document.

        Raises:
            PatternFileError: If the mapping does not validate.
        """
        if not isinstance(data, dict):
            raise PatternFileError(
                f"Pattern list must be a mapping, got {type(data).__name__}"
            )
        try:
            spec = PatternFile.model_validate(data)
        except ValidationError as e:
            raise PatternFileError(
                f"Invalid pattern list: {e.error_count()} error(s)",
                details={"errors": e.errors(include_url=False)},
                cause=e,
            ) from e

        wildcards: list[Wildcard] = []
        for entry in spec.patterns:
            if isinstance(entry, PatternEntry):
                casefold = spec.casefold if entry.casefold is None else entry.casefold
                wildcards.append(Wildcard(entry.source, casefold))
            else:
                wildcards.append(Wildcard(entry, spec.casefold))
        return cls(wildcards, casefold=spec.casefold)

    @classmethod
    def from_config(cls, config: Config, key: str = "wildcards") -> WildcardList:
        """Build a list from the section of ``config`` found at ``key``.

        Raises:
            PatternFileError: If the section is missing or invalid.
        """
        section = config.get(key)
        if section is None:
            raise PatternFileError(f"Config has no '{key}' section")
        return cls.from_dict(section)

    @classmethod
    def load(cls, yaml_path: str) -> WildcardList:
        """Load a pattern list from a YAML file.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the file is not valid YAML.
            PatternFileError: If the document has structural errors.
        """
        config = Config.load(yaml_path)
        wildcards = cls.from_dict(config.data)
        wildcards._yaml_path = yaml_path
        return wildcards

    def first_match(self, candidate: str) -> Wildcard | None:
        """Return the first wildcard that matches ``candidate``, or None.

        Raises:
            InvalidInputError: If ``candidate`` is not a string.
        """
        if not isinstance(candidate, str):
            raise InvalidInputError("candidate", "a string", candidate)
        with self._lock:
            patterns = list(self._patterns)

        for wildcard in patterns:
            if wildcard.matches(candidate):
                self._logger.debug("Wildcard list: %r matched by %r", candidate, wildcard)
                return wildcard

        self._logger.debug("Wildcard list: %r matched nothing", candidate)
        return None

    def matches(self, candidate: str) -> bool:
        """Return True if any wildcard in the list matches ``candidate``."""
        return self.first_match(candidate) is not None

    def filter(self, candidates: Iterable[str]) -> list[str]:
        """Return the candidates matched by at least one wildcard."""
        return [c for c in candidates if self.matches(c)]

    def add(self, pattern: str | Wildcard) -> Wildcard:
        """Append a wildcard (lowest priority) and return it."""
        wildcard = self._coerce(pattern)
        with self._lock:
            self._patterns.append(wildcard)
        return wildcard

    def remove(self, pattern: str | Wildcard) -> bool:
        """Remove the first entry equal to ``pattern``.

        Returns:
            True if an entry was found and removed, False otherwise.
        """
        wildcard = self._coerce(pattern)
        with self._lock:
            for i, existing in enumerate(self._patterns):
                if existing == wildcard:
                    self._patterns.pop(i)
                    return True
            return False

    def reload(self) -> None:
        """Re-read the list from the YAML file it was loaded from.

        Raises:
            PatternFileError: If the list was not created via ``load()``.
        """
        with self._lock:
            yaml_path = self._yaml_path
        if yaml_path is None:
            raise PatternFileError("Cannot reload: list was not loaded from a YAML file")
        reloaded = WildcardList.load(yaml_path)
        with self._lock:
            self._patterns = reloaded._patterns
            self.casefold = reloaded.casefold

    def __len__(self) -> int:
        with self._lock:
            return len(self._patterns)

    def __iter__(self) -> Iterator[Wildcard]:
        with self._lock:
            return iter(list(self._patterns))

    def __contains__(self, pattern: object) -> bool:
        if isinstance(pattern, str):
            pattern = Wildcard(pattern, self.casefold)
        with self._lock:
            return pattern in self._patterns

    def __repr__(self) -> str:
        return f"WildcardList({[w.source for w in self]!r}, casefold={self.casefold})"
