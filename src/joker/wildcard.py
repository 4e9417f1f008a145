"""The Wildcard value type and its module-level constructors.

Supported syntax:

- ``?`` matches a single character
- ``*`` matches any number of characters, including none
- ``\\*``, ``\\?``, ``\\[`` and ``\\\\`` match a literal ``*``, ``?``, ``[``
  and ``\\``
- ``[xyz]`` matches either ``x``, ``y`` or ``z``; a ``]`` inside the group
  must be written ``\\]``

The ``\\[`` escape is an addition to the classic Joker grammar, which only
escapes ``\\``, ``?`` and ``*``. It exists so that ``compile(quote(text))``
always matches ``text``. As a consequence ``\\[abc]`` is the literal string
``[abc]`` here, where the classic grammar reads it as a literal backslash
followed by the group ``[abc]``.

Any other backslash is an ordinary character, so ``\\a`` matches the two
characters ``\\a``, not ``a``. A wildcard always has to match the whole
string::

    wild = compile("Fairy?ake")
    wild.matches("Fairycake")        # True
    wild.matches("some Fairycake")   # False
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from joker.compiler import Program, compile_program, translate
from joker.errors import InvalidInputError

__all__ = ["Wildcard", "compile", "quote", "escape"]

_SPECIAL = re.compile(r"[\\?*\[]")


def quote(text: str) -> str:
    """Escape every character that has a special meaning in a wildcard.

    ``compile(quote(text))`` matches exactly ``text`` and nothing else.
    """
    if not isinstance(text, str):
        raise InvalidInputError("text", "a string", text)
    return _SPECIAL.sub(lambda m: "\\" + m.group(0), text)


escape = quote


@dataclass(frozen=True, repr=False)
class Wildcard:
    """A compiled wildcard expression.

    Two wildcards are equal if they were built from the same source and
    have the same ``casefold`` flag. Instances are immutable and safe to
    share between threads.

    Attributes:
        source: The wildcard text the instance was built from.
        casefold: True if literal characters and group members ignore case.
    """

    source: str
    casefold: bool = False
    _program: Program = field(init=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.source, str):
            raise InvalidInputError("source", "a string", self.source)
        object.__setattr__(self, "casefold", bool(self.casefold))
        object.__setattr__(self, "_program", compile_program(self.source, self.casefold))

    quote = staticmethod(quote)
    escape = quote

    @property
    def case_insensitive(self) -> bool:
        """Alias of :attr:`casefold`."""
        return self.casefold

    def matches(self, candidate: str) -> bool:
        """Return True if ``candidate`` matches the wildcard in full.

        Only a boolean is returned; there is no match position since the
        whole string is always consumed.

        Raises:
            InvalidInputError: If ``candidate`` is not a string.
        """
        if not isinstance(candidate, str):
            raise InvalidInputError("candidate", "a string", candidate)
        return self._program.accepts(candidate)

    # Predicate spelling for use with filter(), any() and friends.
    test = matches

    def filter(self, candidates: Iterable[str]) -> list[str]:
        """Return the candidates that match, preserving order."""
        return [c for c in candidates if self.matches(c)]

    def to_regex(self) -> re.Pattern[str]:
        """Return an equivalent compiled regular expression.

        Use it with ``re.match``; the expression is anchored at the end.
        """
        flags = re.IGNORECASE if self.casefold else 0
        return re.compile(translate(self.source), flags)

    def __repr__(self) -> str:
        if self.casefold:
            return f"Wildcard({self.source!r}, casefold=True)"
        return f"Wildcard({self.source!r})"


def compile(source: str, casefold: bool = False) -> Wildcard:  # noqa: A001
    """Compile ``source`` into a :class:`Wildcard`. Never fails for strings."""
    return Wildcard(source, casefold)
