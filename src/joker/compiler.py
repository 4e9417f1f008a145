"""Wildcard compiler: tokenizer, matching automaton and regex translation.

A wildcard source is read once, left to right, into a flat list of tokens.
The tokens are then turned into a :class:`Program`, a small NFA whose states
are the positions between steps. A ``*`` step loops on itself and has an
epsilon edge to the next state; every other step consumes exactly one
character. Matching simulates all active states at once, so the cost is
bounded by ``len(text) * len(steps)`` no matter how many ``*`` the pattern
holds.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum

__all__ = [
    "TokenKind",
    "Token",
    "Step",
    "Program",
    "parse",
    "fold_char",
    "compile_program",
    "translate",
]

_logger = logging.getLogger("joker.compiler")

# Characters that may follow a backslash to be taken literally.
_ESCAPABLE = frozenset("\\?*[")


class TokenKind(str, Enum):
    """Kinds of wildcard tokens."""

    CHAR = "char"
    SET = "set"
    ANY = "any"
    RUN = "run"


@dataclass(frozen=True)
class Token:
    """A single parsed wildcard element.

    Attributes:
        kind: What the token matches.
        text: The literal character for CHAR, the decoded members for SET,
            empty for ANY and RUN.
    """

    kind: TokenKind
    text: str = ""


def _scan_group(source: str, start: int) -> tuple[str, int] | None:
    """Scan a bracket group whose ``[`` sits at ``start``.

    Returns the decoded members and the index just past the closing ``]``,
    or None when no group can be formed there.
    """
    members: list[str] = []
    last_escape: tuple[int, int] | None = None
    pos = start + 1
    while pos < len(source):
        if source.startswith("\\]", pos):
            last_escape = (len(members), pos)
            members.append("]")
            pos += 2
        elif source[pos] == "]":
            if not members:
                return None
            return "".join(members), pos + 1
        else:
            members.append(source[pos])
            pos += 1

    # Unterminated: the last escaped ``]`` may still close the group, leaving
    # its backslash as an ordinary member.
    if last_escape is None:
        return None
    count, pos = last_escape
    return "".join(members[:count]) + "\\", pos + 2


def parse(source: str) -> list[Token]:
    """Tokenize a wildcard source string.

    Never fails: malformed groups and unknown escapes degrade to literals.
    """
    tokens: list[Token] = []
    pos = 0
    length = len(source)
    while pos < length:
        char = source[pos]
        if char == "\\" and pos + 1 < length and source[pos + 1] in _ESCAPABLE:
            tokens.append(Token(TokenKind.CHAR, source[pos + 1]))
            pos += 2
        elif char == "?":
            tokens.append(Token(TokenKind.ANY))
            pos += 1
        elif char == "*":
            tokens.append(Token(TokenKind.RUN))
            pos += 1
        else:
            group = _scan_group(source, pos) if char == "[" else None
            if group is not None:
                members, pos = group
                tokens.append(Token(TokenKind.SET, members))
            else:
                tokens.append(Token(TokenKind.CHAR, char))
                pos += 1
    return tokens


def fold_char(char: str) -> str:
    """Map a character to a single-character case-insensitive key."""
    for folded in (char.upper().lower(), char.lower()):
        if len(folded) == 1:
            return folded
    return char


@dataclass(frozen=True)
class Step:
    """One automaton step; ``chars`` holds the accepted characters for CHAR/SET."""

    kind: TokenKind
    chars: frozenset[str] = frozenset()


def _epsilon_closures(steps: tuple[Step, ...]) -> tuple[tuple[int, ...], ...]:
    closures: list[tuple[int, ...]] = []
    for state in range(len(steps) + 1):
        reachable = [state]
        while reachable[-1] < len(steps) and steps[reachable[-1]].kind is TokenKind.RUN:
            reachable.append(reachable[-1] + 1)
        closures.append(tuple(reachable))
    return tuple(closures)


@dataclass(frozen=True)
class Program:
    """Compiled, immutable matching automaton for one wildcard."""

    steps: tuple[Step, ...]
    casefold: bool = False
    closures: tuple[tuple[int, ...], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "closures", _epsilon_closures(self.steps))

    @classmethod
    def build(cls, tokens: list[Token], casefold: bool = False) -> Program:
        """Turn parsed tokens into a program, merging adjacent ``*`` steps."""
        steps: list[Step] = []
        for token in tokens:
            if token.kind is TokenKind.RUN:
                if steps and steps[-1].kind is TokenKind.RUN:
                    continue
                steps.append(Step(TokenKind.RUN))
            elif token.kind is TokenKind.ANY:
                steps.append(Step(TokenKind.ANY))
            else:
                members = token.text
                if casefold:
                    chars = frozenset(fold_char(c) for c in members)
                else:
                    chars = frozenset(members)
                steps.append(Step(token.kind, chars))
        return cls(steps=tuple(steps), casefold=casefold)

    def accepts(self, text: str) -> bool:
        """Return True if the program consumes ``text`` from start to end."""
        steps = self.steps
        closures = self.closures
        final = len(steps)
        if self.casefold:
            text = "".join(fold_char(c) for c in text)

        active = set(closures[0])
        for char in text:
            following: set[int] = set()
            for state in active:
                if state == final:
                    continue
                step = steps[state]
                if step.kind is TokenKind.RUN:
                    following.update(closures[state])
                elif step.kind is TokenKind.ANY or char in step.chars:
                    following.update(closures[state + 1])
            if not following:
                return False
            active = following
        return final in active


def compile_program(source: str, casefold: bool = False) -> Program:
    """Parse and build the automaton for ``source``."""
    program = Program.build(parse(source), casefold=casefold)
    _logger.debug(
        "Compiled wildcard %r (casefold=%s) into %d steps",
        source,
        casefold,
        len(program.steps),
    )
    return program


def translate(source: str) -> str:
    """Translate a wildcard into an equivalent regular expression string.

    The result is anchored at the end with ``\\Z`` and is meant for
    ``re.match``, in the same shape ``fnmatch.translate`` produces.
    """
    parts: list[str] = []
    for token in parse(source):
        if token.kind is TokenKind.RUN:
            if parts and parts[-1] == ".*":
                continue
            parts.append(".*")
        elif token.kind is TokenKind.ANY:
            parts.append(".")
        elif token.kind is TokenKind.SET:
            members = "".join(re.escape(c) for c in dict.fromkeys(token.text))
            parts.append(f"[{members}]")
        else:
            parts.append(re.escape(token.text))
    return "(?s:" + "".join(parts) + r")\Z"
