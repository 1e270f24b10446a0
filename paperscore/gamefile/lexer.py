"""Tokenizer for game files."""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A location in a source file."""

    filename: str = ""
    offset: int = 0
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        name = self.filename or "<source>"
        if self.line == 0 and self.column == 0:
            return name
        return f"{name}:{self.line}:{self.column}"


@dataclass(frozen=True)
class Token:
    type: str
    value: str
    pos: Position


class LexError(ValueError):
    """Raised when text cannot be split into tokens."""

    def __init__(self, message: str, pos: Position) -> None:
        super().__init__(f"{pos}: {message}")
        self.pos = pos


_POP = "<pop>"


def _rules(*rules: tuple[str, str, str | None]) -> list[tuple[str, re.Pattern[str], str | None]]:
    return [(name, re.compile(pattern), action) for name, pattern, action in rules]


_STATES = {
    "Root": _rules(
        ("Key", r"[A-Za-z][-_A-Za-z0-9]*", None),
        ("valueStart", r":[ \t]*", "PropertyValue"),
        ("whitespace", r"[ \t]+", None),
        ("dashes", r"---[\n\r]*", "Events"),
        ("NL", r"[\n\r]", None),
        ("comment", r"//.*[\n\r]", None),
    ),
    "PropertyValue": _rules(
        ("Value", r"[^\n\r]+", None),
        ("NL", r"[\n\r]", _POP),
    ),
    "Events": _rules(
        ("PA", r"[1-9][0-9]*|alt|\.\.\.", "PA"),
        ("Keyword", r"[^ \t\n\r]+", "Command"),
        ("NL", r"[\n\r]", None),
        ("whitespace", r"[ \t]+", None),
        ("comment", r"//.*[\n\r]", None),
    ),
    "PA": _rules(
        ("Advance", r"[Bb123][-Xx][123Hh]([^ \t\n\r]*)", None),
        ("colon", r"(:|--)[ \t]*", "PAComment"),
        ("NL", r"[\n\r]", _POP),
        ("Token", r"[^ \t\n\r]+", None),
        ("whitespace", r"[ \t]+", None),
        ("comment", r"//.*[\n\r]", None),
    ),
    "Command": _rules(
        ("Token", r"[^ \t\n\r]+", None),
        ("NL", r"[\n\r]", _POP),
        ("whitespace", r"[ \t]+", None),
        ("comment", r"//.*[\n\r]", None),
    ),
    "PAComment": _rules(
        ("Comment", r"[^\n\r]+", None),
        ("comment", r"//.*[\n\r]", None),
    ),
}

# states that return to their parent when nothing matches
_RETURNING = {"PAComment"}


def tokenize(filename: str, text: str) -> list[Token]:
    """Split game file text into tokens, ending with an ``EOF`` token."""
    stack = ["Root"]
    tokens: list[Token] = []
    pos, line, column = 0, 1, 1
    while pos < len(text):
        state = stack[-1]
        for name, pattern, action in _STATES[state]:
            match = pattern.match(text, pos)
            if match and match.end() > pos:
                break
        else:
            if state in _RETURNING:
                stack.pop()
                continue
            raise LexError(
                f"invalid input text {text[pos:pos + 10]!r}",
                Position(filename, pos, line, column),
            )
        value = match.group()
        if not name[0].islower():
            tokens.append(Token(name, value, Position(filename, pos, line, column)))
        if action == _POP:
            if len(stack) > 1:
                stack.pop()
        elif action is not None:
            stack.append(action)
        newlines = value.count("\n")
        if newlines:
            line += newlines
            column = len(value) - value.rfind("\n")
        else:
            column += len(value)
        pos = match.end()
    tokens.append(Token("EOF", "", Position(filename, pos, line, column)))
    return tokens