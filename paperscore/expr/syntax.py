"""Tokens, syntax tree and parser for transition model files."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from ..gamefile.lexer import Position, Token

_TOKEN_RULES = (
    ("Ident", r"[a-zA-Z_][a-zA-Z_0-9]*"),
    ("BaseOutState", r"[0-3][0123x]+"),
    ("Number", r"(?:(?:[1-9][0-9]*)|0)(?:\.[0-9]*)?"),
    ("whitespace", r"\s+"),
    ("comment", r"#[^\n]+"),
    ("Punct", r"\[|]|[=+*(){}~]|(?:->)|-"),
)
_TOKEN_PATTERN = re.compile("|".join(f"(?P<{name}>{pattern})" for name, pattern in _TOKEN_RULES))


class ExprSyntaxError(ValueError):
    """Raised when model text cannot be tokenized or parsed."""

    def __init__(self, message: str, pos: Position) -> None:
        super().__init__(f"{pos}: {message}")
        self.pos = pos


@dataclass
class Primary:
    number: float | None = None
    name: str = ""
    sub_expression: Expression | None = None


@dataclass
class Unary:
    op: str = ""
    unary: Unary | None = None
    primary: Primary | None = None


@dataclass
class Multiplication:
    unary: Unary


@dataclass
class Addition:
    multiplication: Multiplication
    op: str = ""
    next: Addition | None = None


@dataclass
class Expression:
    addition: Addition


@dataclass
class EventDef:
    pos: Position
    name: str
    player: str
    value: Expression


@dataclass
class TransitionEvent:
    pos: Position
    name: str
    to: str
    runs: float = 0.0


@dataclass
class StateTransitions:
    pos: Position
    from_state: str
    events: list[TransitionEvent] = field(default_factory=list)


@dataclass
class Statement:
    event_def: EventDef | None = None
    transitions: StateTransitions | None = None


@dataclass
class ExprFile:
    path: str = ""
    statements: list[Statement] = field(default_factory=list)


def tokenize(filename: str, text: str) -> list[Token]:
    """Split model text into tokens, ending with an ``EOF`` token."""
    tokens: list[Token] = []
    pos, line, column = 0, 1, 1
    while pos < len(text):
        match = _TOKEN_PATTERN.match(text, pos)
        if match is None:
            raise ExprSyntaxError(
                f"invalid input text {text[pos:pos + 10]!r}",
                Position(filename, pos, line, column),
            )
        kind = match.lastgroup or ""
        value = match.group()
        if not kind[0].islower():
            tokens.append(Token(kind, value, Position(filename, pos, line, column)))
        newlines = value.count("\n")
        if newlines:
            line += newlines
            column = len(value) - value.rfind("\n")
        else:
            column += len(value)
        pos = match.end()
    tokens.append(Token("EOF", "", Position(filename, pos, line, column)))
    return tokens


class _Parser:
    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.i = 0

    def peek(self) -> Token:
        return self.tokens[self.i]

    def accept(self, kind: str, value: str | None = None) -> Token | None:
        tok = self.peek()
        if tok.type != kind or (value is not None and tok.value != value):
            return None
        self.i += 1
        return tok

    def expect(self, kind: str, value: str | None = None) -> Token:
        tok = self.accept(kind, value)
        if tok is None:
            self.fail(repr(value) if value is not None else kind)
        return tok

    def fail(self, expected: str) -> None:
        tok = self.peek()
        raise ExprSyntaxError(
            f'unexpected token "{tok.value or "<EOF>"}" (expected {expected})', tok.pos
        )

    def file(self, path: str) -> ExprFile:
        statements = []
        while self.peek().type != "EOF":
            kind = self.peek().type
            if kind == "Ident":
                statements.append(Statement(event_def=self.event_def()))
            elif kind == "BaseOutState":
                statements.append(Statement(transitions=self.transitions()))
            else:
                self.fail("event definition or state transitions")
        return ExprFile(path, statements)

    def event_def(self) -> EventDef:
        name = self.expect("Ident")
        player = ""
        if self.accept("Punct", "[") is not None:
            player = self.expect("Ident").value
            self.expect("Punct", "]")
        self.expect("Punct", "=")
        return EventDef(name.pos, name.value, player, self.expression())

    def expression(self) -> Expression:
        return Expression(self.addition())

    def addition(self) -> Addition:
        multiplication = Multiplication(self.unary())
        op = self.accept("Punct", "+") or self.accept("Punct", "-")
        if op is None:
            return Addition(multiplication)
        return Addition(multiplication, op.value, self.addition())

    def unary(self) -> Unary:
        op = self.accept("Punct", "!") or self.accept("Punct", "-")
        if op is not None:
            return Unary(op=op.value, unary=self.unary())
        return Unary(primary=self.primary())

    def primary(self) -> Primary:
        if (number := self.accept("Number")) is not None:
            return Primary(number=float(number.value))
        if (name := self.accept("Ident")) is not None:
            return Primary(name=name.value)
        if self.accept("Punct", "(") is not None:
            sub = self.expression()
            self.expect("Punct", ")")
            return Primary(sub_expression=sub)
        self.fail("number, name or '('")
        raise AssertionError("unreachable")

    def transitions(self) -> StateTransitions:
        start = self.expect("BaseOutState")
        self.expect("Punct", "{")
        events = []
        while self.peek().type == "Ident":
            events.append(self.transition_event())
        self.expect("Punct", "}")
        return StateTransitions(start.pos, start.value, events)

    def transition_event(self) -> TransitionEvent:
        name = self.expect("Ident")
        runs = 0.0
        if self.accept("Punct", "(") is not None:
            runs = float(self.expect("Number").value)
            self.expect("Punct", ")")
        self.expect("Punct", "->")
        to = self.expect("BaseOutState")
        return TransitionEvent(name.pos, name.value, to.value, runs)


def parse_string(path: str, text: str) -> ExprFile:
    """Parse model text."""
    return _Parser(tokenize(path, text)).file(path)


def parse_file(path: str) -> ExprFile:
    """Read and parse a model file."""
    with open(path, encoding="utf-8") as handle:
        return parse_string(path, handle.read())