"""Parsing game file text into a GameFile."""

from __future__ import annotations

from typing import Callable

from .lexer import LexError, Token, tokenize
from .model import (
    ActualPlay,
    Alternative,
    Event,
    GameFile,
    GameFileError,
    LineupChange,
    Property,
    TeamEvents,
)

_SECTIONS = {"visitorplays", "homeplays"}


class ParseError(GameFileError):
    """Raised when game file text does not follow the grammar."""


class _Parser:
    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.i = 0

    def peek(self) -> Token:
        return self.tokens[self.i]

    def take(self, kind: str | None = None, values: set[str] | None = None) -> Token | None:
        tok = self.peek()
        if tok.type == "EOF":
            return None
        if kind is not None and tok.type != kind:
            return None
        if values is not None and tok.value not in values:
            return None
        self.i += 1
        return tok

    def end_of_line(self) -> bool:
        if self.peek().type == "EOF":
            return True
        return self.take("NL") is not None

    def fail(self, expected: str) -> None:
        tok = self.peek()
        raise ParseError(
            f'unexpected token "{tok.value or "<EOF>"}" (expected {expected})', tok.pos
        )

    def parse(self) -> GameFile:
        gf = GameFile()
        while (key := self.take("Key")) is not None:
            value = self.take("Value")
            if value is None:
                self.fail("Value")
            if self.peek().type != "EOF":
                if self.take("NL") is None:
                    self.fail("NL")
                while self.take("NL") is not None:
                    pass
            gf.property_list.append(Property(key.value, value.value, key.pos))
        while (header := self.take(values=_SECTIONS)) is not None:
            if not self.end_of_line():
                self.fail("NL")
            events = []
            while (event := self.event()) is not None:
                events.append(event)
            gf.team_events.append(TeamEvents(header.pos, header.value, events))
        if self.peek().type != "EOF":
            self.fail("EOF")
        return gf

    def attempt(self, options: list[Callable[[], object]]):
        start = self.i
        for option in options:
            result = option()
            if result is not None:
                return result
            self.i = start
        return None

    def event(self) -> Event | None:
        return self.attempt([
            self.alternative_event, self.pitcher_event, self.radj_event,
            self.score_event, self.final_event, self.sub_event, self.play_event,
            self.empty_event,
        ])

    def alternative_event(self) -> Event | None:
        pos = self.peek().pos
        if self.take(values={"alt"}) is None:
            return None
        code = self.take("Token")
        if code is None:
            return None
        advances = self.advances()
        comment = self.take("Comment")
        if not self.end_of_line():
            return None
        alt = Alternative(code.pos, code.value, advances, comment.value if comment else "")
        return Event(pos=pos, alternative=alt)

    def simple(self, keywords: set[str]) -> tuple[Token, Token] | None:
        first = self.take(values=keywords)
        if first is None:
            return None
        value = self.take("Token")
        if value is None or not self.end_of_line():
            return None
        return first, value

    def pitcher_event(self) -> Event | None:
        found = self.simple({"pitcher", "pitching"})
        return Event(pos=found[0].pos, pitcher=found[1].value) if found else None

    def score_event(self) -> Event | None:
        found = self.simple({"score"})
        return Event(pos=found[0].pos, score=found[1].value) if found else None

    def final_event(self) -> Event | None:
        found = self.simple({"final"})
        return Event(pos=found[0].pos, final=found[1].value) if found else None

    def radj_event(self) -> Event | None:
        first = self.take(values={"radj"})
        if first is None:
            return None
        runner = self.take("Token")
        base = self.take("Token") if runner else None
        if base is None or not self.end_of_line():
            return None
        return Event(pos=first.pos, radj_runner=runner.value.rstrip(" \t"), radj_base=base.value)

    def sub_event(self) -> Event | None:
        pos = self.peek().pos
        change = self.lineup_change()
        return Event(pos=pos, sub=change) if change else None

    def empty_event(self) -> Event | None:
        tok = self.take("NL")
        return Event(pos=tok.pos, empty=True) if tok else None

    def advances(self) -> list[str]:
        found = []
        while (adv := self.take("Advance")) is not None:
            found.append(adv.value)
        return found

    def play_event(self) -> Event | None:
        pos = self.peek().pos
        play = ActualPlay(pos=pos)
        if self.take(values={"..."}) is not None:
            play.continued_plate_appearance = True
        else:
            pa = self.take("PA")
            batter = self.take("Token") if pa else None
            if batter is None:
                return None
            play.plate_appearance = pa.value.rstrip(" \t")
            play.batter = batter.value
        pitches = self.take("Token")
        code = self.take("Token") if pitches else None
        if code is None:
            return None
        play.pitch_sequence = pitches.value
        play.code = code.value
        play.advances = self.advances()
        afters = []
        while True:
            start = self.i
            change = self.lineup_change()
            if change is None:
                self.i = start
                break
            afters.append(change)
        comment = self.take("Comment")
        if not self.end_of_line():
            return None
        return Event(pos=pos, play=play, afters=afters, comment=comment.value if comment else "")

    def lineup_change(self) -> LineupChange | None:
        return self.attempt([
            lambda: self.one_token("cr", lambda v: LineupChange(courtesy_runner=v)),
            lambda: LineupChange(conference=True) if self.take(values={"conf"}) else None,
            lambda: self.one_token("sub", lambda v: LineupChange(sub_enter=v)),
            lambda: self.one_token("for", lambda v: LineupChange(sub_exit=v)),
            lambda: self.swap("hsub", lambda a, b: LineupChange(hsub_enter=a, hsub_exit=b)),
            lambda: self.swap("vsub", lambda a, b: LineupChange(vsub_enter=a, vsub_exit=b)),
        ])

    def one_token(self, keyword: str, build: Callable[[str], LineupChange]) -> LineupChange | None:
        if self.take(values={keyword}) is None:
            return None
        tok = self.take("Token")
        return build(tok.value) if tok else None

    def swap(self, keyword: str, build: Callable[[str, str], LineupChange]) -> LineupChange | None:
        if self.take(values={keyword}) is None:
            return None
        enter = self.take("Token")
        if enter is None or self.take(values={"for"}) is None:
            return None
        leave = self.take("Token")
        if leave is None or not self.end_of_line():
            return None
        return build(enter.value, leave.value)


def parse_string(path: str, text: str) -> GameFile:
    """Parse and validate game file text."""
    try:
        tokens = tokenize(path, text)
    except LexError as exc:
        raise ParseError(str(exc).split(": ", 1)[-1], exc.pos) from exc
    gf = _Parser(tokens).parse()
    gf.path = path
    gf.validate()
    return gf


def parse_file(path: str) -> GameFile:
    """Read, parse and validate a game file."""
    with open(path, encoding="utf-8") as handle:
        return parse_string(path, handle.read())