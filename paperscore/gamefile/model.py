"""The structure of a game file and its canonical text form."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from typing import TextIO

from .lexer import Position

_INTEGER = re.compile(r"[+-]?[0-9]+")
_SHORT_DATE = re.compile(r"([0-9]{1,2})/([0-9]{1,2})/([0-9]{2})")
_LONG_DATE = re.compile(r"([0-9]{1,2})/([0-9]{1,2})/([0-9]{4})")

_ORDERED_PROPERTIES = (
    "date", "game", "visitor", "visitorid", "home", "homeid",
    "start", "timelimit", "tournament", "league",
)


class GameFileError(ValueError):
    """Raised when a game file is invalid."""

    def __init__(self, message: str, pos: Position | None = None) -> None:
        super().__init__(f"{pos}: {message}" if pos is not None else message)
        self.pos = pos


@dataclass
class Property:
    key: str
    value: str = ""
    pos: Position = Position()


@dataclass
class LineupChange:
    courtesy_runner: str | None = None
    conference: bool = False
    sub_enter: str = ""
    sub_exit: str = ""
    hsub_enter: str = ""
    hsub_exit: str = ""
    vsub_enter: str = ""
    vsub_exit: str = ""


@dataclass
class ActualPlay:
    pos: Position = Position()
    continued_plate_appearance: bool = False
    plate_appearance: str = ""
    batter: str = ""
    pitch_sequence: str = ""
    code: str = ""
    advances: list[str] = field(default_factory=list)

    def plate_appearance_number(self) -> int:
        """The plate appearance as a number, or 0 when it is not one."""
        text = self.plate_appearance
        return int(text) if _INTEGER.fullmatch(text) else 0

    def normalize(self) -> None:
        self.advances = [adv.upper() for adv in self.advances]
        self.code = self.code.upper()
        self.pitch_sequence = self.pitch_sequence.upper()


@dataclass
class Alternative:
    pos: Position = Position()
    code: str = ""
    advances: list[str] = field(default_factory=list)
    comment: str = ""

    def normalize(self) -> None:
        self.advances = [adv.upper() for adv in self.advances]
        self.code = self.code.upper()


@dataclass
class Event:
    pos: Position = Position()
    alternative: Alternative | None = None
    pitcher: str = ""
    radj_runner: str = ""
    radj_base: str = ""
    score: str = ""
    final: str = ""
    sub: LineupChange | None = None
    play: ActualPlay | None = None
    afters: list[LineupChange] = field(default_factory=list)
    comment: str = ""
    empty: bool = False


@dataclass
class TeamEvents:
    pos: Position
    home_or_visitor: str
    events: list[Event] = field(default_factory=list)


@dataclass
class GameFile:
    path: str = ""
    property_list: list[Property] = field(default_factory=list)
    team_events: list[TeamEvents] = field(default_factory=list)
    properties: dict[str, str] = field(default_factory=dict)
    property_pos: dict[str, Position] = field(default_factory=dict)
    visitor_events: list[Event] | None = None
    home_events: list[Event] | None = None

    def validate(self) -> None:
        """Index properties, normalise codes and split events by team."""
        self.properties = {prop.key: prop.value for prop in self.property_list}
        self.property_pos = {prop.key: prop.pos for prop in self.property_list}
        for section in self.team_events:
            for event in section.events:
                if event.play is not None:
                    event.play.normalize()
                if event.alternative is not None:
                    event.alternative.normalize()
            if section.home_or_visitor == "homeplays":
                if self.home_events is not None:
                    raise GameFileError("duplicate homeplays section", section.pos)
                if section.events:
                    self.home_events = list(section.events)
            elif section.home_or_visitor == "visitorplays":
                if self.visitor_events is not None:
                    raise GameFileError("duplicate visitorplays section", section.pos)
                if section.events:
                    self.visitor_events = list(section.events)
        for events in (self.home_events, self.visitor_events):
            _set_plate_appearances(events or [])

    def write(self, out: TextIO) -> None:
        """Write the file in canonical form."""
        for name in _ORDERED_PROPERTIES:
            value = self.properties.get(name, "")
            if value:
                out.write(f"{name}: {value}\n")
        for name in sorted(set(self.properties) - set(_ORDERED_PROPERTIES)):
            out.write(f"{name}: {self.properties[name]}\n")
        out.write("---\n")
        _write_events(out, "visitorplays", self.visitor_events)
        _write_events(out, "homeplays", self.home_events)

    def game_date(self) -> date:
        """The date property, as m/d/yy or m/d/yyyy."""
        text = self.properties.get("date", "")
        for pattern, two_digit in ((_SHORT_DATE, True), (_LONG_DATE, False)):
            match = pattern.fullmatch(text)
            if match is None:
                continue
            month, day, year = (int(part) for part in match.groups())
            if two_digit:
                year += 1900 if year >= 69 else 2000
            try:
                return date(year, month, day)
            except ValueError as exc:
                raise GameFileError(
                    f"can't parse date: {exc}", self.property_pos.get("date", Position())
                ) from exc
        raise GameFileError(
            f"can't parse date: {text!r}", self.property_pos.get("date", Position())
        )


def _set_plate_appearances(events: list[Event]) -> None:
    pa = ""
    for event in events:
        if event.play is not None:
            if event.play.continued_plate_appearance:
                event.play.plate_appearance = pa
            else:
                pa = event.play.plate_appearance


def _write_events(out: TextIO, name: str, events: list[Event] | None) -> None:
    if events is None:
        return
    out.write(f"{name}\n")
    pa = 0
    for event in events:
        if event.play is not None:
            play = event.play
            if not play.continued_plate_appearance:
                pa = play.plate_appearance_number() or pa + 1
                out.write(f"{pa} {play.batter} ")
            else:
                out.write("  ... ")
            out.write(f"{play.pitch_sequence} ")
            _write_code(out, play.code, play.advances, event.afters, event.comment)
        elif event.alternative is not None:
            alt = event.alternative
            out.write("  alt ")
            _write_code(out, alt.code, alt.advances, [], alt.comment)
        elif event.pitcher:
            out.write(f"pitching {event.pitcher}\n")
        elif event.radj_base:
            out.write(f"radj {event.radj_runner} {event.radj_base}\n")
        elif event.score:
            out.write(f"score {event.score}\n")
        elif event.final:
            out.write(f"final {event.final}\n")


def _write_code(
    out: TextIO, code: str, advances: list[str], afters: list[LineupChange], comment: str
) -> None:
    parts = [code, *advances]
    for after in afters:
        if after.conference:
            parts.append("conf")
        if after.courtesy_runner is not None:
            parts.append(f"cr {after.courtesy_runner}")
    line = " ".join(parts)
    if comment:
        line += f" : {comment}"
    out.write(line + "\n")