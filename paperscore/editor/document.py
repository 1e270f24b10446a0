"""The editable text of a game: properties, visitor plays and home plays."""

from __future__ import annotations

import enum
import os
import re
from dataclasses import dataclass
from datetime import date

_NUMBERED_GAME = re.compile(r"(.*-)([0-9]+)\.gm")


class Section(enum.Enum):
    PROPERTIES = "properties"
    VISITOR_PLAYS = "visitor_plays"
    HOME_PLAYS = "home_plays"


_HEADERS = {
    "visitorplays": Section.VISITOR_PLAYS,
    "homeplays": Section.HOME_PLAYS,
}


def line_count(s: str) -> int:
    """The number of newlines in ``s``."""
    return s.count("\n")


def _date_text(day: date) -> str:
    return f"{day.month}/{day.day}/{day.year}"


def _scan_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass
class GameDocument:
    """A game file split into the three parts edited separately."""

    properties: str = ""
    visitor_plays: str = ""
    home_plays: str = ""

    def _layout(self) -> tuple[str, int, int]:
        parts = [self.properties]
        if self.properties and not self.properties.endswith("\n"):
            parts.append("\n")
        parts.append("---\nvisitorplays\n")
        visitor_start = line_count("".join(parts))
        parts.append(self.visitor_plays)
        home_start = visitor_start + 1 + line_count(self.visitor_plays)
        if not "".join(parts).endswith("\n"):
            parts.append("\n")
            home_start += 1
        parts.append("homeplays\n")
        parts.append(self.home_plays + "\n")
        return "".join(parts), visitor_start, home_start

    def game_text(self) -> str:
        """The whole game file text."""
        return self._layout()[0]

    def locate_line(self, line: int) -> tuple[Section, int]:
        """Map a 0-based line of :meth:`game_text` to its section and line within it."""
        _, visitor_start, home_start = self._layout()
        if line < visitor_start:
            return Section.PROPERTIES, line
        if line < home_start:
            return Section.VISITOR_PLAYS, line - visitor_start
        return Section.HOME_PLAYS, line - home_start

    def swap_home_and_away(self) -> None:
        """Exchange the home and visitor properties and plays."""
        lines = []
        for line in self.properties.split("\n"):
            if line.startswith("home") and len(line) > 4:
                line = "visitor" + line[4:]
            elif line.startswith("visitor") and len(line) > 7:
                line = "home" + line[7:]
            lines.append(line + "\n")
        self.properties = "".join(lines)
        self.visitor_plays, self.home_plays = self.home_plays, self.visitor_plays

    @classmethod
    def from_text(cls, text: str) -> GameDocument:
        """Split game file text into its sections."""
        doc = cls()
        buf: list[str] = []
        state = "props"
        target: Section | None = None
        for line in _scan_lines(text):
            if state == "props":
                if line == "---":
                    state = "plays"
                    doc.properties = "".join(buf)
                    buf = []
                else:
                    buf.append(line + "\n")
            elif state == "plays" and line in _HEADERS:
                state = line
                target = _HEADERS[line]
            elif target is not None:
                if line in _HEADERS and line != state:
                    setattr(doc, target.value, "".join(buf))
                    buf = []
                    state = line
                    target = _HEADERS[line]
                else:
                    buf.append(line + "\n")
        if target is not None:
            setattr(doc, target.value, "".join(buf))
        return doc


def new_game_path(game_path: str, today: date) -> str:
    """The path of the game after ``game_path``, numbered one higher."""
    match = _NUMBERED_GAME.fullmatch(game_path)
    if match is not None:
        number = int(match.group(2))
        if number != 0:
            return f"{match.group(1)}{number + 1}.gm"
    return os.path.join(os.path.dirname(game_path), f"{_date_text(today)}-1.gm")


def blank_game_text(today: date) -> str:
    """The text of a new, empty game played ``today``."""
    return f"date: {_date_text(today)}\ngame: 1\n---\n"