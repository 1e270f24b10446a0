"""Reading games kept in the older YAML layout."""

from __future__ import annotations

import re
from typing import Any

import yaml

from .lexer import Position
from .model import ActualPlay, Event, GameFile, GameFileError, Property

_BATTER = re.compile(r"[a-z]*([0-9]+)")
_PA_CONTINUES = ("SB", "WP", "PB", "CS", "PO", "FLE")


def _to_string(value: Any) -> str:
    if isinstance(value, bool) or value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, list) and len(value) == 1:
        return str(value[0])
    return ""


def _part(parts: list[str], i: int) -> str:
    return parts[i] if i < len(parts) else ""


def _batter(text: str) -> str:
    match = _BATTER.search(text)
    return match.group(1) if match else "000"


def _completes_pa(code: str) -> bool:
    return not (code.startswith(_PA_CONTINUES) or code == "NP")


def _guess_position(path: str, key: str, lines: list[str]) -> Position:
    line = 1
    for text in lines:
        if text == key:
            break
        line += 1
    return Position(path, 0, line, 0)


def _events(start: Position, value: Any) -> list[Event] | None:
    if not isinstance(value, list):
        return None
    events: list[Event] = []
    pa = 1
    line = start.line
    for item in value:
        line += 1
        pos = Position(start.filename, 0, line, 0)
        code = _to_string(item)
        if not code:
            break
        parts = code.split(",")
        kind = parts[0]
        if kind == "pitcher":
            events.append(Event(pos=pos, pitcher=_part(parts, 1)))
        elif kind == "inn":
            if len(parts) > 2:
                events.append(Event(pos=pos, score=_part(parts, 2)))
        elif kind == "final":
            events.append(Event(pos=pos, final=_part(parts, 1)))
        elif kind == "radj":
            events.append(Event(pos=pos, radj_runner=_part(parts, 1), radj_base=_part(parts, 2)))
        elif kind == "err":
            continue
        else:
            play = ActualPlay(
                pos=pos,
                batter=_batter(_part(parts, 0)),
                pitch_sequence=_part(parts, 1),
                plate_appearance=str(pa),
            )
            play_code = _part(parts, 2)
            dot = play_code.find(".")
            if dot > 0:
                play.code = play_code[:dot]
                if dot + 1 < len(play_code):
                    play.advances = play_code[dot + 1:].split(";")
            else:
                play.code = play_code
            events.append(Event(pos=pos, play=play, comment=_part(parts, 3)))
            if _completes_pa(play_code):
                pa += 1
    return events or None


def parse_yaml_string(path: str, text: str) -> GameFile:
    """Build a validated GameFile from YAML game text."""
    data = yaml.safe_load(text)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise GameFileError(f"{path}: expected a mapping at the top level")
    lines = text.splitlines()
    gf = GameFile(path=path)
    pos = Position(path, 0, 1, 0)
    for raw_key, value in data.items():
        key = str(raw_key)
        if key in ("homeplays", "visitorplays"):
            events = _events(_guess_position(path, f"{key}:", lines), value)
            if key == "homeplays":
                gf.home_events = events
            else:
                gf.visitor_events = events
        elif (text_value := _to_string(value)):
            gf.property_list.append(Property(key, text_value, pos))
    gf.validate()
    return gf


def parse_yaml_file(path: str) -> GameFile:
    """Read a YAML game file."""
    with open(path, encoding="utf-8") as handle:
        return parse_yaml_string(path, handle.read())