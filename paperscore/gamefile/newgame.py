"""Starting the next game file from an existing one."""

from __future__ import annotations

import os
import re
from datetime import timedelta

from .model import ActualPlay, Event, GameFile, GameFileError, Property

_INTEGER = re.compile(r"[+-]?[0-9]+")
_KEPT = {"visitorid", "homeid", "tournament", "league", "timelimit"}


def _opening_events() -> list[Event]:
    return [
        Event(pitcher="0"),
        Event(play=ActualPlay(plate_appearance="1", batter="1", pitch_sequence=".", code="NP")),
    ]


def write_new_game(file: GameFile, next_day: bool) -> GameFile:
    """Write a blank game following ``file`` next to it and return it."""
    try:
        game_date = file.game_date()
    except GameFileError as exc:
        raise GameFileError(f"{file.path} does not have a game date - {exc}") from exc
    if next_day:
        game_date += timedelta(days=1)
        number = "1"
    else:
        text = file.properties.get("game", "")
        number = str((int(text) if _INTEGER.fullmatch(text) else 0) + 1)
    date_text = f"{game_date.month}/{game_date.day}/{game_date.year}"
    properties = []
    for prop in file.property_list:
        if prop.key == "date":
            properties.append(Property("date", date_text))
        elif prop.key == "game":
            properties.append(Property("game", number))
        elif prop.key in _KEPT:
            properties.append(prop)
        else:
            properties.append(Property(prop.key))
    new = GameFile(
        property_list=properties,
        home_events=_opening_events(),
        visitor_events=_opening_events(),
    )
    new.validate()
    new.path = os.path.join(
        os.path.dirname(file.path), f"{game_date:%Y%m%d}-{number}.gm"
    )
    with open(new.path, "w", encoding="utf-8") as out:
        new.write(out)
    return new