"""Grouping games into tournaments by date."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any, Iterable, Protocol


class TournamentGame(Protocol):
    date: date
    tournament: str
    league: str


@dataclass
class Group:
    date: date
    name: str
    tournament: str
    games: list[Any] = field(default_factory=list)


def _is_same_tournament(group: Group, game: TournamentGame) -> bool:
    last = group.games[-1].date
    return game.date == last or game.date < last + timedelta(days=2)


def _new_group(game: TournamentGame) -> Group:
    day = f"{game.date:%m/%d/%Y}"
    if game.tournament:
        tournament = game.tournament
        name = f"{day} {game.tournament}"
    else:
        name = f"{day} {game.league}"
        tournament = name
    return Group(game.date, name, tournament, [game])


def group_by_tournament(games: Iterable[TournamentGame]) -> list[Group]:
    """Sort games by date and group those played within a day of the previous one."""
    groups: list[Group] = []
    for game in sorted(games, key=lambda g: g.date):
        if groups and _is_same_tournament(groups[-1], game):
            groups[-1].games.append(game)
        else:
            groups.append(_new_group(game))
    return groups