from dataclasses import dataclass
from datetime import date

from paperscore.tournament import group_by_tournament


@dataclass
class FakeGame:
    date: date
    tournament: str = ""
    league: str = ""


def test_no_games():
    assert group_by_tournament([]) == []


def test_consecutive_days_grouped():
    games = [
        FakeGame(date(2021, 6, 2), tournament="Summer Classic"),
        FakeGame(date(2021, 6, 1), tournament="Summer Classic"),
        FakeGame(date(2021, 6, 1), tournament="Summer Classic"),
    ]
    groups = group_by_tournament(games)
    assert len(groups) == 1
    group = groups[0]
    assert group.date == date(2021, 6, 1)
    assert group.tournament == "Summer Classic"
    assert group.name == "06/01/2021 Summer Classic"
    assert [g.date for g in group.games] == sorted(g.date for g in games)


def test_gap_starts_new_group():
    games = [
        FakeGame(date(2021, 6, 10), tournament="B"),
        FakeGame(date(2021, 6, 1), tournament="A"),
        FakeGame(date(2021, 6, 3), tournament="A"),
    ]
    groups = group_by_tournament(games)
    assert [g.tournament for g in groups] == ["A", "A", "B"]
    assert sum(len(g.games) for g in groups) == len(games)


def test_league_used_when_no_tournament():
    groups = group_by_tournament([FakeGame(date(2021, 9, 12), league="Fall League")])
    assert groups[0].name == "09/12/2021 Fall League"
    assert groups[0].tournament == groups[0].name


def test_input_not_modified():
    games = [FakeGame(date(2021, 6, 5)), FakeGame(date(2021, 6, 1))]
    group_by_tournament(games)
    assert games[0].date == date(2021, 6, 5)