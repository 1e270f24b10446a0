import io
from datetime import date

import pytest

from paperscore.gamefile.lexer import Position
from paperscore.gamefile.model import (
    ActualPlay,
    Alternative,
    Event,
    GameFile,
    GameFileError,
    LineupChange,
    Property,
    TeamEvents,
)


def _sample():
    play = ActualPlay(plate_appearance="1", batter="7", pitch_sequence="csfs", code="k")
    cont = ActualPlay(continued_plate_appearance=True, pitch_sequence="b", code="wp",
                      advances=["1-2"])
    events = [
        Event(pitcher="2"),
        Event(play=play),
        Event(play=cont, comment="stolen", afters=[LineupChange(courtesy_runner="9")]),
        Event(alternative=Alternative(code="wp", advances=["1-2"], comment="grounder")),
    ]
    gf = GameFile(
        property_list=[Property("zeta", "z"), Property("home", "Hawks"),
                       Property("date", "5/30/22")],
        team_events=[TeamEvents(Position(), "visitorplays", events)],
    )
    gf.validate()
    return gf


def test_validate_normalizes_and_sets_pa():
    gf = _sample()
    assert gf.properties["home"] == "Hawks"
    cont = gf.visitor_events[2].play
    assert cont.plate_appearance == gf.visitor_events[1].play.plate_appearance
    assert cont.code == "WP"
    assert gf.visitor_events[1].play.pitch_sequence == "CSFS"
    assert gf.home_events is None


def test_write_canonical_order():
    out = io.StringIO()
    _sample().write(out)
    lines = out.getvalue().splitlines()
    assert lines[:4] == ["date: 5/30/22", "home: Hawks", "zeta: z", "---"]
    assert lines[4:7] == ["visitorplays", "pitching 2", "1 7 CSFS K"]
    assert lines[7] == "  ... B WP 1-2 cr 9 : stolen"
    assert lines[8] == "  alt WP 1-2 : grounder"


def test_duplicate_section():
    section = TeamEvents(Position("f", 0, 3, 1), "homeplays", [Event(pitcher="1")])
    gf = GameFile(team_events=[section, section])
    with pytest.raises(GameFileError, match="duplicate homeplays section"):
        gf.validate()


def test_game_date_formats():
    short = GameFile(property_list=[Property("date", "5/30/22")])
    short.validate()
    full = GameFile(property_list=[Property("date", "5/30/2022")])
    full.validate()
    assert short.game_date() == full.game_date() == date(2022, 5, 30)


def test_bad_date():
    gf = GameFile(property_list=[Property("date", "May 30")])
    gf.validate()
    with pytest.raises(GameFileError, match="can't parse date"):
        gf.game_date()


def test_plate_appearance_number():
    assert ActualPlay(plate_appearance="12").plate_appearance_number() == 12
    assert ActualPlay(plate_appearance="x").plate_appearance_number() == 0