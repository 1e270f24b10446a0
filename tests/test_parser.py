import io

import pytest

from paperscore.gamefile.model import GameFileError
from paperscore.gamefile.parser import ParseError, parse_file, parse_string

SAMPLE = """date: 5/30/22
game: 2
visitorid: pride-2022
---
visitorplays
pitching 2
1 7 CSFS k
2 9 X s7 b-1 cr 9
... B WP 1-2 : stolen
alt wp 1-2 : routine ground ball
3 4 BX 63 conf
vsub 3 for 2
homeplays
pitcher 5
1 1 . NP
"""


def test_parse_sample():
    f = parse_string("t.gm", SAMPLE)
    assert f.properties["visitorid"] == "pride-2022"
    events = f.visitor_events
    assert events[0].pitcher == "2"
    play = events[1].play
    assert play.plate_appearance_number() == 1
    assert (play.batter, play.pitch_sequence, play.code) == ("7", "CSFS", "K")
    assert events[2].afters[0].courtesy_runner == "9"
    assert events[2].play.advances == ["B-1"]
    assert events[3].play.continued_plate_appearance
    assert events[3].play.plate_appearance == "2"
    assert events[3].comment == "stolen"
    assert events[4].alternative.comment == "routine ground ball"
    assert events[4].alternative.code == "WP"
    assert events[5].afters[0].conference
    assert events[6].sub.vsub_enter == "3"
    assert events[6].sub.vsub_exit == "2"
    assert f.home_events[0].pitcher == "5"


def test_round_trip(tmp_path):
    f = parse_string("t.gm", SAMPLE)
    out = io.StringIO()
    f.write(out)
    path = tmp_path / "t.gm"
    path.write_text(out.getvalue())
    again = parse_file(str(path))
    assert again.properties == f.properties
    codes = [(e.play.code, e.play.advances) for e in f.visitor_events if e.play]
    again_codes = [(e.play.code, e.play.advances) for e in again.visitor_events if e.play]
    assert again_codes == codes


def test_property_without_value():
    with pytest.raises(ParseError):
        parse_string("t.gm", "empty:\n---\n")


def test_lex_error_reported():
    with pytest.raises(ParseError):
        parse_string("t.gm", "date 5/30\n")


def test_duplicate_sections():
    text = "date: 1/1/22\n---\nhomeplays\npitcher 1\nhomeplays\npitcher 2\n"
    with pytest.raises(GameFileError, match="duplicate homeplays"):
        parse_string("t.gm", text)