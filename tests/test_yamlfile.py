from paperscore.gamefile.yamlfile import parse_yaml_file, parse_yaml_string

SAMPLE = """date: 9/12/21
visitorid: pride-fall-2021
visitorplays:
  - pitcher,2
  - x17,BBBB,W.B-1
  - 6,C,SB2
  - 00,X,E6.B-1,advance on throw
  - err,foo
  - radj,3,2
  - final,5
homeplays:
  - pitcher,9
"""


def test_parse_yaml(tmp_path):
    path = tmp_path / "g.yaml"
    path.write_text(SAMPLE)
    f = parse_yaml_file(str(path))
    assert f.properties["date"] == "9/12/21"
    assert f.properties["visitorid"] == "pride-fall-2021"
    events = f.visitor_events
    assert events[0].pitcher == "2"
    play = events[1].play
    assert (play.batter, play.pitch_sequence, play.code) == ("17", "BBBB", "W")
    assert play.advances == ["B-1"]
    assert (events[2].play.batter, events[2].play.code) == ("6", "SB2")
    assert events[3].play.batter == "00"
    assert events[3].comment == "advance on throw"
    assert events[4].radj_runner == "3"
    assert events[5].final == "5"


def test_pa_not_advanced_by_steal():
    f = parse_yaml_string("g.yaml", SAMPLE)
    pas = [e.play.plate_appearance for e in f.visitor_events if e.play]
    assert pas[1] == pas[2]
    assert int(pas[1]) == int(pas[0]) + 1


def test_positions_follow_section_line():
    f = parse_yaml_string("g.yaml", SAMPLE)
    lines = SAMPLE.splitlines()
    header = lines.index("homeplays:") + 1
    assert f.home_events[0].pos.line == header + 1
    assert f.visitor_events[0].pos.line == lines.index("visitorplays:") + 2


def test_empty_document():
    f = parse_yaml_string("g.yaml", "")
    assert f.properties == {}
    assert f.home_events is None