import pytest

from paperscore.stats.players import Batting, FieldingStats, Pitching, PlayerData


def test_player_data_counts_games():
    player = PlayerData(name="Ann", game_appearances={"g1", "g2", "g3"})
    player.update()
    assert player.games == len({"g1", "g2", "g3"})


def test_batting_update_sets_loph_and_games():
    batting = Batting(hits=4, line_drive_outs=2, game_appearances={"g1"})
    batting.update()
    assert batting.loph == batting.hits + batting.line_drive_outs
    assert batting.games == 1


def test_pitching_innings_pitched():
    pitching = Pitching(outs=7)
    pitching.update()
    assert pitching.ip == "2.1"


def test_pitching_whole_innings():
    pitching = Pitching(outs=9)
    pitching.update()
    assert pitching.ip.endswith(".0")


def test_pitching_rates_zero_without_pitches():
    pitching = Pitching()
    pitching.update()
    assert (pitching.whiff, pitching.sw_str) == (0, 0)
    assert pitching.ip == "0.0"


def test_pitching_whiff_all_misses():
    pitching = Pitching(swings=6, misses=6, pitches=20)
    pitching.update()
    assert pitching.whiff == 1000
    assert 0 < pitching.sw_str < pitching.whiff


def test_fielding_positions():
    stats = FieldingStats()
    assert [f.position for f in stats.fielding_by_position] == list(range(1, 10))
    assert stats.errors == 0


def test_record_error():
    stats = FieldingStats()
    stats.record_error(6)
    stats.record_error(6)
    stats.record_error(3)
    assert stats.errors == 3
    assert stats.fielding_by_position[5].errors == 2
    assert stats.fielding_by_position[2].errors == 1
    assert sum(f.errors for f in stats.fielding_by_position) == stats.errors


@pytest.mark.parametrize("fielder", [0, 10, -1])
def test_record_error_bad_position(fielder):
    stats = FieldingStats()
    with pytest.raises(ValueError):
        stats.record_error(fielder)
    assert stats.errors == 0