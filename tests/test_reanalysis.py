import pytest

from paperscore.reanalysis import REAnalysis, REAnalysisRow, biggest_re24
from paperscore.runexpectancy import OCCUPIED_BASES_VALUES, REMatrix

CONSTANT = 0.75
FLAT = REMatrix({runners: (CONSTANT, CONSTANT, CONSTANT) for runners in OCCUPIED_BASES_VALUES})
VARIED = REMatrix(
    {runners: (2.0 + i, 1.0 + i, 0.5 + i) for i, runners in enumerate(OCCUPIED_BASES_VALUES)}
)


def test_first_row_is_batter_reaching_first():
    rows = REAnalysis(VARIED).run()
    assert rows[0] == REAnalysisRow(
        0, "___", 0, "__1",
        VARIED.expected_runs(0, "__1") - VARIED.expected_runs(0, "___"),
        "B reaches first",
    )


def test_flat_expectancy_changes_only_on_last_out():
    rows = REAnalysis(FLAT).run()
    for row in rows:
        if row.after_outs == 3:
            assert row.change == pytest.approx(-CONSTANT)
        else:
            assert row.change == pytest.approx(0.0)


def test_last_out_rows_lose_all_expected_runs():
    rows = [row for row in REAnalysis(VARIED).run() if row.narrative == "B last out"]
    assert [row.before_runners for row in rows] == ["___", "__1", "_2_"]
    for row in rows:
        assert row.change == pytest.approx(-VARIED.expected_runs(2, row.before_runners))


def test_same_out_cases_cover_each_out_count():
    rows = [row for row in REAnalysis(VARIED).run() if row.narrative == "R1 steals 2nd"]
    assert [row.before_outs for row in rows] == [0, 1, 2]
    assert all(row.before_outs == row.after_outs for row in rows)


def _plays(values):
    return [{"Game": f"g{i}", "RE24": value} for i, value in enumerate(values)]


def test_biggest_re24_sorts_and_ranks():
    values = [0.3, -1.2, 2.5, 0.0]
    result = biggest_re24(_plays(values), 0)
    assert [row["RE24"] for row in result] == sorted(values, reverse=True)
    assert [row["Rnk"] for row in result] == list(range(1, len(values) + 1))
    assert list(result[0])[0] == "Rnk"


def test_biggest_re24_keeps_top_and_bottom():
    values = [float(v) for v in (4, 9, 0, 7, 2, 5, 1, 8, 3, 6)]
    result = biggest_re24(_plays(values), 2)
    ordered = sorted(values, reverse=True)
    assert [row["RE24"] for row in result] == ordered[:2] + ordered[-2:]
    assert [row["Rnk"] for row in result][:2] == [1, 2]
    assert result[-1]["Rnk"] == len(values)


def test_biggest_re24_small_input_not_trimmed():
    result = biggest_re24(_plays([1.0, 2.0, 3.0, 4.0, 5.0]), 2)
    assert len(result) == 5