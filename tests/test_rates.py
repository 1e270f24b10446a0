import pytest

from paperscore.stats.rates import (
    avg,
    bb_pct,
    k_pct,
    lavg,
    on_base,
    ops,
    pgo,
    slugging,
    thousands,
)


@pytest.mark.parametrize("fn", [on_base, slugging, pgo, bb_pct, k_pct, ops, avg, lavg])
def test_empty_row_gives_zero(fn):
    assert fn({}) == 0


def test_avg_all_hits():
    assert avg({"AB": 5, "Hits": 5}) == 1.0


def test_slugging_of_singles_equals_average():
    row = {"AB": 7, "Hits": 3, "Singles": 3}
    assert slugging(row) == avg(row)


def test_on_base_without_walks_equals_average():
    row = {"AB": 9, "Hits": 4}
    assert on_base(row) == avg(row)


def test_on_base_counts_walks():
    row = {"AB": 9, "Hits": 4, "Walks": 2}
    assert on_base(row) > avg(row)


def test_lavg_without_line_drive_outs_equals_average():
    row = {"AB": 8, "Hits": 2}
    assert lavg(row) == avg(row)


def test_lavg_line_drive_outs_raise_average():
    row = {"AB": 8, "Hits": 2, "LineDriveOuts": 2}
    assert lavg(row) > avg(row)


def test_ops_is_sum():
    row = {"AB": 10, "Hits": 4, "Singles": 2, "Doubles": 1, "HRs": 1, "Walks": 1}
    assert ops(row) == pytest.approx(on_base(row) + slugging(row))


def test_pgo_all_outs():
    assert pgo({"PA": 4, "PopOuts": 1, "GroundOuts": 3}) == 1.0


def test_rates_bounded():
    row = {"PA": 6, "AB": 5, "Walks": 1, "StrikeOuts": 2}
    assert 0 < bb_pct(row) < 1
    assert 0 < k_pct(row) < 1


def test_thousands_scales_and_truncates():
    assert thousands(lambda row: 0.5)({}) == 500
    assert thousands(lambda row: 0.3339)({}) == 333


def test_thousands_of_avg():
    assert thousands(avg)({"AB": 2, "Hits": 2}) == 1000