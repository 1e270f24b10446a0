"""Run expectancy: expected runs for each out count and set of occupied bases."""

from __future__ import annotations

import csv
from dataclasses import dataclass
from typing import Mapping, NamedTuple, Protocol

OCCUPIED_BASES_VALUES = ("___", "__1", "_2_", "_21", "3__", "3_1", "32_", "321")
BASES_EMPTY = OCCUPIED_BASES_VALUES[0]
RUNNER_ON_FIRST = OCCUPIED_BASES_VALUES[1]
RUNNER_ON_SECOND = OCCUPIED_BASES_VALUES[2]
RUNNER_ON_FIRST_AND_SECOND = OCCUPIED_BASES_VALUES[3]
RUNNER_ON_THIRD = OCCUPIED_BASES_VALUES[4]
RUNNERS_ON_FIRST_AND_THIRD = OCCUPIED_BASES_VALUES[5]
RUNNERS_ON_SECOND_AND_THIRD = OCCUPIED_BASES_VALUES[6]
BASES_LOADED = OCCUPIED_BASES_VALUES[7]


class RunExpectancy(Protocol):
    """Gives the runs expected from a base/out situation to the end of the inning."""

    def expected_runs(self, outs: int, runners: str) -> float:
        """Return expected runs with ``outs`` outs and ``runners`` on base."""


class RunsChange(NamedTuple):
    before: float
    after: float
    runs_scored: int
    change: float


def occupied_bases(r1: bool, r2: bool, r3: bool) -> str:
    """Render occupied bases as third, second, first, e.g. ``3_1``."""
    return ("3" if r3 else "_") + ("2" if r2 else "_") + ("1" if r1 else "_")


def _expected_at(re: RunExpectancy, outs: int | None, runners: str) -> float:
    if outs is None or outs == 3:
        return re.expected_runs(0, BASES_EMPTY)
    return re.expected_runs(outs, runners)


def expected_runs_change(
    re: RunExpectancy,
    before_outs: int | None,
    before_runners: str,
    after_outs: int,
    after_runners: str,
    runs_scored: int,
) -> RunsChange:
    """Change in expected runs over a play, counting the runs that scored.

    ``before_outs`` is None when the play starts the inning.
    """
    before = _expected_at(re, before_outs, before_runners)
    after = _expected_at(re, after_outs, after_runners) if after_outs < 3 else 0.0
    return RunsChange(before, after, runs_scored, after - before + runs_scored)


def run_expectancy_table(re: RunExpectancy) -> list[dict[str, object]]:
    """One row per set of occupied bases with expected runs for 0, 1 and 2 outs.

    When ``re`` also counts observations, the counts are included.
    """
    counts = getattr(re, "expected_runs_count", None)
    rows = []
    for runners in OCCUPIED_BASES_VALUES:
        row: dict[str, object] = {"Runr": runners}
        for outs in range(3):
            row[f"{outs}Out"] = re.expected_runs(outs, runners)
        if counts is not None:
            for outs in range(3):
                row[f"{outs}OutCount"] = counts(outs, runners)
        rows.append(row)
    return rows


@dataclass(frozen=True)
class REMatrix:
    """Run expectancy read from a table of runners and three out counts."""

    values: Mapping[str, tuple[float, float, float]]

    def expected_runs(self, outs: int, runners: str) -> float:
        return self.values[runners][outs]


def read_re_matrix(path: str) -> REMatrix:
    """Read a CSV with rows of runners followed by expected runs for 0, 1, 2 outs."""
    values: dict[str, tuple[float, float, float]] = {}
    width: int | None = None
    with open(path, newline="") as handle:
        reader = csv.reader(handle)
        for record in reader:
            if not record:
                continue
            if width is None:
                width = len(record)
            elif len(record) != width:
                raise ValueError(f"{path}:{reader.line_num}: wrong number of fields")
            if not values and record[0] == "Runr":
                continue
            if len(record) < 4:
                raise ValueError(f"{path}:{reader.line_num}: expected runners and 3 values")
            zero, one, two = (float(item.strip()) for item in record[1:4])
            values[record[0]] = (zero, one, two)
    return REMatrix(values)