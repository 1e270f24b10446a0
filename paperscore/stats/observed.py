"""Run expectancy and run frequencies observed from recorded plays."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, TextIO

from ..runexpectancy import OCCUPIED_BASES_VALUES

_STATES = 24
_MAX_RUNS = 9


@dataclass(frozen=True)
class PlayState:
    """The outs and occupied bases after a play, and the runs that scored on it."""

    outs: int
    runners: str = "___"
    runs_scored: int = 0


@dataclass(frozen=True)
class FrequencyRow:
    state: str
    runs: int
    obs: int
    total: int
    freq: float


@dataclass
class _Observation:
    count: int = 0
    runs: int = 0

    def expected_runs(self) -> float:
        return self.runs / self.count if self.count > 0 else 0.0


def _state_label(index: int) -> str:
    return f"{OCCUPIED_BASES_VALUES[index % 8]}/{index // 8}"


def _sort_by_state_descending(rows: list, label) -> None:
    # runners descending, then outs ascending; earlier sort keys stay as tie breakers
    rows.sort(key=lambda row: int(label(row)[4:]))
    rows.sort(key=lambda row: label(row)[:3], reverse=True)


class ObservedRunExpectancy:
    """Run expectancy accumulated from the plays of recorded games."""

    def __init__(self) -> None:
        self._totals: list[_Observation] | None = None
        self._in_progress: list[_Observation | None] = []
        self._run_data: list[tuple[int, int]] = []

    def read(self, states: Iterable[PlayState]) -> None:
        """Accumulate the plays of one game, in order."""
        if self._totals is None:
            self._totals = [_Observation() for _ in range(_STATES)]
            self._in_progress = [None] * _STATES
            self._in_progress[0] = _Observation(count=1)
        for state in states:
            for observation in self._in_progress:
                if observation is not None:
                    observation.runs += state.runs_scored
            if state.outs == 3:
                for index, observation in enumerate(self._in_progress):
                    if observation is None:
                        continue
                    self._totals[index].count += observation.count
                    self._totals[index].runs += observation.runs
                    self._run_data.append((index, min(observation.runs, _MAX_RUNS)))
                    if index == 0:
                        observation.count = 1
                        observation.runs = 0
                    else:
                        self._in_progress[index] = None
                continue
            index = self._index(state.outs, state.runners)
            if self._in_progress[index] is None:
                self._in_progress[index] = _Observation(count=1)
            self._in_progress[index].count += 1

    @staticmethod
    def _index(outs: int, runners: str) -> int:
        if outs == 3:
            return 0
        index = outs * 8
        if runners[2] != "_":
            index |= 1
        if runners[1] != "_":
            index |= 2
        if runners[0] != "_":
            index |= 4
        return index

    def expected_runs(self, outs: int, runners: str) -> float:
        if self._totals is None:
            return 0.0
        return self._totals[self._index(outs, runners)].expected_runs()

    def expected_runs_count(self, outs: int, runners: str) -> int:
        if self._totals is None:
            return 0
        return self._totals[self._index(outs, runners)].count

    def write_yaml(self, out: TextIO) -> None:
        """Write expected runs for 0, 1 and 2 outs keyed by occupied bases."""
        totals = self._totals or [_Observation() for _ in range(_STATES)]
        for i, runners in enumerate(OCCUPIED_BASES_VALUES):
            out.write(
                f'"{runners}": [ {totals[i].expected_runs():.3f}, '
                f"{totals[i + 8].expected_runs():.3f}, "
                f"{totals[i + 16].expected_runs():.3f} ]\n"
            )

    def run_data(self) -> list[tuple[str, int]]:
        """Each completed observation as a state label and runs scored, capped at 9."""
        return [(_state_label(index), runs) for index, runs in self._run_data]

    def run_frequency(self) -> list[FrequencyRow]:
        """How often each number of runs (0 to 9) followed each state."""
        observed = Counter(self._run_data)
        totals = Counter(index for index, _ in self._run_data)
        rows = []
        for index in range(_STATES):
            total = totals[index]
            for runs in range(_MAX_RUNS + 1):
                obs = observed[(index, runs)]
                freq = obs / total if total > 0 else 0.0
                rows.append(FrequencyRow(_state_label(index), runs, obs, total, freq))
        rows.sort(key=lambda row: row.runs)
        _sort_by_state_descending(rows, lambda row: row.state)
        return rows


def pivot_run_frequency(rows: Iterable[FrequencyRow]) -> list[dict[str, object]]:
    """One row per state with the percentage and count for each number of runs."""
    groups: dict[str, list[FrequencyRow]] = {}
    for row in rows:
        groups.setdefault(row.state, []).append(row)
    result: list[dict[str, object]] = []
    for state, members in groups.items():
        by_runs: dict[int, FrequencyRow] = {}
        for member in members:
            by_runs.setdefault(member.runs, member)
        pivot: dict[str, object] = {"St24": state}
        for runs in range(_MAX_RUNS + 1):
            member = by_runs.get(runs)
            if member is None:
                pivot[f"PcRn{runs}"] = 0.0
            elif member.total:
                pivot[f"PcRn{runs}"] = 100 * member.obs / member.total
            else:
                pivot[f"PcRn{runs}"] = math.nan
        for runs in range(_MAX_RUNS + 1):
            member = by_runs.get(runs)
            pivot[f"CnRn{runs}"] = member.obs if member is not None else 0
        result.append(pivot)
    _sort_by_state_descending(result, lambda row: row["St24"])
    return result