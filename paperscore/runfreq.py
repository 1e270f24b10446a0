"""Sampling the runs scored in the rest of an inning from cumulative frequencies."""

from __future__ import annotations

import bisect
import csv
import random
import re
from itertools import pairwise

from .runexpectancy import OCCUPIED_BASES_VALUES

_RUN_BUCKETS = 10
_INTEGER = re.compile(r"[+-]?[0-9]+")


class RunFrequencyError(ValueError):
    """Raised when run frequency data is incomplete or malformed."""


class RunFrequency:
    """Cumulative run probabilities for each set of runners and out count."""

    def __init__(
        self, probs: dict[str, list[list[float]]], rng: random.Random | None = None
    ) -> None:
        self._probs = probs
        self._rng = rng if rng is not None else random.Random()

    def runs(self, outs: int, runners: str) -> int:
        """Draw the number of runs scored from this situation."""
        return bisect.bisect_left(self._probs[runners][outs], self._rng.random())


def _atoi(text: str) -> int:
    return int(text) if _INTEGER.fullmatch(text) else 0


def _parse_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


def load_run_frequency(path: str, rng: random.Random | None = None) -> RunFrequency:
    """Read a CSV of runners, outs and ten cumulative probabilities (after a header)."""
    with open(path, newline="") as handle:
        records = [record for record in csv.reader(handle) if record]
    table: dict[str, list[list[float] | None]] = {}
    for record in records[1:]:
        if len(record) < 2 + _RUN_BUCKETS:
            raise RunFrequencyError(f"{path}: incomplete run frequency record {record!r}")
        outs_table = table.setdefault(record[0], [None, None, None])
        out = _atoi(record[1])
        if not 0 <= out < len(outs_table):
            raise RunFrequencyError(f"{path}: invalid out count {record[1]!r}")
        outs_table[out] = [_parse_float(item) for item in record[2:2 + _RUN_BUCKETS]]
    probs: dict[str, list[list[float]]] = {}
    for runners in OCCUPIED_BASES_VALUES:
        outs_table = table.get(runners)
        if outs_table is None:
            raise RunFrequencyError(f"run frequency data is missing for {runners}")
        checked: list[list[float]] = []
        for out, row in enumerate(outs_table):
            if row is None:
                raise RunFrequencyError(f"run frequency data is missing for {runners}/{out}")
            if any(later < earlier for earlier, later in pairwise(row)):
                raise RunFrequencyError(
                    f"run frequency probability must be sorted for {runners}/{out}"
                )
            checked.append(row)
        probs[runners] = checked
    return RunFrequency(probs, rng)