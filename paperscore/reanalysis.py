"""Run expectancy change for common plays, and ranking of plays by RE24."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from .runexpectancy import RunExpectancy

_SAME_OUTS_CASES = (
    ("___", "__1", "B reaches first"),
    ("___", "_2_", "B reaches 2nd"),
    ("___", "3__", "B reaches 3rd"),
    ("__1", "_2_", "R1 steals 2nd"),
    ("_2_", "3__", "R2 steals 3rd"),
    ("_2_", "_21", "R2, B walks"),
    ("3__", "3_1", "R3, B walks"),
    ("3_1", "32_", "R3, R1 steals 2"),
    ("32_", "321", "R2, R3, B walks"),
    ("__1", "_21", "R1, B singles"),
    ("_21", "321", "R1, R2, B singles"),
)

_OUT_CASES = (
    ("__1", 0, "_2_", 1, "Sac bunt"),
    ("__1", 0, "__1", 1, "B out"),
    ("__1", 1, "_2_", 2, "Sac bunt"),
    ("__1", 1, "__1", 2, "B out"),
    ("___", 0, "___", 1, "B out"),
    ("__1", 0, "__1", 1, "R1, B out"),
    ("__1", 1, "__1", 2, "R1, B out"),
    ("___", 2, "___", 3, "B last out"),
    ("__1", 2, "__1", 3, "B last out"),
    ("_2_", 2, "_2_", 3, "B last out"),
)


@dataclass(frozen=True)
class REAnalysisRow:
    before_outs: int
    before_runners: str
    after_outs: int
    after_runners: str
    change: float
    narrative: str


@dataclass
class REAnalysis:
    """Computes the change in expected runs for a fixed list of situations."""

    re: RunExpectancy

    def run(self) -> list[REAnalysisRow]:
        cases = [
            (before, outs, after, outs, narrative)
            for before, after, narrative in _SAME_OUTS_CASES
            for outs in range(3)
        ]
        cases.extend(_OUT_CASES)
        return [self._row(*case) for case in cases]

    def _row(self, br: str, bo: int, ar: str, ao: int, narrative: str) -> REAnalysisRow:
        before = self.re.expected_runs(bo, br)
        after = self.re.expected_runs(ao, ar) if ao != 3 else 0.0
        return REAnalysisRow(bo, br, ao, ar, after - before, narrative)


def biggest_re24(rows: Iterable[Mapping[str, Any]], n: int) -> list[dict[str, Any]]:
    """Rank rows by their ``RE24`` value, highest first, with a ``Rnk`` column.

    When ``n`` is positive and there are more than ``2n + 1`` rows, only the
    top ``n`` and bottom ``n`` are kept.
    """
    ranked = sorted(rows, key=lambda row: row["RE24"], reverse=True)
    result = [
        {"Rnk": rank, **{key: value for key, value in row.items() if key != "Rnk"}}
        for rank, row in enumerate(ranked, 1)
    ]
    count = len(result)
    if n > 0 and count > 2 * n + 1:
        result = result[:n] + result[count - n:]
    return result