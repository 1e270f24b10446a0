"""Batting rate statistics computed from a row of counting stats.

A row is any mapping from stat name (``AB``, ``Hits``, ``Walks`` ...) to its count.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

Row = Mapping[str, Any]
Rate = Callable[[Row], float]


def _get(row: Row, name: str) -> int:
    return int(row.get(name, 0))


def on_base(row: Row) -> float:
    """On-base percentage: (H + BB + HBP) / (AB + BB + HBP + SF)."""
    hbp = _get(row, "HitByPitch")
    hits = _get(row, "Hits")
    walks = _get(row, "Walks")
    ab = _get(row, "AB")
    sf = _get(row, "SacrificeFlys")
    denominator = ab + walks + hbp + sf
    if denominator == 0:
        return 0.0
    return (hits + walks + hbp) / denominator


def slugging(row: Row) -> float:
    """Total bases per at bat."""
    ab = _get(row, "AB")
    if ab == 0:
        return 0.0
    total_bases = (
        _get(row, "Singles")
        + 2 * _get(row, "Doubles")
        + 3 * _get(row, "Triples")
        + 4 * _get(row, "HRs")
    )
    return total_bases / ab


def pgo(row: Row) -> float:
    """Pop outs and ground outs per plate appearance."""
    pa = _get(row, "PA")
    if pa == 0:
        return 0.0
    return (_get(row, "PopOuts") + _get(row, "GroundOuts")) / pa


def bb_pct(row: Row) -> float:
    """Walks per plate appearance."""
    pa = _get(row, "PA")
    if pa == 0:
        return 0.0
    return _get(row, "Walks") / pa


def k_pct(row: Row) -> float:
    """Strike outs per at bat."""
    ab = _get(row, "AB")
    if ab == 0:
        return 0.0
    return _get(row, "StrikeOuts") / ab


def ops(row: Row) -> float:
    """On-base plus slugging."""
    return on_base(row) + slugging(row)


def thousands(fn: Rate) -> Callable[[Row], int]:
    """Wrap a rate so that it returns the rate times 1000, truncated to an int."""

    def scaled(row: Row) -> int:
        return int(1000 * fn(row))

    return scaled


def avg(row: Row) -> float:
    """Batting average: hits per at bat."""
    ab = _get(row, "AB")
    if ab == 0:
        return 0.0
    return _get(row, "Hits") / ab


def lavg(row: Row) -> float:
    """Batting average counting line drive outs as hits."""
    ab = _get(row, "AB")
    if ab == 0:
        return 0.0
    line_drive_outs = _get(row, "LineDriveOuts")
    return (_get(row, "Hits") + line_drive_outs) / (ab + line_drive_outs)