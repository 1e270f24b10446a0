"""Choosing a game file from a directory of ``.gm`` files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date
from typing import Sequence

GAME_SUFFIX = ".gm"


@dataclass(frozen=True)
class Choice:
    """The file picked and whether a new game should follow it."""

    path: str
    new_game: bool = False


def list_game_files(directory: str, name: str) -> tuple[list[str], int | None]:
    """Sorted game file names in ``directory`` and the index of ``name`` among them.

    A directory that cannot be read has no game files.
    """
    try:
        entries = list(os.scandir(directory))
    except OSError:
        entries = []
    files = sorted(
        entry.name
        for entry in entries
        if not entry.is_dir() and entry.name.endswith(GAME_SUFFIX)
    )
    index = files.index(name) if name in files else None
    return files, index


def select_file(directory: str, files: Sequence[str], index: int, today: date) -> Choice:
    """The choice made by picking entry ``index`` of a list of ``files``.

    The entry after the last file stands for a new game: it follows the last
    file, or starts today's first game when there are no files.
    """
    if index < len(files):
        return Choice(os.path.join(directory, files[index]))
    if not files:
        return Choice(os.path.join(directory, f"{today:%Y%m%d}-1{GAME_SUFFIX}"))
    return Choice(os.path.join(directory, files[-1]), new_game=True)