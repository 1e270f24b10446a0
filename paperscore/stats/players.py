"""Per-player batting, pitching and fielding totals."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class PlayerData:
    """Identity of a player and the games they appeared in."""

    name: str = ""
    team: str = ""
    number: str = ""
    games: int = 0
    game_appearances: set[str] = field(default_factory=set)
    inactive: bool = False

    def update(self) -> None:
        """Recompute derived values."""
        self.games = len(self.game_appearances)


@dataclass
class Batting(PlayerData):
    pa: int = 0
    ab: int = 0
    hits: int = 0
    walks: int = 0
    line_drives: int = 0
    strike_outs: int = 0
    strike_outs_looking: int = 0
    runs_scored: int = 0
    singles: int = 0
    doubles: int = 0
    triples: int = 0
    hrs: int = 0
    stolen_bases: int = 0
    caught_stealing: int = 0
    sb2: int = 0
    sb2_pitch_opp: int = 0
    sb2_opp: int = 0
    picked_off: int = 0
    lob: int = 0
    pitches_seen: int = 0
    swings: int = 0
    misses: int = 0
    strikes: int = 0
    called_strikes: int = 0
    ground_outs: int = 0
    fly_outs: int = 0
    pop_outs: int = 0
    gidp: int = 0
    hit_by_pitch: int = 0
    on_base: int = 0
    sacrifice_bunts: int = 0
    sacrifice_flys: int = 0
    reached_on_error: int = 0
    fielders_choice: int = 0
    reached_on_k: int = 0
    re24: float = 0.0
    line_drive_outs: int = 0
    loph: int = 0
    foul_bunts: int = 0
    missed_bunts: int = 0
    popup_bunts: int = 0
    bunt_hits: int = 0
    bunt_sacrifices: int = 0
    bunt_outs: int = 0

    def update(self) -> None:
        """Recompute games played and line-drive-outs-plus-hits."""
        super().update()
        self.loph = self.line_drive_outs + self.hits


@dataclass
class Pitching(PlayerData):
    pitches: int = 0
    strikes: int = 0
    balls: int = 0
    swings: int = 0
    misses: int = 0
    hits: int = 0
    doubles: int = 0
    triples: int = 0
    hrs: int = 0
    walks: int = 0
    strike_outs: int = 0
    strike_outs_looking: int = 0
    outs: int = 0
    ground_outs: int = 0
    fly_outs: int = 0
    wp: int = 0
    hp: int = 0
    batters_faced: int = 0
    stolen_bases: int = 0
    whiff: int = 0
    sw_str: int = 0
    ip: str = ""

    def update(self) -> None:
        """Recompute games, whiff and swinging strike rates (per 1000) and innings pitched."""
        super().update()
        self.whiff = int(1000.0 * self.misses / self.swings) if self.swings > 0 else 0
        self.sw_str = int(1000.0 * self.misses / self.pitches) if self.pitches > 0 else 0
        self.ip = f"{self.outs // 3}.{self.outs % 3}"


@dataclass
class Fielding:
    position: int
    errors: int = 0


@dataclass
class FieldingStats:
    """Errors by fielding position (1 to 9) and in total."""

    fielding_by_position: list[Fielding] = field(
        default_factory=lambda: [Fielding(position) for position in range(1, 10)]
    )
    errors: int = 0

    def record_error(self, fielder: int) -> None:
        """Charge an error to the fielder at position ``fielder``."""
        if not 1 <= fielder <= len(self.fielding_by_position):
            raise ValueError(f"no fielding position {fielder}")
        self.fielding_by_position[fielder - 1].errors += 1
        self.errors += 1