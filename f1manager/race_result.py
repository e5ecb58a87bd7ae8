"""Single race result for a driver."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class RaceResult:
    """One driver's finish in one race; ``id`` is -1 until stored."""

    driver_id: int
    team_id: int
    race_name: str
    season: int
    race_date: datetime
    position: int
    points: int
    fastest_lap: bool
    grid_position: int
    id: int = field(default=-1, kw_only=True)

    def formatted_race_date(self) -> str:
        """Race date as YYYY-MM-DD HH:MM:SS."""
        return self.race_date.strftime("%Y-%m-%d %H:%M:%S")

    def positions_gained(self) -> int:
        """Places gained from the grid to the finish (negative if lost)."""
        return self.grid_position - self.position

    def is_podium(self) -> bool:
        return self.position <= 3

    def is_win(self) -> bool:
        return self.position == 1

    def is_point_scoring(self) -> bool:
        return self.points > 0