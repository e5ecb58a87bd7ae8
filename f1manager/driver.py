"""Driver model with career statistics and derived ratings."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import date


class DriverStatus(enum.IntEnum):
    """Where a driver currently stands in the market."""

    ACTIVE = 0
    RESERVE = 1
    FREE_AGENT = 2
    RETIRED = 3


_STATUS_LABELS = {
    DriverStatus.ACTIVE: "Active",
    DriverStatus.RESERVE: "Reserve",
    DriverStatus.FREE_AGENT: "Free Agent",
    DriverStatus.RETIRED: "Retired",
}


@dataclass
class Driver:
    """A racing driver; ``id`` is -1 until the driver has been stored."""

    name: str
    date_of_birth: date
    nationality: str
    career_points: int = 0
    career_wins: int = 0
    career_podiums: int = 0
    career_pole_positions: int = 0
    status: DriverStatus = DriverStatus.FREE_AGENT
    id: int = field(default=-1, kw_only=True)

    def formatted_date_of_birth(self) -> str:
        """Date of birth as YYYY-MM-DD."""
        return self.date_of_birth.strftime("%Y-%m-%d")

    def status_string(self) -> str:
        """Human-readable status label."""
        return _STATUS_LABELS.get(self.status, "Unknown")

    def age(self, today: date | None = None) -> int:
        """Age in whole years on ``today`` (defaults to the current date)."""
        today = today or date.today()
        born = self.date_of_birth
        years = today.year - born.year
        if (today.month, today.day) < (born.month, born.day):
            years -= 1
        return years

    def performance_index(self, today: date | None = None) -> float:
        """Career-based performance rating, adjusted for very young or old drivers."""
        index = self.career_points * 0.1
        index += self.career_wins * 5
        index += self.career_podiums * 2.5
        index += self.career_pole_positions * 2

        years = self.age(today)
        if years < 24:
            index *= 0.85 + (years - 20) * 0.07
        elif years > 36:
            index *= 1.0 - (years - 36) * 0.05
        return index