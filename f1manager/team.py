"""Team model with budget figures."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass
class Team:
    """A racing team; ``id`` is -1 until the team has been stored."""

    name: str
    nationality: str
    founded_year: int
    championships: int = 0
    yearly_budget: float = 0.0
    driver_budget: float = 0.0
    id: int = field(default=-1, kw_only=True)

    def age(self, year: int | None = None) -> int:
        """Years since founding, as of ``year`` (defaults to the current year)."""
        if year is None:
            year = date.today().year
        return year - self.founded_year

    def driver_budget_percentage(self) -> float:
        """Share of the yearly budget spent on drivers, in percent."""
        if self.yearly_budget <= 0.0:
            return 0.0
        return self.driver_budget / self.yearly_budget * 100.0