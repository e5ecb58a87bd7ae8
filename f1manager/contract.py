"""Driver contract model."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import date


class ContractRole(enum.IntEnum):
    """The seat a contract gives a driver."""

    MAIN_DRIVER = 0
    SECOND_DRIVER = 1
    RESERVE_DRIVER = 2
    TEST_DRIVER = 3


_ROLE_LABELS = {
    ContractRole.MAIN_DRIVER: "Main Driver",
    ContractRole.SECOND_DRIVER: "Second Driver",
    ContractRole.RESERVE_DRIVER: "Reserve Driver",
    ContractRole.TEST_DRIVER: "Test Driver",
}


def _current_year() -> int:
    return date.today().year


@dataclass
class Contract:
    """A contract between a driver and a team covering whole seasons."""

    driver_id: int
    team_id: int
    start_year: int
    end_year: int
    yearly_salary: float
    performance_bonus: float
    role: ContractRole = ContractRole.MAIN_DRIVER
    id: int = field(default=-1, kw_only=True)

    def role_string(self) -> str:
        """Human-readable role label."""
        return _ROLE_LABELS.get(self.role, "Unknown Role")

    def duration(self) -> int:
        """Number of seasons covered, both ends included."""
        return self.end_year - self.start_year + 1

    def total_value(self) -> float:
        """Salary over the whole contract plus the performance bonus."""
        return self.yearly_salary * self.duration() + self.performance_bonus

    def is_active(self, year: int | None = None) -> bool:
        """Whether ``year`` (default: this year) falls within the contract."""
        if year is None:
            year = _current_year()
        return self.start_year <= year <= self.end_year

    def is_expiring(self, year: int | None = None) -> bool:
        """Whether ``year`` (default: this year) is the contract's last season."""
        if year is None:
            year = _current_year()
        return year == self.end_year