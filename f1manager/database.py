"""SQLite storage for drivers, teams, contracts and race results."""

from __future__ import annotations

import logging
import os
import sqlite3
from datetime import datetime, time
from types import TracebackType

from f1manager.contract import Contract
from f1manager.driver import Driver

log = logging.getLogger(__name__)

_SCHEMA = (
    """CREATE TABLE IF NOT EXISTS drivers (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        date_of_birth INTEGER NOT NULL,
        nationality TEXT NOT NULL,
        career_points INTEGER NOT NULL,
        career_wins INTEGER NOT NULL,
        career_podiums INTEGER NOT NULL,
        career_pole_positions INTEGER NOT NULL,
        status INTEGER NOT NULL)""",
    """CREATE TABLE IF NOT EXISTS teams (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        nationality TEXT NOT NULL,
        founded_year INTEGER NOT NULL,
        championships INTEGER NOT NULL,
        yearly_budget REAL NOT NULL,
        driver_budget REAL NOT NULL)""",
    """CREATE TABLE IF NOT EXISTS contracts (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        driver_id INTEGER NOT NULL,
        team_id INTEGER NOT NULL,
        role INTEGER NOT NULL,
        start_year INTEGER NOT NULL,
        end_year INTEGER NOT NULL,
        yearly_salary REAL NOT NULL,
        performance_bonus REAL NOT NULL,
        FOREIGN KEY (driver_id) REFERENCES drivers (id),
        FOREIGN KEY (team_id) REFERENCES teams (id))""",
    """CREATE TABLE IF NOT EXISTS race_results (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        driver_id INTEGER NOT NULL,
        team_id INTEGER NOT NULL,
        race_name TEXT NOT NULL,
        season INTEGER NOT NULL,
        race_date INTEGER NOT NULL,
        position INTEGER NOT NULL,
        points INTEGER NOT NULL,
        fastest_lap INTEGER NOT NULL,
        grid_position INTEGER NOT NULL,
        FOREIGN KEY (driver_id) REFERENCES drivers (id),
        FOREIGN KEY (team_id) REFERENCES teams (id))""",
)


class DatabaseError(Exception):
    """The database could not be opened or a statement failed."""


class DatabaseManager:
    """Owns the SQLite connection; every statement is committed immediately."""

    def __init__(self, db_path: str | os.PathLike[str]) -> None:
        self.db_path = db_path
        self._conn: sqlite3.Connection | None = None

    def initialize(self) -> None:
        """Open the database and create any missing tables."""
        try:
            self._conn = sqlite3.connect(self.db_path, isolation_level=None)
        except sqlite3.Error as exc:
            log.error("Can't open database: %s", exc)
            raise DatabaseError(f"Can't open database: {exc}") from exc
        for statement in _SCHEMA:
            self._execute(statement)

    def close(self) -> None:
        """Close the connection if it is open."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> DatabaseManager:
        self.initialize()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        if self._conn is None:
            raise DatabaseError("database is not open")
        try:
            return self._conn.execute(sql, params)
        except sqlite3.Error as exc:
            log.error("SQL error: %s", exc)
            raise DatabaseError(f"SQL error: {exc}") from exc

    def add_driver(self, driver: Driver) -> None:
        """Insert a driver and set its ``id`` to the new row id."""
        born = int(datetime.combine(driver.date_of_birth, time()).timestamp())
        cursor = self._execute(
            "INSERT INTO drivers (name, date_of_birth, nationality, career_points, "
            "career_wins, career_podiums, career_pole_positions, status) "
            "VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
            (
                driver.name,
                born,
                driver.nationality,
                driver.career_points,
                driver.career_wins,
                driver.career_podiums,
                driver.career_pole_positions,
                int(driver.status),
            ),
        )
        driver.id = cursor.lastrowid

    def update_contract(self, contract: Contract) -> None:
        """Overwrite the stored contract with the same ``id``."""
        self._execute(
            "UPDATE contracts SET driver_id = ?, team_id = ?, role = ?, "
            "start_year = ?, end_year = ?, yearly_salary = ?, performance_bonus = ? "
            "WHERE id = ?",
            (
                contract.driver_id,
                contract.team_id,
                int(contract.role),
                contract.start_year,
                contract.end_year,
                contract.yearly_salary,
                contract.performance_bonus,
                contract.id,
            ),
        )

    def delete_contract(self, contract_id: int) -> None:
        """Remove a contract by id."""
        self._execute("DELETE FROM contracts WHERE id = ?", (contract_id,))

    def delete_driver(self, driver_id: int) -> None:
        """Remove a driver by id."""
        self._execute("DELETE FROM drivers WHERE id = ?", (driver_id,))