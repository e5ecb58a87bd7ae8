"""Client for the remote F1 statistics service."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Callable, TypeVar

import requests

from f1manager.driver import Driver, DriverStatus
from f1manager.race_result import RaceResult
from f1manager.team import Team

log = logging.getLogger(__name__)

T = TypeVar("T")

_DATE_FORMAT = "%Y-%m-%d"

_STATUS_BY_NAME = {
    "active": DriverStatus.ACTIVE,
    "reserve": DriverStatus.RESERVE,
    "free_agent": DriverStatus.FREE_AGENT,
}

# Failures that a single request or record conversion may raise.
_FETCH_ERRORS = (requests.RequestException, ValueError, KeyError, TypeError)


class ApiError(Exception):
    """The service answered with a status other than 200 OK."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Failed to fetch data from API: {status_code}")
        self.status_code = status_code


def _parse_date(text: str) -> date:
    return datetime.strptime(text, _DATE_FORMAT).date()


def driver_from_json(data: dict[str, Any]) -> Driver:
    """Build a :class:`Driver` from a service record."""
    status = _STATUS_BY_NAME.get(str(data["status"]), DriverStatus.RETIRED)
    return Driver(
        name=str(data["name"]),
        date_of_birth=_parse_date(data["dateOfBirth"]),
        nationality=str(data["nationality"]),
        career_points=int(data["careerPoints"]),
        career_wins=int(data["careerWins"]),
        career_podiums=int(data["careerPodiums"]),
        career_pole_positions=int(data["careerPolePositions"]),
        status=status,
        id=int(data["id"]),
    )


def team_from_json(data: dict[str, Any]) -> Team:
    """Build a :class:`Team` from a service record."""
    return Team(
        name=str(data["name"]),
        nationality=str(data["nationality"]),
        founded_year=int(data["foundedYear"]),
        championships=int(data["championships"]),
        yearly_budget=float(data["yearlyBudget"]),
        driver_budget=float(data["driverBudget"]),
        id=int(data["id"]),
    )


def race_result_from_json(data: dict[str, Any]) -> RaceResult:
    """Build a :class:`RaceResult` from a service record."""
    return RaceResult(
        driver_id=int(data["driverId"]),
        team_id=int(data["teamId"]),
        race_name=str(data["raceName"]),
        season=int(data["season"]),
        race_date=datetime.strptime(data["raceDate"], _DATE_FORMAT),
        position=int(data["position"]),
        points=int(data["points"]),
        fastest_lap=bool(data["fastestLap"]),
        grid_position=int(data["gridPosition"]),
        id=int(data["id"]),
    )


class F1Api:
    """Reads drivers, teams and race results from the statistics service.

    Fetch methods never raise: failures are logged and an empty list (or
    ``None`` for single records) is returned.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str = "placeholder",
        *,
        session: requests.Session | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._session = session or requests.Session()

    def _get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        response = self._session.get(
            self.base_url + path,
            params=params,
            headers={"Authorization": f"Bearer {self.api_key}"},
            timeout=self.timeout,
        )
        if response.status_code != 200:
            raise ApiError(response.status_code)
        return response.json()

    def _fetch_list(
        self,
        path: str,
        key: str,
        convert: Callable[[dict[str, Any]], T],
        what: str,
        params: dict[str, Any] | None = None,
    ) -> list[T]:
        items: list[T] = []
        try:
            payload = self._get_json(path, params)
            records = payload.get(key) if isinstance(payload, dict) else None
            if not isinstance(records, list):
                log.error("Invalid response format for %s: %s", what, payload)
                return items
            for record in records:
                items.append(convert(record))
        except (ApiError, *_FETCH_ERRORS) as exc:
            log.error("Error in fetching %s: %s", what, exc)
        return items

    def _fetch_one(
        self,
        path: str,
        key: str,
        convert: Callable[[dict[str, Any]], T],
        what: str,
    ) -> T | None:
        try:
            payload = self._get_json(path)
            if isinstance(payload, dict) and key in payload:
                return convert(payload[key])
            log.error("Invalid response format for %s", what)
        except (ApiError, *_FETCH_ERRORS) as exc:
            log.error("Error in fetching %s: %s", what, exc)
        return None

    def fetch_drivers(self) -> list[Driver]:
        """All drivers known to the service."""
        return self._fetch_list("/drivers", "drivers", driver_from_json, "drivers")

    def fetch_driver_by_id(self, driver_id: int) -> Driver | None:
        """One driver, or ``None`` if it could not be fetched."""
        return self._fetch_one(
            f"/drivers/{driver_id}", "driver", driver_from_json, f"driver {driver_id}"
        )

    def fetch_drivers_by_nationality(self, nationality: str) -> list[Driver]:
        """Drivers of the given nationality."""
        return self._fetch_list(
            "/drivers",
            "drivers",
            driver_from_json,
            "drivers by nationality",
            {"nationality": nationality},
        )

    def fetch_teams(self) -> list[Team]:
        """All teams known to the service."""
        return self._fetch_list("/team", "teams", team_from_json, "teams")

    def fetch_team_by_id(self, team_id: int) -> Team | None:
        """One team, or ``None`` if it could not be fetched."""
        return self._fetch_one(
            f"/teams/{team_id}", "team", team_from_json, f"team {team_id}"
        )

    def fetch_race_results(self, season: int) -> list[RaceResult]:
        """All race results of a season."""
        return self._fetch_list(
            "/results",
            "results",
            race_result_from_json,
            f"race results for season {season}",
            {"season": season},
        )

    def fetch_race_results_for_driver(
        self, driver_id: int, season: int
    ) -> list[RaceResult]:
        """A driver's race results in a season."""
        return self._fetch_list(
            "/results",
            "results",
            race_result_from_json,
            f"race results for driver {driver_id} in season {season}",
            {"driver": driver_id, "season": season},
        )

    def fetch_race_results_for_team(
        self, team_id: int, season: int
    ) -> list[RaceResult]:
        """A team's race results in a season."""
        return self._fetch_list(
            "/results",
            "results",
            race_result_from_json,
            f"race results for team {team_id} in season {season}",
            {"team": team_id, "season": season},
        )