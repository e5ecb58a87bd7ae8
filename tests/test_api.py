import logging
from datetime import date, datetime

import pytest
import responses
from responses import matchers

from f1manager.api import (
    F1Api,
    driver_from_json,
    race_result_from_json,
    team_from_json,
)
from f1manager.driver import DriverStatus

BASE = "http://api.example.com"


def driver_record(driver_id=7, status="active"):
    return {
        "id": driver_id,
        "name": "Test Driver",
        "dateOfBirth": "1997-09-30",
        "nationality": "British",
        "careerPoints": 120,
        "careerWins": 3,
        "careerPodiums": 9,
        "careerPolePositions": 4,
        "status": status,
    }


def team_record(team_id=2):
    return {
        "id": team_id,
        "name": "Test Team",
        "nationality": "Italian",
        "foundedYear": 1950,
        "championships": 5,
        "yearlyBudget": 200.5,
        "driverBudget": 40.25,
    }


def result_record(result_id=11):
    return {
        "id": result_id,
        "driverId": 7,
        "teamId": 2,
        "raceName": "Test Grand Prix",
        "season": 2023,
        "raceDate": "2023-03-05",
        "position": 2,
        "points": 18,
        "fastestLap": True,
        "gridPosition": 5,
    }


@pytest.fixture
def api():
    return F1Api(BASE, api_key="placeholder")


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def test_driver_from_json_fields():
    driver = driver_from_json(driver_record())
    assert driver.id == 7
    assert driver.name == "Test Driver"
    assert driver.date_of_birth == date(1997, 9, 30)
    assert driver.nationality == "British"
    assert driver.career_points == 120
    assert driver.career_wins == 3
    assert driver.career_podiums == 9
    assert driver.career_pole_positions == 4
    assert driver.status is DriverStatus.ACTIVE


@pytest.mark.parametrize(
    "text, expected",
    [
        ("active", DriverStatus.ACTIVE),
        ("reserve", DriverStatus.RESERVE),
        ("free_agent", DriverStatus.FREE_AGENT),
        ("retired", DriverStatus.RETIRED),
        ("something_else", DriverStatus.RETIRED),
    ],
)
def test_driver_status_mapping(text, expected):
    assert driver_from_json(driver_record(status=text)).status is expected


def test_driver_from_json_missing_field():
    record = driver_record()
    del record["name"]
    with pytest.raises(KeyError):
        driver_from_json(record)


def test_team_from_json_fields():
    team = team_from_json(team_record())
    assert team.id == 2
    assert team.name == "Test Team"
    assert team.nationality == "Italian"
    assert team.founded_year == 1950
    assert team.championships == 5
    assert team.yearly_budget == 200.5
    assert team.driver_budget == 40.25


def test_race_result_from_json_fields():
    result = race_result_from_json(result_record())
    assert result.id == 11
    assert result.driver_id == 7
    assert result.team_id == 2
    assert result.race_name == "Test Grand Prix"
    assert result.season == 2023
    assert result.race_date == datetime(2023, 3, 5)
    assert result.position == 2
    assert result.points == 18
    assert result.fastest_lap is True
    assert result.grid_position == 5


def test_fetch_drivers_sends_bearer_key(api, mocked):
    mocked.get(
        f"{BASE}/drivers",
        json={"drivers": [driver_record(1), driver_record(2)]},
    )
    drivers = api.fetch_drivers()
    assert [d.id for d in drivers] == [1, 2]
    assert mocked.calls[0].request.headers["Authorization"] == "Bearer placeholder"


def test_fetch_drivers_invalid_format_gives_empty(api, mocked):
    mocked.get(f"{BASE}/drivers", json={"drivers": {"not": "a list"}})
    assert api.fetch_drivers() == []


def test_fetch_drivers_http_error_gives_empty_and_logs(api, mocked, caplog):
    mocked.get(f"{BASE}/drivers", status=500)
    with caplog.at_level(logging.ERROR, logger="f1manager.api"):
        assert api.fetch_drivers() == []
    assert "500" in caplog.text


def test_fetch_drivers_connection_error_gives_empty(api, mocked):
    assert api.fetch_drivers() == []


def test_fetch_drivers_keeps_records_before_bad_one(api, mocked):
    bad = driver_record(3)
    del bad["status"]
    mocked.get(f"{BASE}/drivers", json={"drivers": [driver_record(1), bad]})
    assert [d.id for d in api.fetch_drivers()] == [1]


def test_fetch_driver_by_id(api, mocked):
    mocked.get(f"{BASE}/drivers/7", json={"driver": driver_record(7)})
    driver = api.fetch_driver_by_id(7)
    assert driver.id == 7
    assert driver.name == "Test Driver"


def test_fetch_driver_by_id_missing_key(api, mocked):
    mocked.get(f"{BASE}/drivers/7", json={"other": 1})
    assert api.fetch_driver_by_id(7) is None


def test_fetch_driver_by_id_not_found(api, mocked):
    mocked.get(f"{BASE}/drivers/8", status=404)
    assert api.fetch_driver_by_id(8) is None


def test_fetch_drivers_by_nationality(api, mocked):
    mocked.get(
        f"{BASE}/drivers",
        json={"drivers": [driver_record(4)]},
        match=[matchers.query_param_matcher({"nationality": "British"})],
    )
    drivers = api.fetch_drivers_by_nationality("British")
    assert [d.nationality for d in drivers] == ["British"]


def test_fetch_teams_uses_team_endpoint(api, mocked):
    mocked.get(f"{BASE}/team", json={"teams": [team_record(2), team_record(3)]})
    assert [t.id for t in api.fetch_teams()] == [2, 3]


def test_fetch_teams_invalid_format(api, mocked):
    mocked.get(f"{BASE}/team", json=[team_record()])
    assert api.fetch_teams() == []


def test_fetch_team_by_id(api, mocked):
    mocked.get(f"{BASE}/teams/2", json={"team": team_record(2)})
    team = api.fetch_team_by_id(2)
    assert team.id == 2
    assert team.name == "Test Team"


def test_fetch_team_by_id_error(api, mocked):
    mocked.get(f"{BASE}/teams/2", body="not json")
    assert api.fetch_team_by_id(2) is None


def test_fetch_race_results(api, mocked):
    mocked.get(
        f"{BASE}/results",
        json={"results": [result_record(11), result_record(12)]},
        match=[matchers.query_param_matcher({"season": "2023"})],
    )
    assert [r.id for r in api.fetch_race_results(2023)] == [11, 12]


def test_fetch_race_results_invalid_format(api, mocked):
    mocked.get(f"{BASE}/results", json={"results": None})
    assert api.fetch_race_results(2023) == []


def test_fetch_race_results_for_driver(api, mocked):
    mocked.get(
        f"{BASE}/results",
        json={"results": [result_record(11)]},
        match=[matchers.query_param_matcher({"driver": "7", "season": "2023"})],
    )
    results = api.fetch_race_results_for_driver(7, 2023)
    assert [r.driver_id for r in results] == [7]


def test_fetch_race_results_for_team(api, mocked):
    mocked.get(
        f"{BASE}/results",
        json={"results": [result_record(11)]},
        match=[matchers.query_param_matcher({"team": "2", "season": "2023"})],
    )
    results = api.fetch_race_results_for_team(2, 2023)
    assert [r.team_id for r in results] == [2]


def test_trailing_slash_trimmed():
    client = F1Api(BASE + "/", api_key="placeholder")
    assert client.base_url == BASE