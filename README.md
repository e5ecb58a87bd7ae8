# f1manager

`f1manager` provides building blocks for a Formula 1 team management
simulation:

- **Models** (`f1manager.driver`, `f1manager.team`, `f1manager.contract`,
  `f1manager.race_result`) for drivers, teams, contracts and race results,
  with derived figures such as a driver's age and performance index, a
  contract's duration and total value, or whether a race result was a podium.
- **`F1Api`** (`f1manager.api`), a small HTTP client that fetches drivers,
  teams and race results from a JSON API and turns them into model objects.
- **`DatabaseManager`** (`f1manager.database`), SQLite storage with a schema
  for drivers, teams, contracts and race results.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Models

All models are dataclasses. Objects not yet stored have an `id` of `-1`;
`id` is a keyword-only field.

```python
from datetime import date, datetime
from f1manager.driver import Driver, DriverStatus
from f1manager.team import Team
from f1manager.contract import Contract, ContractRole
from f1manager.race_result import RaceResult

driver = Driver(
    name="Test Driver",
    date_of_birth=date(1997, 9, 30),
    nationality="Example",
    career_points=1200,
    career_wins=10,
    career_podiums=40,
    career_pole_positions=8,
    status=DriverStatus.ACTIVE,
)
print(driver.status_string())             # "Active"
print(driver.formatted_date_of_birth())   # "1997-09-30"
print(driver.age(date(2024, 6, 1)))       # 26
print(driver.performance_index(date(2024, 6, 1)))

team = Team(name="Example Racing", nationality="Example", founded_year=1980,
            yearly_budget=100.0, driver_budget=25.0)
print(team.age(2024))                     # 44
print(team.driver_budget_percentage())    # 25.0

contract = Contract(driver_id=1, team_id=1, start_year=2024, end_year=2026,
                    yearly_salary=10.0, performance_bonus=5.0,
                    role=ContractRole.MAIN_DRIVER)
print(contract.role_string())             # "Main Driver"
print(contract.duration())                # 3
print(contract.total_value())             # 35.0
print(contract.is_active(2025))           # True
print(contract.is_expiring(2026))         # True

result = RaceResult(driver_id=1, team_id=1, race_name="Example GP", season=2024,
                    race_date=datetime(2024, 5, 26, 15, 0), position=2,
                    points=18, fastest_lap=False, grid_position=5)
print(result.formatted_race_date())       # "2024-05-26 15:00:00"
print(result.positions_gained())          # 3
print(result.is_podium(), result.is_win(), result.is_point_scoring())
```

Notes on the derived figures:

- `Driver.age()`, `Driver.performance_index()`, `Team.age()`,
  `Contract.is_active()` and `Contract.is_expiring()` default to the current
  date or year when no argument is given.
- `Driver.performance_index()` sums points × 0.1, wins × 5, podiums × 2.5 and
  poles × 2, then scales the total for drivers younger than 24 or older
  than 36.
- `Team.driver_budget_percentage()` returns `0.0` when the yearly budget is
  not positive.
- `Contract.duration()` counts both the start and the end season.

## Fetching data

```python
from f1manager.api import F1Api

api = F1Api("https://api.example.com", api_key="placeholder")
drivers = api.fetch_drivers()
swiss = api.fetch_drivers_by_nationality("Swiss")
team = api.fetch_team_by_id(3)            # None when not found or on error
results = api.fetch_race_results(2024)
own = api.fetch_race_results_for_driver(7, 2024)
team_results = api.fetch_race_results_for_team(3, 2024)
```

Every request is a GET carrying `Authorization: Bearer <api_key>`. The
endpoints used are `/drivers`, `/drivers/<id>`, `/team`, `/teams/<id>` and
`/results`, with filters passed as query parameters. `F1Api` also accepts a
`requests.Session` through `session=` and a `timeout` in seconds
(default 10).

The fetch methods never raise: a non-200 status, a network error or a
malformed response is logged and yields an empty list, or `None` for the
single-record methods. The conversions `driver_from_json`, `team_from_json`
and `race_result_from_json` are public and can be used on their own; an
unknown driver status string maps to `DriverStatus.RETIRED`. `ApiError` is
the exception used internally for a non-200 answer.

## Storage

```python
from f1manager.database import DatabaseManager

with DatabaseManager("f1.db") as db:
    db.add_driver(driver)                 # assigns driver.id
    db.update_contract(contract)          # overwrites the row with contract.id
    db.delete_contract(contract.id)
    db.delete_driver(driver.id)
```

`initialize()` (called on entering the `with` block) opens the database and
creates the `drivers`, `teams`, `contracts` and `race_results` tables if they
are missing; `close()` closes it. A driver's date of birth is stored as the
Unix timestamp of local midnight on that day. Every statement is committed at
once. Failure to open the database, any SQL error, or use before
`initialize()` raises `DatabaseError`.

## What this package does not do

- `DatabaseManager` can add and delete drivers and update and delete
  contracts, but it does not read any records back, and it has no methods
  for adding contracts or for storing teams or race results, although their
  tables are created.
- There is no command-line program; the package is used as a library.