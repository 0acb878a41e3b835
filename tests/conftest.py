"""Shared fixtures for roster-week tests."""

import pytest
from pathlib import Path

from roster_week.models import RosterConfig, RosterWeek, ShiftDefinition
from roster_week.roster import RosterBuilder


@pytest.fixture
def shift_catalog() -> list[ShiftDefinition]:
    """Three shifts, deliberately listed out of id order."""
    return [
        ShiftDefinition(id=2, hour_start="14:00", hour_end="22:00"),
        ShiftDefinition(id=1, hour_start="06:00", hour_end="14:00"),
        ShiftDefinition(id=3, hour_start="22:00", hour_end="06:00"),
    ]


@pytest.fixture
def small_config(shift_catalog: list[ShiftDefinition]) -> RosterConfig:
    """Three people over a two-day week."""
    return RosterConfig(
        title="Small roster",
        shifts=shift_catalog,
        team_list=["A", "B", "C"],
        roster_matrix=[[1, 2], [1, 1], [2, 1]],
    )


@pytest.fixture
def weekly_config(shift_catalog: list[ShiftDefinition]) -> RosterConfig:
    """Four people over a full Monday-Sunday week."""
    return RosterConfig(
        title="Support roster",
        shifts=shift_catalog,
        team_list=["Alice", "Bob", "Carol", "Dan"],
        roster_matrix=[
            [1, 1, 1, 1, 1, 2, 2],
            [2, 2, 2, 2, 2, 1, 1],
            [1, 1, 3, 3, 3, 1, 1],
            [2, 2, 2, 1, 1, 3, 3],
        ],
    )


@pytest.fixture
def weekly_roster(weekly_config: RosterConfig) -> RosterWeek:
    """Roster for week 10 of 2024 (Mon 04/03 to Sun 10/03)."""
    return RosterBuilder(weekly_config).build(2024, 10)


@pytest.fixture
def write_yaml(tmp_path: Path):
    """Write YAML content to a temporary file and return the path."""

    def _write(content: str, name: str = "roster.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write
