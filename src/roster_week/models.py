"""
Data models for the weekly roster.
"""

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import List


@dataclass(frozen=True)
class ShiftDefinition:
    """A named shift with its working hours."""

    id: int
    hour_start: str  # HH:MM
    hour_end: str  # HH:MM

    @property
    def label(self) -> str:
        """Display label, e.g. '1 (06:00-14:00)'."""
        return f"{self.id} ({self.hour_start}-{self.hour_end})"


@dataclass
class RosterConfig:
    """Static roster definition loaded from configuration."""

    title: str
    shifts: List[ShiftDefinition]
    team_list: List[str]
    roster_matrix: List[List[int]]

    @property
    def week_length(self) -> int:
        """Number of day columns in the matrix (0 if the matrix is empty)."""
        return len(self.roster_matrix[0]) if self.roster_matrix else 0

    @property
    def shift_ids(self) -> List[int]:
        """Ids of all defined shifts, ascending."""
        return sorted(shift.id for shift in self.shifts)

    def get_shift(self, shift_id: int) -> ShiftDefinition:
        """Get a shift definition by id."""
        for shift in self.shifts:
            if shift.id == shift_id:
                return shift
        raise ValueError(f"Shift {shift_id} not found")


@dataclass
class PersonRow:
    """One team member and the shift id worked on each day."""

    name: str
    shifts_per_day: List[int]


@dataclass
class ShiftRow:
    """One shift and the names working it on each day.

    An empty string means nobody works the shift that day. Co-assigned
    names are joined with a line break in row order.
    """

    shift_id: int
    names_per_day: List[str] = field(default_factory=list)

    def names_on(self, day_index: int) -> List[str]:
        """Names assigned to this shift on a given day."""
        value = self.names_per_day[day_index]
        return value.split("\n") if value else []


@dataclass
class WeekLabel:
    """Human-readable description of the calendar week."""

    year: str
    week: str
    start_date: str  # DD/MM
    end_date: str  # DD/MM
    monday: date
    sunday: date

    @classmethod
    def from_dates(
        cls, year: int, iso_week: int, monday: date, sunday: date
    ) -> "WeekLabel":
        return cls(
            year=str(year),
            week=str(iso_week),
            start_date=monday.strftime("%d/%m"),
            end_date=sunday.strftime("%d/%m"),
            monday=monday,
            sunday=sunday,
        )

    def day_dates(self, count: int) -> List[date]:
        """Dates of the first `count` days starting on Monday."""
        return [self.monday + timedelta(days=k) for k in range(count)]


@dataclass
class RosterWeek:
    """Complete roster for one week, ready for presentation."""

    title: str
    week_label: WeekLabel
    sorted_shift_catalog: List[ShiftDefinition]
    person_rows: List[PersonRow]
    shift_rows: List[ShiftRow]

    @property
    def team_order(self) -> List[str]:
        """Team member names in rotated display order."""
        return [row.name for row in self.person_rows]

    @property
    def week_length(self) -> int:
        return len(self.person_rows[0].shifts_per_day) if self.person_rows else 0

    def get_shift_row(self, shift_id: int) -> ShiftRow:
        """Get the shift-view row for a shift id."""
        for row in self.shift_rows:
            if row.shift_id == shift_id:
                return row
        raise ValueError(f"Shift {shift_id} not found in roster")
