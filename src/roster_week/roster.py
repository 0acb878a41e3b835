"""
Assembly of a weekly roster from a loaded configuration.
"""

from typing import List

from .models import RosterConfig, RosterWeek, WeekLabel
from .pivot import pivot
from .rotation import rotate_team, rotation_offset
from .week import resolve_week


class RosterBuilder:
    """Builds the person and shift views of the roster for a given week."""

    def __init__(self, config: RosterConfig):
        self.config = config
        self.rotated_names: List[str] | None = None
        self._roster: RosterWeek | None = None

    def build(self, year: int, iso_week: int) -> RosterWeek:
        """
        Compute the roster for an ISO week.

        Args:
            year: Calendar year
            iso_week: ISO week number

        Returns:
            RosterWeek with week label, sorted shifts and both views

        Raises:
            InvalidWeekError: If the week does not exist in `year`
            EmptyRosterError: If the team list is empty
            InconsistentMatrixShapeError: If the matrix does not fit the team
        """
        cfg = self.config

        monday, sunday = resolve_week(year, iso_week)
        self.rotated_names = rotate_team(cfg.team_list, iso_week)

        person_rows, shift_rows = pivot(
            self.rotated_names, cfg.roster_matrix, cfg.shifts
        )

        self._roster = RosterWeek(
            title=cfg.title,
            week_label=WeekLabel.from_dates(year, iso_week, monday, sunday),
            sorted_shift_catalog=sorted(cfg.shifts, key=lambda s: s.id),
            person_rows=person_rows,
            shift_rows=shift_rows,
        )
        return self._roster

    @property
    def roster(self) -> RosterWeek:
        """
        Get the last built roster.

        Raises:
            RuntimeError: If build() hasn't been called yet
        """
        if self._roster is None:
            raise RuntimeError("Roster not built. Call build() first.")
        return self._roster

    def get_summary(self) -> str:
        """Human-readable summary of the last built roster."""
        roster = self.roster
        label = roster.week_label
        offset = rotation_offset(len(self.config.team_list), int(label.week))

        lines = [
            f"Week {label.week} of {label.year}: {label.start_date} to {label.end_date}",
            f"Rotation offset: {offset} (first row: {roster.team_order[0]})",
            f"Shifts in use: {', '.join(str(r.shift_id) for r in roster.shift_rows)}",
        ]
        return "\n".join(lines)
