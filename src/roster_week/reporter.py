"""
Console output formatting for weekly rosters.
"""

import pandas as pd
from typing import List

from .models import RosterWeek

DAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def day_labels(roster: RosterWeek) -> List[str]:
    """Column labels for each day of the roster, e.g. 'Mon 04/03'."""
    return [
        f"{DAY_NAMES[d.weekday()]} {d.strftime('%d/%m')}"
        for d in roster.week_label.day_dates(roster.week_length)
    ]


def person_view_frame(roster: RosterWeek) -> pd.DataFrame:
    """Person view as a DataFrame indexed by name, one column per day."""
    df = pd.DataFrame(
        [row.shifts_per_day for row in roster.person_rows],
        index=pd.Index(roster.team_order, name="Name"),
        columns=day_labels(roster),
    )
    return df


def shift_view_frame(roster: RosterWeek, separator: str = "\n") -> pd.DataFrame:
    """Shift view as a DataFrame indexed by shift id, one column per day.

    Co-assigned names are re-joined with `separator`.
    """
    data = [
        [separator.join(row.names_on(k)) for k in range(len(row.names_per_day))]
        for row in roster.shift_rows
    ]
    return pd.DataFrame(
        data,
        index=pd.Index([row.shift_id for row in roster.shift_rows], name="Shift"),
        columns=day_labels(roster),
    )


def shift_catalog_frame(roster: RosterWeek) -> pd.DataFrame:
    """Shift catalog as a DataFrame indexed by shift id."""
    data = [
        {"Shift": shift.id, "Start": shift.hour_start, "End": shift.hour_end}
        for shift in roster.sorted_shift_catalog
    ]
    return pd.DataFrame(data, columns=["Shift", "Start", "End"]).set_index("Shift")


class RosterReporter:
    """Formats and displays a weekly roster."""

    def __init__(self, roster: RosterWeek):
        self.roster = roster

    def print_report(self, quiet: bool) -> None:
        """Print complete roster report."""
        self._print_header()
        self._print_shift_catalog()

        if not quiet:
            self._print_person_view()
            self._print_shift_view()

    def _print_title(self, title: str) -> None:
        print("=" * 80)
        print(title)
        print("=" * 80)

    def _print_header(self) -> None:
        """Print report header."""
        label = self.roster.week_label
        self._print_title(self.roster.title.upper())

        print(f"\nYear: {label.year}  Week: {label.week}")
        print(f"From {label.start_date} to {label.end_date}")
        print()

    def _print_shift_catalog(self) -> None:
        self._print_title("SHIFTS")

        if not self.roster.sorted_shift_catalog:
            print("\n  No shifts defined")
            print()
            return

        print(shift_catalog_frame(self.roster).to_string())
        print()

    def _print_person_view(self) -> None:
        """Print shift id per person and day."""
        self._print_title("ROSTER BY PERSON")
        print(person_view_frame(self.roster).to_string())
        print()

    def _print_shift_view(self) -> None:
        """Print names per shift and day."""
        self._print_title("ROSTER BY SHIFT")

        if not self.roster.shift_rows:
            print("\n  No shifts assigned this week")
            print()
            return

        print(shift_view_frame(self.roster, separator=", ").to_string())
        print()
